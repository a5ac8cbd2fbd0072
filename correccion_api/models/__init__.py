"""
Módulo de modelos ORM.
Importa todos los modelos para que SQLAlchemy los reconozca.
"""
from correccion_api.db.base import Base

# Estructura académica
from correccion_api.models.university import University
from correccion_api.models.faculty import Faculty
from correccion_api.models.career import Career
from correccion_api.models.course import Course
from correccion_api.models.commission import Commission

# Rúbricas
from correccion_api.models.rubric import Rubric, RubricType, RubricSource

# Usuarios
from correccion_api.models.user import User, UserRole

__all__ = [
    "Base",
    # Estructura académica
    "University",
    "Faculty",
    "Career",
    "Course",
    "Commission",
    # Rúbricas
    "Rubric",
    "RubricType",
    "RubricSource",
    # Usuarios
    "User",
    "UserRole",
]
