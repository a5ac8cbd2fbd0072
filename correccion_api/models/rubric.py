"""
Modelo ORM para Rúbricas con soporte para Soft Delete.
"""
import enum

from sqlalchemy import Column, Integer, String, JSON, UniqueConstraint
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class RubricType(str, enum.Enum):
    """Tipos de evaluación a los que aplica una rúbrica."""
    TP = "tp"
    PARCIAL = "parcial"
    RECUPERATORIO = "recuperatorio"
    GLOBAL = "global"
    FINAL = "final"


class RubricSource(str, enum.Enum):
    """Origen del contenido de la rúbrica."""
    PDF = "pdf"
    JSON = "json"
    MANUAL = "manual"


class Rubric(Base, SoftDeleteMixin, TimestampMixin):
    """
    Rúbrica de corrección de una comisión.

    Una comisión tiene a lo sumo una rúbrica activa por tipo y número
    (ej: TP 1, parcial 2).
    """

    __tablename__ = "rubrics"

    id = Column(Integer, primary_key=True, index=True)
    rubric_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    commission_id = Column(String(100), nullable=False, index=True)
    course_id = Column(String(100), nullable=False, index=True)
    career_id = Column(String(100), nullable=False, index=True)
    faculty_id = Column(String(100), nullable=False, index=True)
    university_id = Column(String(100), nullable=False, index=True)
    rubric_type = Column(String(30), nullable=False, index=True)
    rubric_number = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False, index=True)
    rubric_json = Column(JSON, nullable=False)
    source = Column(String(20), nullable=False, default=RubricSource.MANUAL.value)
    original_file_url = Column(String(500))

    __table_args__ = (
        UniqueConstraint(
            "university_id", "faculty_id", "career_id", "course_id", "commission_id",
            "rubric_type", "rubric_number",
            name="uq_rubric_scope",
        ),
    )

    def __repr__(self):
        return f"<Rubric {self.rubric_id}>"
