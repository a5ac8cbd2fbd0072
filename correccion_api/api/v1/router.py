"""
Router principal de la API.
Incluye todos los endpoints de la aplicación.
"""
from fastapi import APIRouter

from correccion_api.api.v1.endpoints import (
    universities,
    faculties,
    careers,
    courses,
    commissions,
    rubrics,
    users,
)

api_router = APIRouter()

# ============================================================================
# ESTRUCTURA ACADÉMICA
# ============================================================================
api_router.include_router(
    universities.router,
    prefix="/universities",
    tags=["Universidades"]
)

api_router.include_router(
    faculties.router,
    prefix="/faculties",
    tags=["Facultades"]
)

api_router.include_router(
    careers.router,
    prefix="/careers",
    tags=["Carreras"]
)

api_router.include_router(
    courses.router,
    prefix="/courses",
    tags=["Cursos"]
)

api_router.include_router(
    commissions.router,
    prefix="/commissions",
    tags=["Comisiones"]
)

# ============================================================================
# RÚBRICAS
# ============================================================================
api_router.include_router(
    rubrics.router,
    prefix="/rubrics",
    tags=["Rúbricas"]
)

# ============================================================================
# USUARIOS (Solo Administradores)
# ============================================================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Usuarios"]
)
