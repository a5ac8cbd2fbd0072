"""
Endpoints de la API.
"""
from correccion_api.api.v1.endpoints import (
    universities,
    faculties,
    careers,
    courses,
    commissions,
    rubrics,
    users,
)

__all__ = [
    "universities",
    "faculties",
    "careers",
    "courses",
    "commissions",
    "rubrics",
    "users",
]
