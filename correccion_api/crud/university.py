"""
CRUD para universidades.
"""
from correccion_api.crud.base import CRUDBase
from correccion_api.models.university import University
from correccion_api.schemas.academic import UniversityCreate, UniversityUpdate


class CRUDUniversity(CRUDBase[University, UniversityCreate, UniversityUpdate]):
    """CRUD específico para universidades."""

    key_field = "university_id"
    unique_fields = ("university_id",)

    not_found_message = "Universidad no encontrada"
    conflict_message = "Ya existe una universidad con ese ID"
    deleted_conflict_message = (
        "Ya existe una universidad con ese ID (eliminada). Restáurela en lugar de crearla."
    )
    already_deleted_message = "La universidad ya está eliminada"
    not_deleted_message = "La universidad no está eliminada"
    update_deleted_message = "No se puede actualizar una universidad eliminada. Restáurela primero."


university = CRUDUniversity(University)
