"""
CRUD para carreras.
"""
from correccion_api.crud.base import CRUDBase
from correccion_api.models.career import Career
from correccion_api.models.faculty import Faculty
from correccion_api.schemas.academic import CareerCreate, CareerUpdate


class CRUDCareer(CRUDBase[Career, CareerCreate, CareerUpdate]):
    """CRUD específico para carreras."""

    key_field = "career_id"
    unique_fields = ("university_id", "faculty_id", "career_id")
    parent_model = Faculty
    parent_fields = ("university_id", "faculty_id")

    not_found_message = "Carrera no encontrada"
    conflict_message = "Ya existe una carrera con ese ID en esta facultad"
    deleted_conflict_message = (
        "Ya existe una carrera con ese ID en esta facultad (eliminada). Restáurela en lugar de crearla."
    )
    parent_missing_message = "La facultad especificada no existe en esa universidad"
    already_deleted_message = "La carrera ya está eliminada"
    not_deleted_message = "La carrera no está eliminada"
    update_deleted_message = "No se puede actualizar una carrera eliminada. Restáurela primero."


career = CRUDCareer(Career)
