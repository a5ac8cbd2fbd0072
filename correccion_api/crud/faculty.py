"""
CRUD para facultades.
"""
from correccion_api.crud.base import CRUDBase
from correccion_api.models.faculty import Faculty
from correccion_api.models.university import University
from correccion_api.schemas.academic import FacultyCreate, FacultyUpdate


class CRUDFaculty(CRUDBase[Faculty, FacultyCreate, FacultyUpdate]):
    """CRUD específico para facultades."""

    key_field = "faculty_id"
    unique_fields = ("university_id", "faculty_id")
    parent_model = University
    parent_fields = ("university_id",)

    not_found_message = "Facultad no encontrada"
    conflict_message = "Ya existe una facultad con ese ID en esta universidad"
    deleted_conflict_message = (
        "Ya existe una facultad con ese ID en esta universidad (eliminada). Restáurela en lugar de crearla."
    )
    parent_missing_message = "La universidad especificada no existe"
    already_deleted_message = "La facultad ya está eliminada"
    not_deleted_message = "La facultad no está eliminada"
    update_deleted_message = "No se puede actualizar una facultad eliminada. Restáurela primero."


faculty = CRUDFaculty(Faculty)
