"""
CRUD para cursos/materias.
"""
from correccion_api.crud.base import CRUDBase
from correccion_api.models.career import Career
from correccion_api.models.course import Course
from correccion_api.schemas.academic import CourseCreate, CourseUpdate


class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):
    """CRUD específico para cursos. El course_id es único por carrera."""

    key_field = "course_id"
    unique_fields = ("university_id", "faculty_id", "career_id", "course_id")
    parent_model = Career
    parent_fields = ("university_id", "faculty_id", "career_id")

    not_found_message = "Curso no encontrado"
    conflict_message = "Ya existe un curso con ese ID en esta carrera"
    deleted_conflict_message = (
        "Ya existe un curso con ese ID en esta carrera (eliminado). Restáurelo en lugar de crearlo."
    )
    parent_missing_message = "La carrera especificada no existe"
    already_deleted_message = "El curso ya está eliminado"
    not_deleted_message = "El curso no está eliminado"
    update_deleted_message = "No se puede actualizar un curso eliminado. Restáurelo primero."


course = CRUDCourse(Course)
