"""
CRUD para comisiones.
"""
from correccion_api.crud.base import CRUDBase
from correccion_api.models.commission import Commission
from correccion_api.models.course import Course
from correccion_api.schemas.academic import CommissionCreate, CommissionUpdate


class CRUDCommission(CRUDBase[Commission, CommissionCreate, CommissionUpdate]):
    """CRUD específico para comisiones. El commission_id es único por curso de una carrera."""

    key_field = "commission_id"
    unique_fields = ("university_id", "faculty_id", "career_id", "course_id", "commission_id")
    parent_model = Course
    parent_fields = ("university_id", "faculty_id", "career_id", "course_id")

    not_found_message = "Comisión no encontrada"
    conflict_message = "Ya existe una comisión con ese ID en este curso"
    deleted_conflict_message = (
        "Ya existe una comisión con ese ID en este curso (eliminada). Restáurela en lugar de crearla."
    )
    parent_missing_message = "El curso especificado no existe en esa carrera"
    already_deleted_message = "La comisión ya está eliminada"
    not_deleted_message = "La comisión no está eliminada"
    update_deleted_message = "No se puede actualizar una comisión eliminada. Restáurela primero."


commission = CRUDCommission(Commission)
