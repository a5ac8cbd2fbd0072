"""
CRUD para rúbricas.
"""
import secrets
import time
from typing import Any, Dict

from sqlalchemy.orm import Session

from correccion_api.crud.base import CRUDBase
from correccion_api.models.commission import Commission
from correccion_api.models.rubric import Rubric, RubricSource
from correccion_api.schemas.rubric import RubricCreate, RubricUpdate


def generate_rubric_id(commission_id: str, rubric_type: str, rubric_number: int) -> str:
    """
    Generar un ID legible y único de rúbrica.

    Formato: {commission_id}-{tipo}-{numero}-{milisegundos}-{aleatorio}
    """
    millis = int(time.time() * 1000)
    return f"{commission_id}-{rubric_type}-{rubric_number}-{millis}-{secrets.token_hex(3)}"


class CRUDRubric(CRUDBase[Rubric, RubricCreate, RubricUpdate]):
    """
    CRUD específico para rúbricas.
    Una comisión admite una sola rúbrica por tipo y número.
    """

    key_field = "rubric_id"
    unique_fields = (
        "university_id", "faculty_id", "career_id", "course_id", "commission_id",
        "rubric_type", "rubric_number",
    )
    parent_model = Commission
    parent_fields = ("university_id", "faculty_id", "career_id", "course_id", "commission_id")

    not_found_message = "Rúbrica no encontrada"
    conflict_message = "Ya existe una rúbrica con ese tipo y número en esta comisión"
    deleted_conflict_message = (
        "Ya existe una rúbrica con ese tipo y número en esta comisión (eliminada). "
        "Restáurela en lugar de crearla."
    )
    parent_missing_message = "La comisión especificada no existe en ese curso"
    already_deleted_message = "La rúbrica ya está eliminada"
    not_deleted_message = "La rúbrica no está eliminada"
    update_deleted_message = "No se puede actualizar una rúbrica eliminada. Restáurela primero."

    def prepare_create(self, db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        data.setdefault("source", RubricSource.JSON.value)
        data["rubric_id"] = generate_rubric_id(
            data["commission_id"], data["rubric_type"], data["rubric_number"]
        )
        return data


rubric = CRUDRubric(Rubric)
