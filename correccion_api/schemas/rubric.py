"""
Schemas para rúbricas.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from correccion_api.models.rubric import RubricType
from correccion_api.schemas.common import Name, NaturalKey, PartialUpdate, RecordResponse


def check_rubric_json(value: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """El contenido de la rúbrica debe ser un objeto no vacío."""
    if value is not None and not value:
        raise ValueError("El JSON de la rúbrica no puede estar vacío")
    return value


class RubricCreate(BaseModel):
    """Schema para crear rúbrica desde JSON."""

    name: Name
    commission_id: NaturalKey
    course_id: NaturalKey
    career_id: NaturalKey
    faculty_id: NaturalKey
    university_id: NaturalKey
    rubric_type: RubricType
    rubric_number: int = Field(..., ge=1)
    year: int = Field(..., ge=1900, le=2200)
    rubric_json: Dict[str, Any]

    model_config = {"use_enum_values": True}

    check_json = field_validator("rubric_json")(check_rubric_json)


class RubricUpdate(PartialUpdate):
    """
    Schema para actualizar rúbrica.
    No se permite cambiar commission_id, rubric_type ni rubric_number.
    """

    name: Optional[Name] = None
    rubric_json: Optional[Dict[str, Any]] = None
    year: Optional[int] = Field(None, ge=1900, le=2200)

    check_json = field_validator("rubric_json")(check_rubric_json)


class RubricResponse(RecordResponse):
    """Schema de respuesta de rúbrica."""

    rubric_id: str
    name: str
    commission_id: str
    course_id: str
    career_id: str
    faculty_id: str
    university_id: str
    rubric_type: str
    rubric_number: int
    year: int
    rubric_json: Dict[str, Any]
    source: str
    original_file_url: Optional[str] = None
