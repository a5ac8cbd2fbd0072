"""
Schemas comunes reutilizables.
"""
from datetime import datetime
from typing import Annotated, Any, ClassVar, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, BeforeValidator, Field, model_validator


T = TypeVar('T')

KEY_PATTERN = r"^[a-z0-9-]+$"


def normalize_key(value: Any) -> Any:
    """Recortar espacios y pasar a minúsculas una clave natural."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Clave natural: solo minúsculas, números y guiones
NaturalKey = Annotated[
    str,
    BeforeValidator(normalize_key),
    Field(min_length=1, max_length=100, pattern=KEY_PATTERN),
]

Name = Annotated[str, Field(min_length=1, max_length=200)]


class PartialUpdate(BaseModel):
    """
    Base para schemas de actualización parcial.

    Exige al menos un campo y rechaza null en campos obligatorios del modelo.
    """

    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_fields(self):
        if not self.model_fields_set:
            raise ValueError("Al menos un campo es requerido para actualizar")
        for field in self.model_fields_set:
            if getattr(self, field) is None and field not in self.nullable_fields:
                raise ValueError(f"El campo '{field}' no puede ser nulo")
        return self


class ListResponse(BaseModel, Generic[T]):
    """Schema de respuesta de listado."""

    success: bool = True
    count: int
    data: List[T]
    note: Optional[str] = None

    model_config = {"from_attributes": True}


class DataResponse(BaseModel, Generic[T]):
    """Schema de respuesta con un registro."""

    success: bool = True
    message: Optional[str] = None
    data: T

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Schema de respuesta con mensaje simple."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Schema de respuesta de error."""

    success: bool = False
    message: str
    error: Optional[str] = None
    errors: Optional[List[Any]] = None


class RecordResponse(BaseModel):
    """Campos comunes de toda respuesta de registro."""

    id: int
    deleted: Annotated[bool, BeforeValidator(bool)] = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
