"""
Schemas para usuarios.
"""
from typing import Annotated, ClassVar, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, Field

from correccion_api.models.user import UserRole
from correccion_api.schemas.common import Name, NaturalKey, PartialUpdate, RecordResponse, normalize_key

Username = Annotated[
    str,
    BeforeValidator(normalize_key),
    Field(min_length=3, max_length=100, pattern=r"^[a-z0-9_-]+$"),
]

Password = Annotated[str, Field(min_length=6, max_length=72)]


class UserCreate(BaseModel):
    """Schema para crear usuario."""

    username: Username
    name: Name
    password: Password
    role: UserRole = UserRole.USER
    university_id: Optional[NaturalKey] = None

    model_config = {"use_enum_values": True}


class UserUpdate(PartialUpdate):
    """Schema para actualizar usuario."""

    nullable_fields: ClassVar[Tuple[str, ...]] = ("university_id",)

    username: Optional[Username] = None
    name: Optional[Name] = None
    password: Optional[Password] = None
    role: Optional[UserRole] = None
    university_id: Optional[NaturalKey] = None

    model_config = {"use_enum_values": True}


class UserResponse(RecordResponse):
    """Schema de respuesta de usuario (sin contraseña)."""

    username: str
    name: str
    role: str
    university_id: Optional[str] = None
