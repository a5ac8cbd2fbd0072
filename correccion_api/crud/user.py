"""
CRUD para usuarios con soporte para Soft Delete.
"""
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from correccion_api.core.exceptions import (
    ProtectedResourceException,
    ValidationException,
)
from correccion_api.core.security import get_password_hash
from correccion_api.crud.base import CRUDBase
from correccion_api.models.user import User, UserRole
from correccion_api.schemas.user import UserCreate, UserUpdate


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    """
    CRUD específico para usuarios con soporte para soft delete.

    El administrador principal (root_username) no puede eliminarse ni
    cambiar su username o rol.
    """

    key_field = "username"
    unique_fields = ("username",)

    not_found_message = "Usuario no encontrado"
    conflict_message = "El nombre de usuario ya está en uso"
    deleted_conflict_message = (
        "Este nombre de usuario perteneció a una cuenta eliminada. Use otro nombre o restaure la cuenta."
    )
    already_deleted_message = "El usuario ya está eliminado"
    not_deleted_message = "El usuario no está eliminado"
    update_deleted_message = "No se puede actualizar un usuario eliminado. Restáurelo primero."

    def get_by_username(
        self, db: Session, *, username: str, include_deleted: bool = False
    ) -> Optional[User]:
        """
        Obtener usuario por username.
        Por defecto excluye usuarios eliminados (soft delete).
        """
        return self.get_by_key(db, {"username": username.lower()}, include_deleted=include_deleted)

    def prepare_create(self, db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        role = data.get("role") or UserRole.USER.value
        data["role"] = role
        data["username"] = data["username"].lower()
        data["password_hash"] = get_password_hash(data.pop("password"))

        if role == UserRole.SUPER_ADMIN.value:
            data["university_id"] = None
        elif not data.get("university_id"):
            raise ValidationException(
                "El campo university_id es requerido para roles que no sean super-admin"
            )
        return data

    def prepare_update(self, db: Session, db_obj: User, data: Dict[str, Any]) -> Dict[str, Any]:
        if "username" in data and data["username"] is not None:
            data["username"] = data["username"].lower()
        if "password" in data:
            password = data.pop("password")
            if password:
                data["password_hash"] = get_password_hash(password)

        final_role = data.get("role") or db_obj.role
        if final_role == UserRole.SUPER_ADMIN.value:
            data["university_id"] = None
        elif not data.get("university_id", db_obj.university_id):
            raise ValidationException(
                "El campo university_id es requerido para roles que no sean super-admin"
            )
        return data

    def update(
        self,
        db: Session,
        *,
        db_obj: User,
        obj_in: Any,
        root_username: str
    ) -> User:
        """
        Actualizar usuario protegiendo al administrador principal.

        Raises:
            ProtectedResourceException: Si se intenta cambiar username o rol del admin principal
        """
        if db_obj.username == root_username:
            update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
            new_username = update_data.get("username")
            if new_username and new_username.lower() != root_username:
                raise ProtectedResourceException(
                    "No se puede cambiar el username del administrador principal"
                )
            new_role = update_data.get("role")
            if new_role and new_role != db_obj.role:
                raise ProtectedResourceException(
                    "No se puede cambiar el rol del administrador principal"
                )
        return super().update(db, db_obj=db_obj, obj_in=obj_in)

    def soft_delete(
        self,
        db: Session,
        *,
        id: Any,
        root_username: str
    ) -> User:
        """
        Eliminar usuario (baja lógica).

        Raises:
            ProtectedResourceException: Si es el administrador principal
        """
        user = self.get_or_404(db, id)
        if user.username == root_username:
            raise ProtectedResourceException("No se puede eliminar el administrador principal")
        return super().soft_delete(db, id=id)


user = CRUDUser(User)
