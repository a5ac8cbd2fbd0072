"""
Modelo ORM para Usuarios.
"""
import enum

from sqlalchemy import Column, Integer, String
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class UserRole(str, enum.Enum):
    """Roles del sistema."""
    SUPER_ADMIN = "super-admin"
    UNIVERSITY_ADMIN = "university-admin"
    PROFESSOR = "professor"
    USER = "user"


ADMIN_ROLES = (UserRole.SUPER_ADMIN.value, UserRole.UNIVERSITY_ADMIN.value)


class User(Base, SoftDeleteMixin, TimestampMixin):
    """Modelo de Usuarios del sistema con soporte para soft delete."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(200), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(30), nullable=False, default=UserRole.USER.value)
    university_id = Column(String(100), nullable=True, index=True)

    def __repr__(self):
        return f"<User {self.username}>"

    def is_admin(self) -> bool:
        """Verificar si el usuario es administrador."""
        return self.role in ADMIN_ROLES
