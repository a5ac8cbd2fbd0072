"""
Base declarativa de SQLAlchemy con soporte para Soft Delete.
Todos los modelos heredan de esta clase base.
"""
from sqlalchemy import Boolean, Column, DateTime, or_
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func


class SoftDeleteMixin:
    """
    Mixin que agrega soporte para soft delete a los modelos.

    Los modelos que hereden de este mixin tendrán:
    - Campo deleted para marcar la baja lógica
    - Método soft_delete() para eliminar suavemente
    - Método restore() para restaurar
    - Propiedad is_deleted para verificar estado

    Un valor NULL en deleted equivale a False (filas anteriores a la columna).
    """

    deleted = Column(Boolean, nullable=True, default=False, index=True)

    def soft_delete(self) -> None:
        """Marca el registro como eliminado (soft delete)."""
        self.deleted = True

    def restore(self) -> None:
        """Restaura un registro eliminado."""
        self.deleted = False

    @property
    def is_deleted(self) -> bool:
        """Verifica si el registro está eliminado."""
        return bool(self.deleted)

    @classmethod
    def active_clause(cls):
        """Condición SQL que selecciona solo registros activos."""
        return or_(cls.deleted.is_(False), cls.deleted.is_(None))


class TimestampMixin:
    """Fechas de creación y modificación asignadas por la base de datos."""

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


# Base declarativa de SQLAlchemy
Base = declarative_base()
