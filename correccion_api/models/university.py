"""
Modelo ORM para Universidades con soporte para Soft Delete.
"""
from sqlalchemy import Column, Integer, String
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class University(Base, SoftDeleteMixin, TimestampMixin):
    """Universidad: raíz de la cadena de ámbitos."""

    __tablename__ = "universities"

    id = Column(Integer, primary_key=True, index=True)
    university_id = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(200), nullable=False)

    def __repr__(self):
        return f"<University {self.university_id}>"
