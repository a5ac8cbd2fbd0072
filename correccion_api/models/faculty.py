"""
Modelo ORM para Facultades con soporte para Soft Delete.
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class Faculty(Base, SoftDeleteMixin, TimestampMixin):
    """Facultad de una universidad."""

    __tablename__ = "faculties"

    id = Column(Integer, primary_key=True, index=True)
    faculty_id = Column(String(100), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    university_id = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("university_id", "faculty_id", name="uq_faculty_scope"),
    )

    def __repr__(self):
        return f"<Faculty {self.university_id}/{self.faculty_id}>"
