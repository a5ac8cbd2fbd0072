"""
Modelo ORM para Carreras con soporte para Soft Delete.
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class Career(Base, SoftDeleteMixin, TimestampMixin):
    """Carrera dictada en una facultad."""

    __tablename__ = "careers"

    id = Column(Integer, primary_key=True, index=True)
    career_id = Column(String(100), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    faculty_id = Column(String(100), nullable=False, index=True)
    university_id = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("university_id", "faculty_id", "career_id", name="uq_career_scope"),
    )

    def __repr__(self):
        return f"<Career {self.faculty_id}/{self.career_id}>"
