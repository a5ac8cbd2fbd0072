"""
Modelo ORM para Comisiones con soporte para Soft Delete.
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint, Index
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class Commission(Base, SoftDeleteMixin, TimestampMixin):
    """Comisión (división) de un curso, con su profesor a cargo."""

    __tablename__ = "commissions"

    id = Column(Integer, primary_key=True, index=True)
    commission_id = Column(String(100), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    year = Column(Integer, nullable=False, index=True)
    course_id = Column(String(100), nullable=False, index=True)
    career_id = Column(String(100), nullable=False, index=True)
    faculty_id = Column(String(100), nullable=False, index=True)
    university_id = Column(String(100), nullable=False, index=True)
    professor_name = Column(String(200))
    professor_email = Column(String(255))

    __table_args__ = (
        UniqueConstraint(
            "university_id", "faculty_id", "career_id", "course_id", "commission_id",
            name="uq_commission_scope",
        ),
        Index("ix_commissions_course_year", "course_id", "year", "deleted"),
    )

    def __repr__(self):
        return f"<Commission {self.course_id}/{self.commission_id}>"
