"""
Modelo ORM para Cursos/Materias con soporte para Soft Delete.
"""
from sqlalchemy import Column, Integer, String, UniqueConstraint, Index
from correccion_api.db.base import Base, SoftDeleteMixin, TimestampMixin


class Course(Base, SoftDeleteMixin, TimestampMixin):
    """
    Curso de una carrera.

    El course_id es único dentro de la carrera, identificada por su cadena
    completa (universidad, facultad, carrera): dos carreras pueden tener un
    curso con la misma clave.
    """

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(String(100), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    year = Column(Integer, nullable=False, index=True)
    career_id = Column(String(100), nullable=False, index=True)
    faculty_id = Column(String(100), nullable=False, index=True)
    university_id = Column(String(100), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint(
            "university_id", "faculty_id", "career_id", "course_id",
            name="uq_course_scope",
        ),
        Index("ix_courses_university_deleted", "university_id", "deleted"),
    )

    def __repr__(self):
        return f"<Course {self.career_id}/{self.course_id}>"
