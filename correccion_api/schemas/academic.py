"""
Schemas de la estructura académica
(Universidades, Facultades, Carreras, Cursos, Comisiones).
"""
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, EmailStr, Field

from correccion_api.schemas.common import Name, NaturalKey, PartialUpdate, RecordResponse

Year = Field(..., ge=1900, le=2200)


# ================================================================
# UNIVERSIDADES
# ================================================================

class UniversityCreate(BaseModel):
    """Schema para crear universidad."""

    university_id: NaturalKey
    name: Name


class UniversityUpdate(PartialUpdate):
    """Schema para actualizar universidad. El university_id no se modifica."""

    name: Optional[Name] = None


class UniversityResponse(RecordResponse):
    """Schema de respuesta de universidad."""

    university_id: str
    name: str


# ================================================================
# FACULTADES
# ================================================================

class FacultyCreate(BaseModel):
    """Schema para crear facultad."""

    faculty_id: NaturalKey
    name: Name
    university_id: NaturalKey


class FacultyUpdate(PartialUpdate):
    """Schema para actualizar facultad."""

    name: Optional[Name] = None
    university_id: Optional[NaturalKey] = None


class FacultyResponse(RecordResponse):
    """Schema de respuesta de facultad."""

    faculty_id: str
    name: str
    university_id: str


# ================================================================
# CARRERAS
# ================================================================

class CareerCreate(BaseModel):
    """Schema para crear carrera."""

    career_id: NaturalKey
    name: Name
    faculty_id: NaturalKey
    university_id: NaturalKey


class CareerUpdate(PartialUpdate):
    """Schema para actualizar carrera."""

    name: Optional[Name] = None
    faculty_id: Optional[NaturalKey] = None
    university_id: Optional[NaturalKey] = None


class CareerResponse(RecordResponse):
    """Schema de respuesta de carrera."""

    career_id: str
    name: str
    faculty_id: str
    university_id: str


# ================================================================
# CURSOS
# ================================================================

class CourseCreate(BaseModel):
    """Schema para crear curso."""

    course_id: NaturalKey
    name: Name
    year: int = Year
    career_id: NaturalKey
    faculty_id: NaturalKey
    university_id: NaturalKey


class CourseUpdate(PartialUpdate):
    """Schema para actualizar curso. El course_id no se modifica."""

    name: Optional[Name] = None
    year: Optional[int] = Field(None, ge=1900, le=2200)
    career_id: Optional[NaturalKey] = None
    faculty_id: Optional[NaturalKey] = None
    university_id: Optional[NaturalKey] = None


class CourseResponse(RecordResponse):
    """Schema de respuesta de curso."""

    course_id: str
    name: str
    year: int
    career_id: str
    faculty_id: str
    university_id: str


# ================================================================
# COMISIONES
# ================================================================

class CommissionCreate(BaseModel):
    """Schema para crear comisión."""

    commission_id: NaturalKey
    name: Name
    year: int = Year
    course_id: NaturalKey
    career_id: NaturalKey
    faculty_id: NaturalKey
    university_id: NaturalKey
    professor_name: Optional[str] = Field(None, max_length=200)
    professor_email: Optional[EmailStr] = None


class CommissionUpdate(PartialUpdate):
    """Schema para actualizar comisión. El commission_id no se modifica por integridad."""

    nullable_fields: ClassVar[Tuple[str, ...]] = ("professor_name", "professor_email")

    name: Optional[Name] = None
    year: Optional[int] = Field(None, ge=1900, le=2200)
    course_id: Optional[NaturalKey] = None
    career_id: Optional[NaturalKey] = None
    faculty_id: Optional[NaturalKey] = None
    university_id: Optional[NaturalKey] = None
    professor_name: Optional[str] = Field(None, max_length=200)
    professor_email: Optional[EmailStr] = None


class CommissionResponse(RecordResponse):
    """Schema de respuesta de comisión."""

    commission_id: str
    name: str
    year: int
    course_id: str
    career_id: str
    faculty_id: str
    university_id: str
    professor_name: Optional[str] = None
    professor_email: Optional[str] = None
