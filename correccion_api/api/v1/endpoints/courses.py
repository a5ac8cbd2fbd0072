"""
Endpoints de cursos/materias.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.core.filters import resolve_filters, warn_if_underscoped
from correccion_api.crud.course import course as crud_course
from correccion_api.models.user import User
from correccion_api.schemas.academic import (
    CourseCreate,
    CourseUpdate,
    CourseResponse,
)
from correccion_api.schemas.common import DataResponse, ListResponse

router = APIRouter()

UNIQUE_NOTE = (
    "Cursos únicos (uno por course_id). Para obtener los cursos de una carrera "
    "específica, use el parámetro career_id."
)


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=ListResponse[CourseResponse])
def get_courses(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar cursos activos.

    Filtrar por course_id sin career_id puede devolver cursos de distintas
    carreras que comparten la misma clave.
    No requiere autenticacion.
    """
    filters = resolve_filters(
        university_id=university_id,
        faculty_id=faculty_id,
        career_id=career_id,
        course_id=course_id,
        year=year,
    )
    warn_if_underscoped("courses", filters)
    courses = crud_course.find_active(db, filters)
    return {"count": len(courses), "data": courses}


@router.get("/all", response_model=ListResponse[CourseResponse])
def get_all_courses(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar cursos incluyendo eliminados.
    Requiere rol de administrador.
    """
    filters = resolve_filters(
        university_id=university_id,
        faculty_id=faculty_id,
        career_id=career_id,
        course_id=course_id,
        year=year,
    )
    courses = crud_course.find_all(db, filters, deleted=deleted)
    return {"count": len(courses), "data": courses}


@router.get("/unique", response_model=ListResponse[CourseResponse])
def get_unique_courses(
    university_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar cursos sin repetir course_id entre carreras.

    Devuelve el primer curso registrado por cada clave. No sirve para
    consumidores que necesitan el curso de una carrera concreta.
    """
    filters = resolve_filters(university_id=university_id, course_id=course_id, year=year)
    courses = crud_course.find_unique(db, filters)
    return {"count": len(courses), "data": courses, "note": UNIQUE_NOTE}


@router.get("/by-year/{year}", response_model=ListResponse[CourseResponse])
def get_courses_by_year(year: str, db: Session = Depends(get_db)):
    """Listar cursos activos de un año."""
    courses = crud_course.find_active(db, resolve_filters(year=year))
    return {"count": len(courses), "data": courses}


@router.get("/{id}", response_model=DataResponse[CourseResponse])
def get_course(id: int, db: Session = Depends(get_db)):
    """
    Obtener un curso por ID.
    No requiere autenticacion.
    """
    return {"data": crud_course.get_or_404(db, id)}


# ================================================================
# ENDPOINTS ADMIN
# ================================================================

@router.post("", response_model=DataResponse[CourseResponse], status_code=status.HTTP_201_CREATED)
def create_course(
    course_in: CourseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear un curso en una carrera existente.

    El course_id debe ser único dentro de la carrera; si pertenece a un curso
    eliminado se debe restaurar ese curso.
    Requiere rol de administrador.
    """
    course = crud_course.create(db, obj_in=course_in)
    return {"message": "Curso creado exitosamente", "data": course}


@router.put("/{id}", response_model=DataResponse[CourseResponse])
def update_course(
    id: int,
    course_in: CourseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar un curso. Solo cambian los campos enviados.
    Requiere rol de administrador.
    """
    course = crud_course.update_by_id(db, id=id, obj_in=course_in)
    return {"message": "Curso actualizado exitosamente", "data": course}


@router.delete("/{id}", response_model=DataResponse[CourseResponse])
def delete_course(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar un curso (baja lógica).
    Requiere rol de administrador.
    """
    course = crud_course.soft_delete(db, id=id)
    return {"message": "Curso eliminado exitosamente", "data": course}


@router.put("/{id}/restore", response_model=DataResponse[CourseResponse])
def restore_course(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar un curso eliminado.
    Requiere rol de administrador.
    """
    course = crud_course.restore(db, id=id)
    return {"message": "Curso restaurado exitosamente", "data": course}
