"""
Endpoints de facultades.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.core.filters import resolve_filters
from correccion_api.crud.faculty import faculty as crud_faculty
from correccion_api.models.user import User
from correccion_api.schemas.academic import (
    FacultyCreate,
    FacultyUpdate,
    FacultyResponse,
)
from correccion_api.schemas.common import DataResponse, ListResponse

router = APIRouter()


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=ListResponse[FacultyResponse])
def get_faculties(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar facultades activas.
    No requiere autenticacion.
    """
    filters = resolve_filters(university_id=university_id, faculty_id=faculty_id)
    faculties = crud_faculty.find_active(db, filters)
    return {"count": len(faculties), "data": faculties}


@router.get("/all", response_model=ListResponse[FacultyResponse])
def get_all_faculties(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar facultades incluyendo eliminadas.
    Requiere rol de administrador.
    """
    filters = resolve_filters(university_id=university_id, faculty_id=faculty_id)
    faculties = crud_faculty.find_all(db, filters, deleted=deleted)
    return {"count": len(faculties), "data": faculties}


@router.get("/{id}", response_model=DataResponse[FacultyResponse])
def get_faculty(id: int, db: Session = Depends(get_db)):
    """
    Obtener una facultad por ID.
    No requiere autenticacion.
    """
    return {"data": crud_faculty.get_or_404(db, id)}


# ================================================================
# ENDPOINTS ADMIN
# ================================================================

@router.post("", response_model=DataResponse[FacultyResponse], status_code=status.HTTP_201_CREATED)
def create_faculty(
    faculty_in: FacultyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear una nueva facultad en una universidad existente.
    Requiere rol de administrador.
    """
    faculty = crud_faculty.create(db, obj_in=faculty_in)
    return {"message": "Facultad creada exitosamente", "data": faculty}


@router.put("/{id}", response_model=DataResponse[FacultyResponse])
def update_faculty(
    id: int,
    faculty_in: FacultyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar una facultad.
    Requiere rol de administrador.
    """
    faculty = crud_faculty.update_by_id(db, id=id, obj_in=faculty_in)
    return {"message": "Facultad actualizada exitosamente", "data": faculty}


@router.delete("/{id}", response_model=DataResponse[FacultyResponse])
def delete_faculty(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar una facultad (baja lógica).
    Requiere rol de administrador.
    """
    faculty = crud_faculty.soft_delete(db, id=id)
    return {"message": "Facultad eliminada exitosamente", "data": faculty}


@router.put("/{id}/restore", response_model=DataResponse[FacultyResponse])
def restore_faculty(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar una facultad eliminada.
    Requiere rol de administrador.
    """
    faculty = crud_faculty.restore(db, id=id)
    return {"message": "Facultad restaurada exitosamente", "data": faculty}
