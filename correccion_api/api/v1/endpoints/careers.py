"""
Endpoints de carreras.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.core.filters import resolve_filters, warn_if_underscoped
from correccion_api.crud.career import career as crud_career
from correccion_api.models.user import User
from correccion_api.schemas.academic import (
    CareerCreate,
    CareerUpdate,
    CareerResponse,
)
from correccion_api.schemas.common import DataResponse, ListResponse

router = APIRouter()


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=ListResponse[CareerResponse])
def get_careers(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar carreras activas.
    No requiere autenticacion.
    """
    filters = resolve_filters(university_id=university_id, faculty_id=faculty_id, career_id=career_id)
    warn_if_underscoped("careers", filters)
    careers = crud_career.find_active(db, filters)
    return {"count": len(careers), "data": careers}


@router.get("/all", response_model=ListResponse[CareerResponse])
def get_all_careers(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar carreras incluyendo eliminadas.
    Requiere rol de administrador.
    """
    filters = resolve_filters(university_id=university_id, faculty_id=faculty_id, career_id=career_id)
    careers = crud_career.find_all(db, filters, deleted=deleted)
    return {"count": len(careers), "data": careers}


@router.get("/{id}", response_model=DataResponse[CareerResponse])
def get_career(id: int, db: Session = Depends(get_db)):
    """
    Obtener una carrera por ID.
    No requiere autenticacion.
    """
    return {"data": crud_career.get_or_404(db, id)}


# ================================================================
# ENDPOINTS ADMIN
# ================================================================

@router.post("", response_model=DataResponse[CareerResponse], status_code=status.HTTP_201_CREATED)
def create_career(
    career_in: CareerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear una nueva carrera en una facultad existente.
    Requiere rol de administrador.
    """
    career = crud_career.create(db, obj_in=career_in)
    return {"message": "Carrera creada exitosamente", "data": career}


@router.put("/{id}", response_model=DataResponse[CareerResponse])
def update_career(
    id: int,
    career_in: CareerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar una carrera.
    Requiere rol de administrador.
    """
    career = crud_career.update_by_id(db, id=id, obj_in=career_in)
    return {"message": "Carrera actualizada exitosamente", "data": career}


@router.delete("/{id}", response_model=DataResponse[CareerResponse])
def delete_career(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar una carrera (baja lógica).
    Requiere rol de administrador.
    """
    career = crud_career.soft_delete(db, id=id)
    return {"message": "Carrera eliminada exitosamente", "data": career}


@router.put("/{id}/restore", response_model=DataResponse[CareerResponse])
def restore_career(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar una carrera eliminada.
    Requiere rol de administrador.
    """
    career = crud_career.restore(db, id=id)
    return {"message": "Carrera restaurada exitosamente", "data": career}
