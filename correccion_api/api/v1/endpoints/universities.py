"""
Endpoints de universidades.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.crud.university import university as crud_university
from correccion_api.models.user import User
from correccion_api.schemas.academic import (
    UniversityCreate,
    UniversityUpdate,
    UniversityResponse,
)
from correccion_api.schemas.common import DataResponse, ListResponse

router = APIRouter()


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=ListResponse[UniversityResponse])
def get_universities(db: Session = Depends(get_db)):
    """
    Listar universidades activas, ordenadas por nombre.
    No requiere autenticacion.
    """
    universities = crud_university.find_active(db)
    return {"count": len(universities), "data": universities}


@router.get("/all", response_model=ListResponse[UniversityResponse])
def get_all_universities(
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar universidades incluyendo eliminadas.
    Requiere rol de administrador.
    """
    universities = crud_university.find_all(db, deleted=deleted)
    return {"count": len(universities), "data": universities}


@router.get("/{id}", response_model=DataResponse[UniversityResponse])
def get_university(id: int, db: Session = Depends(get_db)):
    """
    Obtener una universidad por ID interno (también si está eliminada).
    No requiere autenticacion.
    """
    return {"data": crud_university.get_or_404(db, id)}


# ================================================================
# ENDPOINTS ADMIN
# ================================================================

@router.post("", response_model=DataResponse[UniversityResponse], status_code=status.HTTP_201_CREATED)
def create_university(
    university_in: UniversityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear una nueva universidad.
    Requiere rol de administrador.
    """
    university = crud_university.create(db, obj_in=university_in)
    return {"message": "Universidad creada exitosamente", "data": university}


@router.put("/{id}", response_model=DataResponse[UniversityResponse])
def update_university(
    id: int,
    university_in: UniversityUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar una universidad.
    Requiere rol de administrador.
    """
    university = crud_university.update_by_id(db, id=id, obj_in=university_in)
    return {"message": "Universidad actualizada exitosamente", "data": university}


@router.delete("/{id}", response_model=DataResponse[UniversityResponse])
def delete_university(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar una universidad (baja lógica).
    Requiere rol de administrador.
    """
    university = crud_university.soft_delete(db, id=id)
    return {"message": "Universidad eliminada exitosamente", "data": university}


@router.put("/{id}/restore", response_model=DataResponse[UniversityResponse])
def restore_university(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar una universidad eliminada.
    Requiere rol de administrador.
    """
    university = crud_university.restore(db, id=id)
    return {"message": "Universidad restaurada exitosamente", "data": university}
