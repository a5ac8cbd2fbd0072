"""
Endpoints de comisiones.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.core.filters import resolve_filters, warn_if_underscoped
from correccion_api.crud.commission import commission as crud_commission
from correccion_api.models.user import User
from correccion_api.schemas.academic import (
    CommissionCreate,
    CommissionUpdate,
    CommissionResponse,
)
from correccion_api.schemas.common import DataResponse, ListResponse

router = APIRouter()

UNIQUE_NOTE = (
    "Comisiones únicas (una por commission_id). Para obtener todas las comisiones "
    "de una carrera específica, use el parámetro career_id."
)


# ================================================================
# ENDPOINTS PUBLICOS
# ================================================================

@router.get("", response_model=ListResponse[CommissionResponse])
def get_commissions(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    commission_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar comisiones activas.

    Si se filtra por course_id conviene incluir career_id para evitar
    comisiones de otras carreras que comparten el curso.
    """
    filters = resolve_filters(
        university_id=university_id,
        faculty_id=faculty_id,
        career_id=career_id,
        course_id=course_id,
        commission_id=commission_id,
        year=year,
    )
    warn_if_underscoped("commissions", filters)
    commissions = crud_commission.find_active(db, filters)
    return {"count": len(commissions), "data": commissions}


@router.get("/all", response_model=ListResponse[CommissionResponse])
def get_all_commissions(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    commission_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar comisiones incluyendo eliminadas.
    Requiere rol de administrador.
    """
    filters = resolve_filters(
        university_id=university_id,
        faculty_id=faculty_id,
        career_id=career_id,
        course_id=course_id,
        commission_id=commission_id,
        year=year,
    )
    commissions = crud_commission.find_all(db, filters, deleted=deleted)
    return {"count": len(commissions), "data": commissions}


@router.get("/unique", response_model=ListResponse[CommissionResponse])
def get_unique_commissions(
    course_id: Optional[str] = Query(None),
    commission_id: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar comisiones sin repetir commission_id.

    Útil cuando no se conoce el career_id. Se conserva la primera comisión
    registrada por clave; el resultado no es válido para una carrera concreta.
    """
    filters = resolve_filters(course_id=course_id, commission_id=commission_id, year=year)
    commissions = crud_commission.find_unique(db, filters)
    return {"count": len(commissions), "data": commissions, "note": UNIQUE_NOTE}


@router.get("/by-year/{year}", response_model=ListResponse[CommissionResponse])
def get_commissions_by_year(year: str, db: Session = Depends(get_db)):
    """Listar comisiones activas de un año."""
    commissions = crud_commission.find_active(db, resolve_filters(year=year))
    return {"count": len(commissions), "data": commissions}


@router.get("/{id}", response_model=DataResponse[CommissionResponse])
def get_commission(id: int, db: Session = Depends(get_db)):
    """Obtener una comisión por ID."""
    return {"data": crud_commission.get_or_404(db, id)}


# ================================================================
# ENDPOINTS ADMIN
# ================================================================

@router.post("", response_model=DataResponse[CommissionResponse], status_code=status.HTTP_201_CREATED)
def create_commission(
    commission_in: CommissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear una comisión en un curso existente.
    Requiere rol de administrador.
    """
    commission = crud_commission.create(db, obj_in=commission_in)
    return {"message": "Comisión creada exitosamente", "data": commission}


@router.put("/{id}", response_model=DataResponse[CommissionResponse])
def update_commission(
    id: int,
    commission_in: CommissionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar una comisión. El commission_id no se modifica.
    Requiere rol de administrador.
    """
    commission = crud_commission.update_by_id(db, id=id, obj_in=commission_in)
    return {"message": "Comisión actualizada exitosamente", "data": commission}


@router.delete("/{id}", response_model=DataResponse[CommissionResponse])
def delete_commission(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar una comisión (soft delete).
    Requiere rol de administrador.
    """
    commission = crud_commission.soft_delete(db, id=id)
    return {"message": "Comisión eliminada exitosamente", "data": commission}


@router.put("/{id}/restore", response_model=DataResponse[CommissionResponse])
def restore_commission(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar una comisión eliminada.
    Requiere rol de administrador.
    """
    commission = crud_commission.restore(db, id=id)
    return {"message": "Comisión restaurada exitosamente", "data": commission}
