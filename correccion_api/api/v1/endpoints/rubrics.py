"""
Endpoints de rúbricas.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.core.deps import get_db, get_current_admin_user
from correccion_api.core.filters import resolve_filters, warn_if_underscoped
from correccion_api.crud.rubric import rubric as crud_rubric
from correccion_api.models.rubric import RubricType
from correccion_api.models.user import User
from correccion_api.schemas.common import DataResponse, ListResponse
from correccion_api.schemas.rubric import RubricCreate, RubricUpdate, RubricResponse

router = APIRouter()


@router.get("", response_model=ListResponse[RubricResponse])
def get_rubrics(
    university_id: Optional[str] = Query(None),
    faculty_id: Optional[str] = Query(None),
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    commission_id: Optional[str] = Query(None),
    rubric_type: Optional[RubricType] = Query(None),
    year: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    Listar rúbricas activas con filtros opcionales.
    No requiere autenticacion.
    """
    filters = resolve_filters(
        university_id=university_id,
        faculty_id=faculty_id,
        career_id=career_id,
        course_id=course_id,
        commission_id=commission_id,
        rubric_type=rubric_type.value if rubric_type else None,
        year=year,
    )
    warn_if_underscoped("rubrics", filters)
    rubrics = crud_rubric.find_active(db, filters)
    return {"count": len(rubrics), "data": rubrics}


@router.get("/all", response_model=ListResponse[RubricResponse])
def get_all_rubrics(
    career_id: Optional[str] = Query(None),
    course_id: Optional[str] = Query(None),
    commission_id: Optional[str] = Query(None),
    deleted: Optional[bool] = Query(None, description="Filtrar por estado de borrado"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar rúbricas incluyendo eliminadas.
    Requiere rol de administrador.
    """
    filters = resolve_filters(career_id=career_id, course_id=course_id, commission_id=commission_id)
    rubrics = crud_rubric.find_all(db, filters, deleted=deleted)
    return {"count": len(rubrics), "data": rubrics}


@router.get("/by-year/{year}", response_model=ListResponse[RubricResponse])
def get_rubrics_by_year(year: str, db: Session = Depends(get_db)):
    """Listar rúbricas activas de un año."""
    rubrics = crud_rubric.find_active(db, resolve_filters(year=year))
    return {"count": len(rubrics), "data": rubrics}


@router.get("/{id}", response_model=DataResponse[RubricResponse])
def get_rubric(id: int, db: Session = Depends(get_db)):
    """Obtener una rúbrica por ID."""
    return {"data": crud_rubric.get_or_404(db, id)}


@router.post("", response_model=DataResponse[RubricResponse], status_code=status.HTTP_201_CREATED)
def create_rubric(
    rubric_in: RubricCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear rúbrica desde JSON.

    La comisión debe existir y no puede tener otra rúbrica activa o
    eliminada con el mismo tipo y número.
    Requiere rol de administrador.
    """
    rubric = crud_rubric.create(db, obj_in=rubric_in)
    return {"message": "Rúbrica creada exitosamente", "data": rubric}


@router.put("/{id}", response_model=DataResponse[RubricResponse])
def update_rubric(
    id: int,
    rubric_in: RubricUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar nombre, contenido o año de una rúbrica.
    Requiere rol de administrador.
    """
    rubric = crud_rubric.update_by_id(db, id=id, obj_in=rubric_in)
    return {"message": "Rúbrica actualizada exitosamente", "data": rubric}


@router.delete("/{id}", response_model=DataResponse[RubricResponse])
def delete_rubric(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar una rúbrica (baja lógica).
    Requiere rol de administrador.
    """
    rubric = crud_rubric.soft_delete(db, id=id)
    return {"message": "Rúbrica eliminada exitosamente", "data": rubric}


@router.put("/{id}/restore", response_model=DataResponse[RubricResponse])
def restore_rubric(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar una rúbrica eliminada.
    Requiere rol de administrador.
    """
    rubric = crud_rubric.restore(db, id=id)
    return {"message": "Rúbrica restaurada exitosamente", "data": rubric}
