"""
Endpoints de usuarios (CRUD de administración).
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from correccion_api.config import Settings
from correccion_api.core.deps import get_app_settings, get_current_admin_user, get_current_user, get_db
from correccion_api.core.filters import resolve_filters
from correccion_api.crud.user import user as crud_user
from correccion_api.models.user import User, UserRole
from correccion_api.schemas.common import DataResponse, ListResponse
from correccion_api.schemas.user import UserCreate, UserUpdate, UserResponse

router = APIRouter()


@router.get("", response_model=ListResponse[UserResponse])
def get_users(
    include_deleted: bool = Query(False, description="Incluir usuarios eliminados"),
    role: Optional[UserRole] = Query(None),
    university_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Listar usuarios.
    Requiere rol de administrador.
    """
    filters = resolve_filters(role=role.value if role else None, university_id=university_id)
    users = crud_user.find_active(db, filters, include_deleted=include_deleted)
    return {"count": len(users), "data": users}


@router.get("/me", response_model=DataResponse[UserResponse])
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Obtener el usuario autenticado."""
    return {"data": current_user}


@router.get("/{id}", response_model=DataResponse[UserResponse])
def get_user(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Obtener un usuario por ID.
    Requiere rol de administrador.
    """
    return {"data": crud_user.get_or_404(db, id)}


@router.post("", response_model=DataResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Crear usuario.

    El university_id es obligatorio salvo para super-admin.
    Requiere rol de administrador.
    """
    user = crud_user.create(db, obj_in=user_in)
    return {"message": "Usuario creado exitosamente", "data": user}


@router.put("/{id}", response_model=DataResponse[UserResponse])
def update_user(
    id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Actualizar usuario.

    No se puede cambiar el username ni el rol del administrador principal.
    Requiere rol de administrador.
    """
    user = crud_user.update(
        db,
        db_obj=crud_user.get_or_404(db, id),
        obj_in=user_in,
        root_username=settings.ROOT_ADMIN_USERNAME,
    )
    return {"message": "Usuario actualizado exitosamente", "data": user}


@router.delete("/{id}", response_model=DataResponse[UserResponse])
def delete_user(
    id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Eliminar usuario (baja lógica).

    El administrador principal no puede eliminarse.
    Requiere rol de administrador.
    """
    user = crud_user.soft_delete(db, id=id, root_username=settings.ROOT_ADMIN_USERNAME)
    return {"message": "Usuario eliminado exitosamente", "data": user}


@router.put("/{id}/restore", response_model=DataResponse[UserResponse])
def restore_user(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user)
):
    """
    Restaurar usuario eliminado.
    Requiere rol de administrador.
    """
    user = crud_user.restore(db, id=id)
    return {"message": "Usuario restaurado exitosamente", "data": user}
