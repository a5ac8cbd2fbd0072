"""
Dependencias de FastAPI: sesión de base de datos y usuario autenticado.
"""
from typing import Generator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from correccion_api.config import Settings
from correccion_api.core.exceptions import ForbiddenException, UnauthorizedException
from correccion_api.core.security import decode_access_token
from correccion_api.models.user import User

# Sin auto_error: la falta de token se informa con 401 y el formato de error común
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Sesión de base de datos por request.

    La conexión la abre el lifespan de la aplicación (app.state.db).
    """
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
    db: Session = Depends(get_db)
) -> User:
    """
    Usuario dueño del token Bearer.

    Raises:
        UnauthorizedException: Sin token, token inválido, o usuario
            inexistente o eliminado
    """
    if credentials is None:
        raise UnauthorizedException("Token de autenticación requerido")

    try:
        user_id = int(decode_access_token(credentials.credentials, settings))
    except (JWTError, ValueError):
        raise UnauthorizedException("No se pudieron validar las credenciales")

    user = db.get(User, user_id)
    if user is None or user.is_deleted:
        raise UnauthorizedException("Usuario no encontrado o eliminado")
    return user


def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """
    Exigir rol super-admin o university-admin.

    Raises:
        ForbiddenException: Si el usuario no es administrador
    """
    if not current_user.is_admin():
        raise ForbiddenException("No tiene permisos de administrador")
    return current_user
