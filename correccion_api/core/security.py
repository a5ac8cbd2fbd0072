"""
Hashing de contraseñas y tokens JWT.

Este backend no emite tokens de sesión: solo valida los que firma el
servicio de autenticación con la misma SECRET_KEY. create_access_token
firma tokens compatibles para ese servicio y para las pruebas.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from correccion_api.config import Settings, get_settings

ACCESS_TOKEN_TYPE = "access"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """Hash bcrypt de la contraseña."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None
) -> str:
    """
    Firmar un token de acceso.

    Args:
        data: Claims del token; "sub" es el ID interno del usuario
        expires_delta: Vigencia; por defecto ACCESS_TOKEN_EXPIRE_MINUTES
        settings: Configuración con la clave de firma

    Returns:
        Token JWT firmado
    """
    settings = settings or get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    claims = dict(data)
    claims["exp"] = datetime.now(timezone.utc) + lifetime
    claims["type"] = ACCESS_TOKEN_TYPE
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> str:
    """
    Validar un token de acceso y devolver su "sub".

    Raises:
        JWTError: Si la firma o la expiración no son válidas, o si el token
            no es de acceso o no trae "sub"
    """
    settings = settings or get_settings()
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

    subject = payload.get("sub")
    if subject is None or payload.get("type") != ACCESS_TOKEN_TYPE:
        raise JWTError("El token no es un token de acceso válido")
    return subject
