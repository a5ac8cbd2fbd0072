"""
Servicio de inicialización de la aplicación.
Crea datos iniciales necesarios al arrancar.
"""
import logging
import time

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from correccion_api.config import Settings
from correccion_api.crud.user import user as crud_user
from correccion_api.db.session import Database
from correccion_api.models.user import UserRole

logger = logging.getLogger(__name__)


def wait_for_db(database: Database, max_retries: int = 10, delay: float = 2) -> bool:
    """
    Esperar a que la base de datos esté lista.

    Args:
        database: Conexión de la aplicación
        max_retries: Número máximo de reintentos
        delay: Segundos entre reintentos

    Returns:
        True si la BD está lista, False si falló
    """
    for attempt in range(max_retries):
        db = database.session()
        try:
            db.execute(text("SELECT 1"))
            return True
        except OperationalError as e:
            if attempt < max_retries - 1:
                logger.info("Esperando base de datos... intento %d/%d", attempt + 1, max_retries)
                time.sleep(delay)
            else:
                logger.error("Base de datos no disponible después de %d intentos: %s", max_retries, e)
        finally:
            db.close()
    return False


def init_root_admin(database: Database, settings: Settings) -> bool:
    """
    Crear el administrador principal si no existe.

    Usa ROOT_ADMIN_USERNAME y ROOT_ADMIN_PASSWORD. Si existe pero está
    eliminado (datos previos a la protección), se restaura.

    Returns:
        True si se creó o restauró el usuario, False si ya existía activo
    """
    if not settings.ROOT_ADMIN_USERNAME or not settings.ROOT_ADMIN_PASSWORD:
        logger.warning("ROOT_ADMIN_USERNAME o ROOT_ADMIN_PASSWORD no configurados")
        return False

    db = database.session()
    try:
        existing = crud_user.get_by_username(
            db, username=settings.ROOT_ADMIN_USERNAME, include_deleted=True
        )
        if existing and not existing.is_deleted:
            logger.info("Administrador principal ya existe: %s", settings.ROOT_ADMIN_USERNAME)
            return False
        if existing:
            crud_user.restore(db, id=existing.id)
            logger.warning("Administrador principal restaurado: %s", settings.ROOT_ADMIN_USERNAME)
            return True

        crud_user.create(db, obj_in={
            "username": settings.ROOT_ADMIN_USERNAME,
            "name": "Administrador",
            "password": settings.ROOT_ADMIN_PASSWORD,
            "role": UserRole.SUPER_ADMIN.value,
        })
        logger.info("Administrador principal creado: %s", settings.ROOT_ADMIN_USERNAME)
        logger.warning("IMPORTANTE: cambie la contraseña del administrador principal")
        return True
    finally:
        db.close()


def run_initialization(database: Database, settings: Settings) -> None:
    """
    Ejecutar todas las tareas de inicialización.
    Llamar desde el lifespan de la aplicación.
    """
    logger.info("Ejecutando inicialización...")

    if wait_for_db(database):
        init_root_admin(database, settings)

    logger.info("Inicialización completada")
