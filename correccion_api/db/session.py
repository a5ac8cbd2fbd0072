"""
Conexión a la base de datos SQLAlchemy.

La conexión se construye explícitamente al iniciar la aplicación y se
cierra al apagarla; no existe un engine global a nivel de módulo.
"""
import logging
from typing import Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session

from correccion_api.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Manejador de la conexión a la base de datos.
    Encapsula el engine y el sessionmaker de una instancia de la aplicación.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> None:
        """Crear engine y sessionmaker. Crea las tablas si está configurado."""
        if self._engine is not None:
            return

        if self.settings.is_sqlite:
            # Los endpoints síncronos corren en el threadpool de FastAPI
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
        else:
            engine_kwargs = {
                "pool_pre_ping": True,      # Verificar conexiones antes de usar
                "pool_recycle": 3600,       # Reciclar conexiones cada hora
                "pool_size": 5,
                "max_overflow": 10,
            }

        self._engine = create_engine(self.settings.DATABASE_URL, echo=self.settings.DEBUG, **engine_kwargs)
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self._engine
        )

        if self.settings.AUTO_CREATE_TABLES:
            # Importar modelos para registrarlos en el metadata
            from correccion_api.models import Base
            Base.metadata.create_all(bind=self._engine)

        logger.info("Conexión a base de datos inicializada (%s)", self._engine.url.get_backend_name())

    @property
    def engine(self) -> Engine:
        """Obtener engine de SQLAlchemy."""
        if self._engine is None:
            raise RuntimeError("La base de datos no está conectada")
        return self._engine

    def session(self) -> Session:
        """Crear nueva sesión de base de datos."""
        if self._session_factory is None:
            raise RuntimeError("La base de datos no está conectada")
        return self._session_factory()

    def dispose(self) -> None:
        """Cerrar todas las conexiones."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Conexión a base de datos cerrada")
