"""
Aplicación FastAPI principal del backend de corrección automática.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from correccion_api.api.v1.router import api_router
from correccion_api.config import Settings, get_settings
from correccion_api.core.exceptions import (
    AppException,
    ConflictException,
    ForbiddenException,
    InvalidStateException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)
from correccion_api.db.session import Database
from correccion_api.services.init_service import run_initialization

logger = logging.getLogger(__name__)

# Código HTTP por tipo de excepción; se busca en el MRO de la excepción
STATUS_CODES = {
    NotFoundException: status.HTTP_404_NOT_FOUND,
    UnauthorizedException: status.HTTP_401_UNAUTHORIZED,
    ForbiddenException: status.HTTP_403_FORBIDDEN,
    ConflictException: status.HTTP_409_CONFLICT,
    InvalidStateException: status.HTTP_400_BAD_REQUEST,
    ValidationException: status.HTTP_400_BAD_REQUEST,
}


def status_code_for(exc: AppException) -> int:
    """Obtener el código HTTP de una excepción de la aplicación."""
    for cls in type(exc).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_content(message: str, error: Optional[str] = None, **extra) -> dict:
    """Cuerpo uniforme de respuesta de error."""
    content = {"success": False, "message": message}
    if error:
        content["error"] = error
    content.update(extra)
    return content


def register_exception_handlers(app: FastAPI) -> None:
    """Registrar los handlers de excepciones de la aplicación."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handler para excepciones de dominio."""
        return JSONResponse(
            status_code=status_code_for(exc),
            content=error_content(exc.message, exc.error)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handler para errores de validación de Pydantic."""
        errors = [
            {
                "type": error.get("type"),
                "loc": error.get("loc"),
                "msg": error.get("msg"),
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(
                error_content("Datos de entrada inválidos", "Error de validación", errors=errors)
            )
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handler para errores HTTP de enrutamiento (404 de ruta, 405)."""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(str(exc.detail))
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Handler para errores no previstos."""
        logger.exception("Error no controlado en %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_content("Error interno del servidor")
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construir la aplicación.

    Args:
        settings: Configuración a usar; por defecto se lee del entorno

    Returns:
        Aplicación FastAPI lista para servir
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings)
        database.connect()
        app.state.db = database
        logger.info("%s v%s iniciada", settings.APP_NAME, settings.APP_VERSION)
        logger.info("Modo debug: %s", settings.DEBUG)
        for warning in settings.insecure_settings():
            logger.warning("Configuración insegura: %s", warning)

        run_initialization(database, settings)
        try:
            yield
        finally:
            database.dispose()
            logger.info("%s detenida", settings.APP_NAME)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
    ## Backend de corrección automática

    API RESTful para administrar la estructura académica y las rúbricas de corrección.

    ### Características principales:

    * **Estructura académica** - Universidades, facultades, carreras, cursos y comisiones
    * **Rúbricas** - Rúbricas por comisión, tipo de evaluación y número
    * **Usuarios** - Administración de usuarios y roles
    * **Soft delete** - Bajas lógicas con restauración

    ### Documentación:

    - **Swagger UI**: /docs
    - **ReDoc**: /redoc
    """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Incluir routers de la API
    app.include_router(api_router, prefix="/api")

    @app.get("/", tags=["Health"])
    def root():
        """
        Endpoint raíz para verificar que la API está funcionando.
        """
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "online",
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/health", tags=["Health"])
    def health_check():
        """
        Endpoint de health check para monitoreo.
        """
        return {
            "status": "healthy",
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "correccion_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().DEBUG
    )
