"""
Excepciones personalizadas del backend de corrección.
"""
from typing import Optional


class AppException(Exception):
    """Excepción base para todas las excepciones de la aplicación."""

    error: Optional[str] = None

    def __init__(self, message: str = "Error en la aplicación"):
        self.message = message
        super().__init__(self.message)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(self, message: str = "Recurso no encontrado"):
        super().__init__(message)


class UnauthorizedException(AppException):
    """Excepción cuando el usuario no está autenticado."""

    def __init__(self, message: str = "No autorizado"):
        super().__init__(message)


class ForbiddenException(AppException):
    """Excepción cuando el usuario no tiene permisos."""

    def __init__(self, message: str = "Acceso prohibido"):
        super().__init__(message)


class ProtectedResourceException(ForbiddenException):
    """Excepción al intentar eliminar o alterar un registro protegido."""

    error = "Registro protegido"

    def __init__(self, message: str = "El registro está protegido"):
        super().__init__(message)


class ConflictException(AppException):
    """Excepción cuando la clave natural ya existe en el mismo ámbito."""

    error = "Clave duplicada"

    def __init__(self, message: str = "Conflicto con el recurso"):
        super().__init__(message)


class DeletedConflictException(ConflictException):
    """
    La clave natural pertenece a un registro eliminado.
    El cliente debe restaurar ese registro en lugar de crear uno nuevo.
    """

    error = "Clave de registro eliminado"

    def __init__(self, message: str = "Existe un registro eliminado con esa clave. Restáurelo."):
        super().__init__(message)


class InvalidStateException(AppException):
    """Transición inválida del ciclo de vida (ej: eliminar dos veces)."""

    def __init__(self, message: str = "Estado inválido para la operación"):
        super().__init__(message)


class ValidationException(AppException):
    """Excepción cuando falla la validación de datos."""

    error = "Error de validación"

    def __init__(self, message: str = "Error de validación"):
        super().__init__(message)
