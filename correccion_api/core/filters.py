"""
Resolución de filtros jerárquicos.

Traduce los parámetros opcionales de consulta (ámbito universidad → facultad
→ carrera → curso → comisión, más el año) en un conjunto de condiciones de
igualdad que se combinan con AND.
"""
import logging
from typing import Any, Dict, List, Optional

from correccion_api.core.exceptions import ValidationException

logger = logging.getLogger(__name__)

# Cadena de ámbitos, de la más amplia a la más estrecha
SCOPE_CHAIN = ("university_id", "faculty_id", "career_id", "course_id", "commission_id")

NUMERIC_FILTERS = ("year", "rubric_number")


def parse_int(name: str, value: Any) -> int:
    """
    Convertir un parámetro numérico.

    Raises:
        ValidationException: Si el valor no es un entero
    """
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationException(f"El parámetro '{name}' debe ser numérico (recibido: '{value}')")


def resolve_filters(**params: Optional[Any]) -> Dict[str, Any]:
    """
    Construir el diccionario de filtros a partir de parámetros opcionales.

    Los parámetros ausentes (None o cadena vacía) se omiten, nunca se
    completan con valores por defecto. Los valores de texto se usan tal cual
    y los numéricos se convierten a entero.

    Args:
        **params: Parámetros de consulta (university_id, course_id, year, ...)

    Returns:
        Diccionario columna -> valor

    Raises:
        ValidationException: Si un parámetro numérico no es válido
    """
    filters: Dict[str, Any] = {}
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, str) and value.strip() == "":
            continue
        if name in NUMERIC_FILTERS:
            filters[name] = parse_int(name, value)
        else:
            filters[name] = value
    return filters


def missing_ancestors(filters: Dict[str, Any]) -> List[str]:
    """
    Ámbitos superiores ausentes para el ámbito más estrecho presente.

    Filtrar por course_id sin career_id, por ejemplo, puede devolver registros
    de carreras distintas que comparten la misma clave.

    Returns:
        Lista de ámbitos faltantes, vacía si el filtro está completo
    """
    present = [level for level in SCOPE_CHAIN if level in filters]
    if not present:
        return []
    narrowest = SCOPE_CHAIN.index(present[-1])
    return [level for level in SCOPE_CHAIN[:narrowest] if level not in filters]


def warn_if_underscoped(resource: str, filters: Dict[str, Any]) -> List[str]:
    """Registrar una advertencia si la consulta no incluye todos los ámbitos superiores."""
    missing = missing_ancestors(filters)
    if missing:
        logger.warning(
            "GET /api/%s: filtro sin %s; puede devolver registros de ámbitos distintos con la misma clave",
            resource,
            ", ".join(missing),
        )
    return missing
