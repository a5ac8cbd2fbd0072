"""
CRUD base genérico con soporte para Soft Delete, claves naturales por ámbito
y filtros jerárquicos.
"""
import logging
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Tuple, Union

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from correccion_api.core.exceptions import (
    ConflictException,
    DeletedConflictException,
    InvalidStateException,
    NotFoundException,
    ValidationException,
)
from correccion_api.db.base import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Clase base para operaciones CRUD con soporte para Soft Delete.

    Las consultas de listado excluyen los registros eliminados salvo que se
    pida explícitamente lo contrario (find_all / include_deleted). La
    búsqueda por ID interno devuelve el registro en cualquier estado.

    Cada subclase declara:
    - key_field: clave natural del registro (ej: course_id)
    - unique_fields: columnas que forman la clave única dentro del ámbito
    - parent_model / parent_fields: registro padre que debe existir activo
      con los mismos valores en parent_fields
    """

    key_field: str = "id"
    unique_fields: Tuple[str, ...] = ()
    parent_model: Optional[Type[Base]] = None
    parent_fields: Tuple[str, ...] = ()

    not_found_message = "Registro no encontrado"
    conflict_message = "Ya existe un registro con esa clave en este ámbito"
    deleted_conflict_message = (
        "Ya existe un registro eliminado con esa clave en este ámbito. Restáurelo en lugar de crearlo."
    )
    parent_missing_message = "El registro padre especificado no existe"
    already_deleted_message = "El registro ya está eliminado"
    not_deleted_message = "El registro no está eliminado"
    update_deleted_message = "No se puede actualizar un registro eliminado. Restáurelo primero."

    def __init__(self, model: Type[ModelType]):
        """
        Inicializar CRUD con el modelo ORM.

        Args:
            model: Modelo ORM de SQLAlchemy
        """
        self.model = model

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def _base_query(self, db: Session, include_deleted: bool = False):
        """
        Crear query base con filtro de soft delete.

        Args:
            db: Sesión de base de datos
            include_deleted: Si es True, incluye registros eliminados

        Returns:
            Query filtrado
        """
        query = db.query(self.model)
        if not include_deleted:
            query = query.filter(self.model.active_clause())
        return query

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        """Agregar cada filtro como condición de igualdad (AND)."""
        for name, value in (filters or {}).items():
            column = getattr(self.model, name, None)
            if column is None:
                raise ValidationException(f"Filtro no soportado: '{name}'")
            query = query.filter(column == value)
        return query

    def find_active(
        self,
        db: Session,
        filters: Optional[Dict[str, Any]] = None,
        include_deleted: bool = False
    ) -> List[ModelType]:
        """
        Obtener registros activos que cumplen todos los filtros.

        Sin filtros devuelve todos los registros activos de todos los ámbitos.

        Args:
            db: Sesión de base de datos
            filters: Filtros de igualdad ya resueltos
            include_deleted: Si es True, incluye registros eliminados

        Returns:
            Lista de registros ordenada por nombre
        """
        query = self._apply_filters(self._base_query(db, include_deleted), filters)
        return query.order_by(self.model.name, self.model.id).all()

    def find_all(
        self,
        db: Session,
        filters: Optional[Dict[str, Any]] = None,
        deleted: Optional[bool] = None
    ) -> List[ModelType]:
        """
        Obtener registros incluyendo eliminados.

        Args:
            db: Sesión de base de datos
            filters: Filtros de igualdad ya resueltos
            deleted: Si se indica, restringe a eliminados (True) o activos (False)

        Returns:
            Lista de registros ordenada por nombre
        """
        if deleted is False:
            return self.find_active(db, filters)
        query = self._apply_filters(self._base_query(db, include_deleted=True), filters)
        if deleted is True:
            query = query.filter(self.model.deleted.is_(True))
        return query.order_by(self.model.name, self.model.id).all()

    def find_unique(
        self,
        db: Session,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        """
        Obtener un solo registro activo por clave natural.

        Cuando un filtro de ámbito estrecho coincide con registros de padres
        distintos que comparten la clave, se conserva el primero en orden de
        inserción. El resultado no es válido para consumidores que necesitan
        el registro de un ámbito concreto.

        Args:
            db: Sesión de base de datos
            filters: Filtros de igualdad ya resueltos

        Returns:
            Lista sin claves repetidas, ordenada por nombre
        """
        query = self._apply_filters(self._base_query(db), filters)
        seen = {}
        for obj in query.order_by(self.model.id).all():
            seen.setdefault(getattr(obj, self.key_field), obj)
        return sorted(seen.values(), key=lambda obj: (obj.name, obj.id))

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un registro por ID interno, esté eliminado o no.

        Args:
            db: Sesión de base de datos
            id: ID del registro

        Returns:
            Registro encontrado o None
        """
        return db.query(self.model).filter(self.model.id == id).first()

    def get_or_404(self, db: Session, id: Any) -> ModelType:
        """Obtener un registro por ID o lanzar NotFoundException."""
        obj = self.get(db, id)
        if obj is None:
            raise NotFoundException(self.not_found_message)
        return obj

    def get_by_key(
        self,
        db: Session,
        values: Dict[str, Any],
        include_deleted: bool = True
    ) -> Optional[ModelType]:
        """Obtener el registro que coincide con todos los valores dados."""
        query = self._apply_filters(self._base_query(db, include_deleted), values)
        return query.first()

    # ------------------------------------------------------------------
    # Validaciones previas a escribir
    # ------------------------------------------------------------------

    def check_unique(
        self,
        db: Session,
        values: Dict[str, Any],
        exclude_id: Any = None
    ) -> None:
        """
        Verificar que la clave natural no exista en el ámbito.

        Args:
            db: Sesión de base de datos
            values: Valores de las columnas de unique_fields
            exclude_id: ID del registro que se está actualizando

        Raises:
            ConflictException: Si existe un registro activo con la clave
            DeletedConflictException: Si la clave pertenece a un registro eliminado
        """
        if not self.unique_fields:
            return
        query = self._base_query(db, include_deleted=True)
        query = self._apply_filters(query, {field: values.get(field) for field in self.unique_fields})
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        existing = query.first()
        if existing is None:
            return
        if existing.is_deleted:
            raise DeletedConflictException(self.deleted_conflict_message)
        raise ConflictException(self.conflict_message)

    def check_parent(self, db: Session, values: Dict[str, Any]) -> None:
        """
        Verificar que exista el registro padre activo con la misma cadena de ámbitos.

        Raises:
            ValidationException: Si el padre no existe o está eliminado
        """
        if self.parent_model is None:
            return
        parent = (
            db.query(self.parent_model)
            .filter(self.parent_model.active_clause())
            .filter(*[getattr(self.parent_model, field) == values.get(field) for field in self.parent_fields])
            .first()
        )
        if parent is None:
            raise ValidationException(self.parent_missing_message)

    def prepare_create(self, db: Session, data: Dict[str, Any]) -> Dict[str, Any]:
        """Completar o transformar los datos antes de crear. Para sobreescribir."""
        return data

    def prepare_update(self, db: Session, db_obj: ModelType, data: Dict[str, Any]) -> Dict[str, Any]:
        """Completar o transformar los datos antes de actualizar. Para sobreescribir."""
        return data

    def _commit(self, db: Session, db_obj: ModelType) -> ModelType:
        """
        Confirmar la transacción.

        Una violación del índice único (dos altas concurrentes que pasaron la
        verificación previa) se informa igual que un duplicado detectado antes.
        """
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info("%s: violación de integridad al confirmar", self.model.__name__, exc_info=True)
            raise ConflictException(self.conflict_message)
        db.refresh(db_obj)
        return db_obj

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Crear un nuevo registro.

        Args:
            db: Sesión de base de datos
            obj_in: Schema o dict con datos de entrada

        Returns:
            Registro creado

        Raises:
            ValidationException: Si el registro padre no existe
            ConflictException: Si la clave ya existe en el ámbito
        """
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        data = self.prepare_create(db, dict(data))

        self.check_parent(db, data)
        self.check_unique(db, data)

        db_obj = self.model(**data)
        db_obj.deleted = False
        db.add(db_obj)
        self._commit(db, db_obj)
        logger.info("%s creado: %s", self.model.__name__, getattr(db_obj, self.key_field))
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar un registro existente.

        Solo se modifican los campos presentes en obj_in.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto de base de datos a actualizar
            obj_in: Schema o dict con datos de actualización

        Returns:
            Registro actualizado

        Raises:
            InvalidStateException: Si el registro está eliminado
            ConflictException: Si el cambio genera una clave duplicada
        """
        if db_obj.is_deleted:
            raise InvalidStateException(self.update_deleted_message)

        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        update_data = self.prepare_update(db, db_obj, update_data)

        changed = {field for field, value in update_data.items() if getattr(db_obj, field, None) != value}
        candidate = {
            field: update_data.get(field, getattr(db_obj, field))
            for field in set(self.unique_fields) | set(self.parent_fields)
        }
        if changed & set(self.parent_fields):
            self.check_parent(db, candidate)
        if changed & set(self.unique_fields):
            self.check_unique(db, candidate, exclude_id=db_obj.id)

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        db.add(db_obj)
        return self._commit(db, db_obj)

    def update_by_id(
        self,
        db: Session,
        *,
        id: Any,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """Actualizar un registro por ID o lanzar NotFoundException."""
        return self.update(db, db_obj=self.get_or_404(db, id), obj_in=obj_in)

    def soft_delete(self, db: Session, *, id: Any) -> ModelType:
        """
        Eliminar un registro de forma suave (Soft Delete).

        El registro permanece en la base de datos pero no aparece en las
        consultas normales.

        Args:
            db: Sesión de base de datos
            id: ID del registro a eliminar

        Returns:
            Registro eliminado (soft)

        Raises:
            NotFoundException: Si el registro no existe
            InvalidStateException: Si el registro ya estaba eliminado
        """
        obj = self.get_or_404(db, id)
        if obj.is_deleted:
            raise InvalidStateException(self.already_deleted_message)
        obj.soft_delete()
        db.add(obj)
        self._commit(db, obj)
        logger.info("%s eliminado: %s", self.model.__name__, getattr(obj, self.key_field))
        return obj

    def restore(self, db: Session, *, id: Any) -> ModelType:
        """
        Restaurar un registro eliminado (deshacer soft delete).

        Args:
            db: Sesión de base de datos
            id: ID del registro a restaurar

        Returns:
            Registro restaurado

        Raises:
            NotFoundException: Si el registro no existe
            InvalidStateException: Si el registro no estaba eliminado
            ValidationException: Si el registro padre no existe o está eliminado
        """
        obj = self.get_or_404(db, id)
        if not obj.is_deleted:
            raise InvalidStateException(self.not_deleted_message)
        self.check_parent(db, {field: getattr(obj, field) for field in self.parent_fields})
        obj.restore()
        db.add(obj)
        self._commit(db, obj)
        logger.info("%s restaurado: %s", self.model.__name__, getattr(obj, self.key_field))
        return obj
