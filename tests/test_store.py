"""
Tests del almacén de entidades a nivel CRUD.
"""
import logging

import pytest

from correccion_api.core.exceptions import ConflictException, InvalidStateException, ValidationException
from correccion_api.crud.university import university as crud_university


class TestUniqueIndexBackstop:
    """El índice único cubre altas que pasan la verificación previa."""

    def test_integrity_error_becomes_conflict(self, db_session, monkeypatch, caplog):
        crud_university.create(db_session, obj_in={"university_id": "utn", "name": "UTN"})
        monkeypatch.setattr(crud_university, "check_unique", lambda *args, **kwargs: None)

        with caplog.at_level(logging.INFO, logger="correccion_api.crud.base"):
            with pytest.raises(ConflictException) as exc_info:
                crud_university.create(db_session, obj_in={"university_id": "utn", "name": "UTN bis"})
        assert exc_info.value.message == crud_university.conflict_message

        logged = [r for r in caplog.records if "violación de integridad" in r.getMessage()]
        assert logged and logged[0].exc_info is not None

        # La sesión sigue utilizable después del rollback
        assert len(crud_university.find_active(db_session)) == 1


class TestStoreQueries:
    """Consultas del almacén."""

    def test_unknown_filter(self, db_session):
        with pytest.raises(ValidationException):
            crud_university.find_active(db_session, {"color": "rojo"})

    def test_find_all_by_state(self, db_session):
        kept = crud_university.create(db_session, obj_in={"university_id": "utn", "name": "UTN"})
        gone = crud_university.create(db_session, obj_in={"university_id": "uba", "name": "UBA"})
        crud_university.soft_delete(db_session, id=gone.id)

        assert [u.id for u in crud_university.find_all(db_session, deleted=True)] == [gone.id]
        assert [u.id for u in crud_university.find_all(db_session, deleted=False)] == [kept.id]
        assert len(crud_university.find_all(db_session)) == 2

    def test_restore_active(self, db_session):
        created = crud_university.create(db_session, obj_in={"university_id": "utn", "name": "UTN"})
        with pytest.raises(InvalidStateException):
            crud_university.restore(db_session, id=created.id)
