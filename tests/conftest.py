"""
Configuración de pytest y fixtures compartidas.
"""
import os

# La aplicación de módulo (correccion_api.main:app) lee la configuración al importarse
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test-import.db")

import pytest
from fastapi.testclient import TestClient

from correccion_api.config import Settings
from correccion_api.core.security import create_access_token
from correccion_api.crud.user import user as crud_user
from correccion_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Configuración con una base SQLite temporal por test."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret-key",
        ROOT_ADMIN_USERNAME="admin",
        ROOT_ADMIN_PASSWORD="rootpass123",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Cliente HTTP con el lifespan de la aplicación activo."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client, app):
    """Sesión independiente sobre la misma base que usa la aplicación."""
    session = app.state.db.session()
    try:
        yield session
    finally:
        session.close()


def token_headers(user_id: int, settings: Settings) -> dict:
    token = create_access_token({"sub": str(user_id)}, settings=settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def root_admin(db_session, settings):
    """Administrador principal creado al iniciar la aplicación."""
    return crud_user.get_by_username(db_session, username=settings.ROOT_ADMIN_USERNAME)


@pytest.fixture
def admin_headers(root_admin, settings):
    return token_headers(root_admin.id, settings)


@pytest.fixture
def professor_headers(client, admin_headers, settings):
    """Usuario sin permisos de administrador."""
    response = client.post(
        "/api/users",
        json={
            "username": "prof1",
            "name": "Profesor Uno",
            "password": "secret123",
            "role": "professor",
            "university_id": "utn",
        },
        headers=admin_headers,
    )
    assert response.status_code == 201
    return token_headers(response.json()["data"]["id"], settings)


@pytest.fixture
def academic_tree(client, admin_headers):
    """
    Universidad utn con dos facultades (frm, frsn), una carrera en cada una
    y un curso "algoritmos" con la misma clave en ambas carreras.
    """
    def post(path, payload):
        response = client.post(path, json=payload, headers=admin_headers)
        assert response.status_code == 201, response.json()
        return response.json()["data"]

    tree = {"university": post("/api/universities", {"university_id": "utn", "name": "UTN"})}
    for faculty in ("frm", "frsn"):
        career_id = f"isi-{faculty}"
        tree[faculty] = post("/api/faculties", {
            "faculty_id": faculty,
            "name": f"Facultad {faculty.upper()}",
            "university_id": "utn",
        })
        tree[career_id] = post("/api/careers", {
            "career_id": career_id,
            "name": f"Ingeniería en Sistemas {faculty.upper()}",
            "faculty_id": faculty,
            "university_id": "utn",
        })
        tree[f"algoritmos-{faculty}"] = post("/api/courses", {
            "course_id": "algoritmos",
            "name": f"Algoritmos {faculty.upper()}",
            "year": 2024,
            "career_id": career_id,
            "faculty_id": faculty,
            "university_id": "utn",
        })
    return tree
