"""
Tests de los endpoints de estructura académica.
"""
from sqlalchemy import update

from correccion_api.models.university import University


class TestHealth:
    """Endpoints de servicio."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "online"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route(self, client):
        response = client.get("/api/no-existe")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestCreate:
    """Alta de registros y unicidad por ámbito."""

    def test_create_university(self, client, admin_headers):
        response = client.post(
            "/api/universities",
            json={"university_id": " UTN ", "name": "Universidad Tecnológica"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["university_id"] == "utn"
        assert body["data"]["deleted"] is False
        assert body["data"]["created_at"] is not None

    def test_invalid_natural_key(self, client, admin_headers):
        response = client.post(
            "/api/universities",
            json={"university_id": "utn frm!", "name": "UTN"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"]

    def test_duplicate_in_scope(self, client, admin_headers, academic_tree):
        response = client.post(
            "/api/courses",
            json={
                "course_id": "algoritmos",
                "name": "Otro",
                "year": 2025,
                "career_id": "isi-frm",
                "faculty_id": "frm",
                "university_id": "utn",
            },
            headers=admin_headers,
        )
        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Clave duplicada"
        assert body["message"] == "Ya existe un curso con ese ID en esta carrera"

    def test_same_key_in_other_scope(self, academic_tree):
        assert academic_tree["algoritmos-frm"]["id"] != academic_tree["algoritmos-frsn"]["id"]

    def test_duplicate_of_deleted_record(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        assert client.delete(f"/api/courses/{course_id}", headers=admin_headers).status_code == 200

        response = client.post(
            "/api/courses",
            json={
                "course_id": "algoritmos",
                "name": "Algoritmos",
                "year": 2024,
                "career_id": "isi-frm",
                "faculty_id": "frm",
                "university_id": "utn",
            },
            headers=admin_headers,
        )
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "Clave de registro eliminado"
        assert "Restáurelo" in body["message"]

    def test_missing_parent(self, client, admin_headers, academic_tree):
        response = client.post(
            "/api/courses",
            json={
                "course_id": "fisica",
                "name": "Física",
                "year": 2024,
                "career_id": "no-existe",
                "faculty_id": "frm",
                "university_id": "utn",
            },
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"] == "La carrera especificada no existe"

    def test_parent_in_other_scope(self, client, admin_headers, academic_tree):
        """La carrera existe pero en otra facultad."""
        response = client.post(
            "/api/courses",
            json={
                "course_id": "fisica",
                "name": "Física",
                "year": 2024,
                "career_id": "isi-frm",
                "faculty_id": "frsn",
                "university_id": "utn",
            },
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_commission_with_professor(self, client, admin_headers, academic_tree):
        response = client.post(
            "/api/commissions",
            json={
                "commission_id": "k1021",
                "name": "K1021",
                "year": 2024,
                "course_id": "algoritmos",
                "career_id": "isi-frm",
                "faculty_id": "frm",
                "university_id": "utn",
                "professor_name": "Ana Pérez",
                "professor_email": "ana@example.com",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201
        assert response.json()["data"]["professor_email"] == "ana@example.com"


    def test_same_career_key_in_two_faculties(self, client, admin_headers, academic_tree):
        """Cada facultad tiene su carrera "isi"; el curso puede repetirse en ambas."""
        for faculty in ("frm", "frsn"):
            career = client.post(
                "/api/careers",
                json={"career_id": "isi", "name": f"ISI {faculty}", "faculty_id": faculty, "university_id": "utn"},
                headers=admin_headers,
            )
            assert career.status_code == 201

            course = client.post(
                "/api/courses",
                json={
                    "course_id": "fisica",
                    "name": f"Física {faculty}",
                    "year": 2024,
                    "career_id": "isi",
                    "faculty_id": faculty,
                    "university_id": "utn",
                },
                headers=admin_headers,
            )
            assert course.status_code == 201, course.json()

        response = client.get("/api/courses", params={"course_id": "fisica", "career_id": "isi"})
        assert response.json()["count"] == 2


class TestHierarchicalFilters:
    """Consultas por ámbito."""

    def test_course_key_without_career_returns_both(self, client, academic_tree):
        response = client.get("/api/courses", params={"course_id": "algoritmos"})
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert {c["career_id"] for c in body["data"]} == {"isi-frm", "isi-frsn"}

    def test_course_key_with_career(self, client, academic_tree):
        response = client.get("/api/courses", params={"course_id": "algoritmos", "career_id": "isi-frsn"})
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["faculty_id"] == "frsn"

    def test_empty_params_are_ignored(self, client, academic_tree):
        response = client.get("/api/courses", params={"course_id": "algoritmos", "career_id": ""})
        assert response.json()["count"] == 2

    def test_no_match(self, client, academic_tree):
        response = client.get("/api/courses", params={"career_id": "isi-frm", "year": "2030"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 0, "data": [], "note": None}

    def test_results_ordered_by_name(self, client, academic_tree):
        names = [f["name"] for f in client.get("/api/faculties").json()["data"]]
        assert names == sorted(names)

    def test_non_numeric_year(self, client, academic_tree):
        response = client.get("/api/courses", params={"year": "abc"})
        assert response.status_code == 400
        assert response.json()["error"] == "Error de validación"

    def test_by_year(self, client, academic_tree):
        assert client.get("/api/courses/by-year/2024").json()["count"] == 2
        assert client.get("/api/courses/by-year/2023").json()["count"] == 0
        assert client.get("/api/courses/by-year/abc").status_code == 400

    def test_unique_keeps_first_per_key(self, client, academic_tree):
        response = client.get("/api/courses/unique", params={"course_id": "algoritmos"})
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == academic_tree["algoritmos-frm"]["id"]
        assert body["note"]


class TestSoftDelete:
    """Ciclo de vida de baja lógica."""

    def test_delete_hides_from_list(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        response = client.delete(f"/api/courses/{course_id}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["data"]["deleted"] is True

        listed = client.get("/api/courses", params={"course_id": "algoritmos"}).json()
        assert [c["id"] for c in listed["data"]] == [academic_tree["algoritmos-frsn"]["id"]]

        deleted = client.get("/api/courses/all", params={"deleted": "true"}, headers=admin_headers).json()
        assert [c["id"] for c in deleted["data"]] == [course_id]

        everything = client.get("/api/courses/all", headers=admin_headers).json()
        assert everything["count"] == 2

    def test_get_by_id_returns_deleted(self, client, admin_headers, academic_tree):
        university_id = academic_tree["university"]["id"]
        client.delete(f"/api/universities/{university_id}", headers=admin_headers)
        response = client.get(f"/api/universities/{university_id}")
        assert response.status_code == 200
        assert response.json()["data"]["deleted"] is True

    def test_delete_twice(self, client, admin_headers, academic_tree):
        faculty_id = academic_tree["frm"]["id"]
        assert client.delete(f"/api/faculties/{faculty_id}", headers=admin_headers).status_code == 200
        response = client.delete(f"/api/faculties/{faculty_id}", headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "La facultad ya está eliminada"

    def test_restore(self, client, admin_headers, academic_tree):
        career_id = academic_tree["isi-frm"]["id"]
        client.delete(f"/api/careers/{career_id}", headers=admin_headers)

        response = client.put(f"/api/careers/{career_id}/restore", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["data"]["deleted"] is False
        assert client.get("/api/careers", params={"career_id": "isi-frm"}).json()["count"] == 1

        again = client.put(f"/api/careers/{career_id}/restore", headers=admin_headers)
        assert again.status_code == 400

    def test_restore_under_deleted_parent(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        career_id = academic_tree["isi-frm"]["id"]
        assert client.delete(f"/api/courses/{course_id}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/careers/{career_id}", headers=admin_headers).status_code == 200

        response = client.put(f"/api/courses/{course_id}/restore", headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "La carrera especificada no existe"
        assert client.get(f"/api/courses/{course_id}").json()["data"]["deleted"] is True

        assert client.put(f"/api/careers/{career_id}/restore", headers=admin_headers).status_code == 200
        response = client.put(f"/api/courses/{course_id}/restore", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["data"]["deleted"] is False

    def test_not_found(self, client, admin_headers):
        assert client.get("/api/courses/9999").status_code == 404
        assert client.delete("/api/courses/9999", headers=admin_headers).status_code == 404
        response = client.put("/api/courses/9999/restore", headers=admin_headers)
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Curso no encontrado"}

    def test_null_deleted_counts_as_active(self, client, db_session, academic_tree):
        db_session.execute(
            update(University).where(University.university_id == "utn").values(deleted=None)
        )
        db_session.commit()

        response = client.get("/api/universities")
        assert response.json()["count"] == 1
        assert response.json()["data"][0]["deleted"] is False


class TestUpdate:
    """Actualización parcial."""

    def test_partial_update(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        response = client.put(f"/api/courses/{course_id}", json={"name": "Algoritmos I"}, headers=admin_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Algoritmos I"
        assert data["year"] == 2024
        assert data["career_id"] == "isi-frm"
        assert data["faculty_id"] == "frm"
        assert data["university_id"] == "utn"
        assert data["deleted"] is False

    def test_empty_update(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        response = client.put(f"/api/courses/{course_id}", json={}, headers=admin_headers)
        assert response.status_code == 400

    def test_null_for_required_field(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        response = client.put(f"/api/courses/{course_id}", json={"name": None}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_deleted(self, client, admin_headers, academic_tree):
        course_id = academic_tree["algoritmos-frm"]["id"]
        client.delete(f"/api/courses/{course_id}", headers=admin_headers)
        response = client.put(f"/api/courses/{course_id}", json={"name": "X"}, headers=admin_headers)
        assert response.status_code == 400
        assert "Restáurelo" in response.json()["message"]

    def test_rescope_into_conflict(self, client, admin_headers, academic_tree):
        """Mover un curso a una carrera que ya tiene esa clave."""
        course_id = academic_tree["algoritmos-frm"]["id"]
        response = client.put(
            f"/api/courses/{course_id}",
            json={"career_id": "isi-frsn", "faculty_id": "frsn"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_natural_key_is_not_updated(self, client, admin_headers, academic_tree):
        university_id = academic_tree["university"]["id"]
        response = client.put(
            f"/api/universities/{university_id}",
            json={"name": "UTN Nacional", "university_id": "otra"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["university_id"] == "utn"


class TestAuthorization:
    """Acceso a rutas de administración."""

    def test_missing_token(self, client):
        response = client.post("/api/universities", json={"university_id": "utn", "name": "UTN"})
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_invalid_token(self, client):
        response = client.get("/api/universities/all", headers={"Authorization": "Bearer invalido"})
        assert response.status_code == 401

    def test_non_admin(self, client, professor_headers):
        response = client.get("/api/universities/all", headers=professor_headers)
        assert response.status_code == 403

    def test_public_list(self, client):
        assert client.get("/api/universities").status_code == 200


class TestCommissions:
    """Comisiones con la misma clave en cursos de distintas carreras."""

    def test_unique_keeps_first_per_key(self, client, admin_headers, academic_tree):
        ids = []
        for faculty in ("frm", "frsn"):
            response = client.post(
                "/api/commissions",
                json={
                    "commission_id": "k1021",
                    "name": f"K1021 {faculty.upper()}",
                    "year": 2024,
                    "course_id": "algoritmos",
                    "career_id": f"isi-{faculty}",
                    "faculty_id": faculty,
                    "university_id": "utn",
                },
                headers=admin_headers,
            )
            assert response.status_code == 201
            ids.append(response.json()["data"]["id"])

        assert client.get("/api/commissions", params={"commission_id": "k1021"}).json()["count"] == 2

        response = client.get("/api/commissions/unique", params={"commission_id": "k1021"})
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == ids[0]
        assert body["note"]
