"""
Tests del resolvedor de filtros jerárquicos.
"""
import logging

import pytest

from correccion_api.core.exceptions import ValidationException
from correccion_api.core.filters import missing_ancestors, resolve_filters, warn_if_underscoped


class TestResolveFilters:
    """Construcción de filtros a partir de parámetros de consulta."""

    def test_omits_missing_and_empty_values(self):
        filters = resolve_filters(university_id="utn", faculty_id=None, career_id="", course_id="  ")
        assert filters == {"university_id": "utn"}

    def test_keeps_text_values_verbatim(self):
        assert resolve_filters(course_id="algoritmos") == {"course_id": "algoritmos"}

    def test_parses_year_as_integer(self):
        assert resolve_filters(year="2024") == {"year": 2024}
        assert resolve_filters(year=2023) == {"year": 2023}

    def test_rejects_non_numeric_year(self):
        with pytest.raises(ValidationException) as exc_info:
            resolve_filters(year="dos mil")
        assert "year" in exc_info.value.message

    def test_no_params_means_no_filters(self):
        assert resolve_filters() == {}


class TestMissingAncestors:
    """Detección de consultas con ámbito incompleto."""

    def test_complete_chain(self):
        filters = {"university_id": "utn", "faculty_id": "frm", "career_id": "isi-frm", "course_id": "algoritmos"}
        assert missing_ancestors(filters) == []

    def test_course_without_career(self):
        assert missing_ancestors({"course_id": "algoritmos"}) == [
            "university_id", "faculty_id", "career_id"
        ]

    def test_partial_chain(self):
        assert missing_ancestors({"university_id": "utn", "career_id": "isi-frm"}) == ["faculty_id"]

    def test_year_alone_is_not_scoped(self):
        assert missing_ancestors({"year": 2024}) == []

    def test_warning_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="correccion_api.core.filters"):
            missing = warn_if_underscoped("courses", {"course_id": "algoritmos"})
        assert "career_id" in missing
        assert "GET /api/courses" in caplog.text
