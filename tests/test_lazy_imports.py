"""Tests for the lazy top-level ``junction`` API."""

import pytest

import junction


class TestLazyImports:
    @pytest.mark.parametrize("name", junction.__all__)
    def test_public_names_resolve(self, name: str) -> None:
        assert getattr(junction, name) is not None

    def test_same_objects_as_submodules(self) -> None:
        from junction.app import App
        from junction.http.query import parse_query_string
        from junction.http.request import RequestState

        assert junction.App is App
        assert junction.RequestState is RequestState
        assert junction.parse_query_string is parse_query_string

    def test_unknown_name(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'missing'"):
            junction.missing  # noqa: B018
