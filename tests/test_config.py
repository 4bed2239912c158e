"""Tests for junction.config — AppConfig frozen dataclass."""

import pytest

from junction.config import DEFAULT_CACHE_LIMIT, AppConfig, check_cache_limit
from junction.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.cache_limit == DEFAULT_CACHE_LIMIT
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, debug=True, cache_limit=16)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.debug is True
        assert cfg.cache_limit == 16

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    @pytest.mark.parametrize("limit", [0, -5, 2.0, False, None])
    def test_invalid_cache_limit(self, limit: object) -> None:
        with pytest.raises(ConfigurationError, match="cache_limit"):
            AppConfig(cache_limit=limit)  # type: ignore[arg-type]

    def test_check_cache_limit_returns_value(self) -> None:
        assert check_cache_limit(1) == 1
