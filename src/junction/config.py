"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from junction.errors import ConfigurationError

DEFAULT_CACHE_LIMIT = 1024


def check_cache_limit(value: object) -> int:
    """Return *value* if it is a positive int, else raise ``ConfigurationError``."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"cache_limit must be a positive integer, got {value!r}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, cache_limit=256)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Routing: max concrete paths remembered by the match cache
    cache_limit: int = DEFAULT_CACHE_LIMIT

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        check_cache_limit(self.cache_limit)
