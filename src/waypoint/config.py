"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, yaml_file="routes.yml")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count (production only)
    log_level: str = "info"

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".yml", ".json")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Route sources, innermost first. Absent sources are skipped.
    default_routes: tuple[tuple[str, str], ...] = ()
    yaml_file: str | Path | None = None
    json_file: str | Path | None = None
    store_file: str | Path | None = None
    store_bucket: str = "routes"

    # Body of the built-in default handler (answers every unmapped path)
    greeting: str = "Hello, world!"
