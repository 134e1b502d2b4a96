# notas/config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DIR = ROOT / "public" / "notas"

STATIC = "static"
QUERY = "query"
LOCATOR_STYLES = (STATIC, QUERY)

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class NotasConfig:
    directory: Path = DEFAULT_DIR
    extension: str = ".pdf"
    locator: str = STATIC
    static_prefix: str = "/notas"
    file_endpoint: str = "/api/file"
    media_type: str = "application/pdf"
    create_missing: bool = False
    strict: bool = False

    def __post_init__(self):
        if self.locator not in LOCATOR_STYLES:
            raise ValueError(
                f"unknown locator style {self.locator!r}, expected one of {LOCATOR_STYLES}"
            )
        ext = self.extension.strip().lower()
        if not ext.startswith("."):
            ext = "." + ext
        # frozen dataclass
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "extension", ext)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_config(**defaults) -> NotasConfig:
    """
    Build a NotasConfig from the given per-surface defaults, letting
    NOTAS_* environment variables override them.
    """
    base = NotasConfig(**defaults)
    return NotasConfig(
        directory=Path(os.getenv("NOTAS_DIR", str(base.directory))),
        extension=os.getenv("NOTAS_EXTENSION", base.extension),
        locator=os.getenv("NOTAS_LOCATOR", base.locator).strip().lower(),
        static_prefix=os.getenv("NOTAS_STATIC_PREFIX", base.static_prefix),
        file_endpoint=os.getenv("NOTAS_FILE_ENDPOINT", base.file_endpoint),
        media_type=os.getenv("NOTAS_MEDIA_TYPE", base.media_type),
        create_missing=_env_flag("NOTAS_CREATE_DIR", base.create_missing),
        strict=_env_flag("NOTAS_STRICT", base.strict),
    )


def configure_logging(level: Optional[str] = None):
    level = (level or os.getenv("NOTAS_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
