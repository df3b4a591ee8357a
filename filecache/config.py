from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import tomllib

from .codecs.csv_codec import DEFAULT_SEPARATOR, validate_separator
from .records import FileFormat

CONFIG_HOME_ENV = "FILECACHE_HOME"
CONFIG_FILE_NAME = "config.toml"
DEFAULT_FILE_NAME = "todos"

DEFAULT_CONFIG_CONTENT = """[cache]
file_name = \"todos\"
format = \"json\"
separator = \";\"
"""


def config_home() -> Path:
    """Return the configuration directory, honouring ``$FILECACHE_HOME``."""

    override = os.environ.get(CONFIG_HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".filecache"


def default_config_path() -> Path:
    return config_home() / CONFIG_FILE_NAME


@dataclass(frozen=True)
class CacheOptions:
    """Defaults applied to save/load calls that leave an argument unset."""

    file_name: str = DEFAULT_FILE_NAME
    format: FileFormat = FileFormat.JSON
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "format", FileFormat.parse(self.format))
        validate_separator(self.separator)

    def merge(
        self,
        file_name: Optional[str] = None,
        format: FileFormat | str | None = None,
        separator: Optional[str] = None,
    ) -> "CacheOptions":
        updates: Dict[str, Any] = {}
        if file_name is not None:
            updates["file_name"] = file_name
        if format is not None:
            updates["format"] = format
        if separator is not None:
            updates["separator"] = separator
        return replace(self, **updates) if updates else self


@dataclass
class Config:
    cache: CacheOptions = field(default_factory=CacheOptions)
    documents_dir: Optional[Path] = None
    config_dir: Path = field(default_factory=config_home)

    @property
    def log_dir(self) -> Path:
        return self.config_dir / "logs"


def _load_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def ensure_config(path: Path | None = None) -> Path:
    """Ensure a configuration file exists at *path* and return it."""

    target = Path(path) if path is not None else default_config_path()
    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(DEFAULT_CONFIG_CONTENT, encoding="utf-8")
    return target


def load_config(path: Optional[Path] = None) -> Config:
    cfg_path = Path(path) if path is not None else default_config_path()
    data = _load_toml(cfg_path)

    cfg = Config(config_dir=cfg_path.parent)

    cache = data.get("cache", {})
    cfg.cache = CacheOptions(
        file_name=str(cache.get("file_name", cfg.cache.file_name)),
        format=FileFormat.parse(cache.get("format", cfg.cache.format)),
        separator=str(cache.get("separator", cfg.cache.separator)),
    )

    if "documents_dir" in data:
        cfg.documents_dir = Path(data["documents_dir"]).expanduser()

    return cfg


__all__ = [
    "CacheOptions",
    "Config",
    "config_home",
    "default_config_path",
    "ensure_config",
    "load_config",
    "CONFIG_HOME_ENV",
    "DEFAULT_CONFIG_CONTENT",
    "DEFAULT_FILE_NAME",
]
