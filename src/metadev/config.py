from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

DEFAULT_CONFIG_NAME = "metadev.toml"

DEFAULT_SOURCE_SUFFIXES: tuple[str, ...] = (".tsx",)
DEFAULT_SKIP_DIRS: frozenset[str] = frozenset(
    {"node_modules", "vendor", ".git", ".next", "dist", "build"}
)
DEFAULT_OUTPUT_DIR = ".i18n"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


@dataclass(frozen=True)
class I18nSettings:
    source_suffixes: tuple[str, ...] = DEFAULT_SOURCE_SUFFIXES
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS
    output_dir: str = DEFAULT_OUTPUT_DIR

    @property
    def gitignore_entry(self) -> str:
        return f"{self.output_dir.rstrip('/')}/"


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def i18n_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("i18n", {})
    return section if isinstance(section, dict) else {}


def _normalize_name_list(value: TomlValue) -> list[str]:
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, (list, tuple, set)):
        for item in value:
            if isinstance(item, str):
                items.extend([part.strip() for part in item.split(",") if part.strip()])
    return [item for item in items if item]


def _normalize_suffix(value: str) -> str:
    return value if value.startswith(".") else f".{value}"


def i18n_settings(section: TomlTable | None) -> I18nSettings:
    """Build extraction settings from an ``[i18n]`` table.

    Unknown keys are ignored. ``skip_dirs`` extends the built-in pruned
    directories rather than replacing them.
    """
    if not isinstance(section, dict):
        return I18nSettings()
    suffixes = tuple(
        _normalize_suffix(item) for item in _normalize_name_list(section.get("source_suffixes"))
    )
    extra_skip = _normalize_name_list(section.get("skip_dirs"))
    output_dir = section.get("output_dir")
    return I18nSettings(
        source_suffixes=suffixes or DEFAULT_SOURCE_SUFFIXES,
        skip_dirs=DEFAULT_SKIP_DIRS | frozenset(extra_skip),
        output_dir=output_dir.strip() if isinstance(output_dir, str) and output_dir.strip() else DEFAULT_OUTPUT_DIR,
    )


def load_i18n_settings(
    root: Path | None = None, config_path: Path | None = None
) -> I18nSettings:
    return i18n_settings(i18n_defaults(root=root, config_path=config_path))
