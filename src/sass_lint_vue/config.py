from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".sass-lint.yml"
FALLBACK_CONFIG_FILENAME = ".sasslintrc"
CONFIG_FILENAMES = (DEFAULT_CONFIG_FILENAME, FALLBACK_CONFIG_FILENAME)
INDENTATION_RULE = "indentation"
BASE_INDENT_OPTION = "base-indent"
STYLELINT_CONFIG_OPTION = "stylelint-config"

DEFAULT_CONFIG: dict[str, Any] = {
    "options": {},
    "files": {},
    "rules": {},
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def home_directory() -> Path | None:
    for name in ("HOME", "HOMEPATH", "USERPROFILE"):
        value = os.environ.get(name)
        if value:
            return Path(value)
    return None


def find_config(start: Path, home: Path | None = None) -> Path | None:
    """Search ``start`` and its ancestors for a sass-lint config file.

    At each directory ``.sass-lint.yml`` wins over ``.sasslintrc``. The walk
    always searches ``start`` itself; going upward it stops at the home
    directory, which is compared by exact path equality and not searched.
    """
    directory = start
    while True:
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate.resolve()
        if directory.parent == directory:
            return None
        directory = directory.parent
        if home is not None and directory == home:
            return None


def _read_base_indent(rules: dict[str, Any], config_path: Path | None) -> int | None:
    rule = rules.get(INDENTATION_RULE)
    if not isinstance(rule, list) or len(rule) < 2 or not isinstance(rule[1], dict):
        return None
    value = rule[1].get(BASE_INDENT_OPTION)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(
            f"{config_path or 'config'}: rules.{INDENTATION_RULE}.{BASE_INDENT_OPTION} "
            f"must be a non-negative integer, got {value!r}"
        )
    return value


@dataclass(frozen=True)
class Config:
    options: dict[str, Any]
    files: dict[str, Any]
    rules: dict[str, Any]
    path: Path | None = None

    @property
    def base_indent(self) -> int | None:
        return _read_base_indent(self.rules, self.path)

    @property
    def stylelint_config(self) -> Path | None:
        value = self.options.get(STYLELINT_CONFIG_OPTION)
        if not value:
            return None
        path = Path(str(value))
        if path.is_absolute() or self.path is None:
            return path
        return self.path.parent / path

    @staticmethod
    def load(config_path: Path | None) -> "Config":
        data = copy.deepcopy(DEFAULT_CONFIG)
        if config_path and config_path.exists():
            try:
                with config_path.open("r", encoding="utf-8") as handle:
                    override = yaml.safe_load(handle)
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigError(f"{config_path}: cannot load configuration: {exc}") from exc
            if override is None:
                override = {}
            if not isinstance(override, dict):
                raise ConfigError(f"{config_path}: configuration must be a mapping")
            _deep_merge(data, override)
        return Config.from_dict(data, config_path)

    @staticmethod
    def from_dict(data: dict[str, Any], config_path: Path | None = None) -> "Config":
        sections = {}
        for key in ("options", "files", "rules"):
            value = data.get(key) or {}
            if not isinstance(value, dict):
                raise ConfigError(f"{config_path or 'config'}: '{key}' must be a mapping")
            sections[key] = value
        _read_base_indent(sections["rules"], config_path)
        return Config(path=config_path, **sections)


def load_config(config_path: Path | None = None, start: Path | None = None) -> Config:
    """Load an explicit config file, or the nearest one above ``start``."""
    if config_path is None:
        config_path = find_config(start or Path.cwd(), home_directory())
    if config_path is None:
        logger.debug("no sass-lint config found, using defaults")
    else:
        logger.debug("using sass-lint config %s", config_path)
    return Config.load(config_path)
