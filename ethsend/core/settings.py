"""Config file loading and validation for ethsend."""

from __future__ import annotations

import functools
import json
import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from ethsend.core.errors import ConfigLoadError, ConfigValidationError
from ethsend.core.model import Settings

LOGGER = logging.getLogger(__name__)


class _ConfigLoader(yaml.SafeLoader):
    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise ConfigValidationError(f"Duplicate key '{key}' in YAML document")
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


@functools.lru_cache(maxsize=None)
def _schema_validator() -> Any:
    schema = json.loads(
        resources.files("ethsend.schemas").joinpath("config.schema.json").read_text(encoding="utf-8")
    )
    return validators.validator_for(schema)(schema)


def default_config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "ethsend/config.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Could not read config file {path}: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=_ConfigLoader)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping at root")
    return loaded


def _build_settings(doc: dict[str, Any], source: Path) -> Settings:
    validator = _schema_validator()
    try:
        validator.validate(doc)
    except ValidationError as exc:
        path = ".".join(str(p) for p in exc.path)
        where = f" ({path})" if path else ""
        raise ConfigValidationError(f"Schema validation failed for {source}{where}: {exc.message}") from exc

    defaults = Settings()
    timeout = doc.get("receive_timeout_s", defaults.receive_timeout_s)
    return Settings(
        receive_buffer_size=int(doc.get("receive_buffer_size", defaults.receive_buffer_size)),
        receive_timeout_s=float(timeout) if timeout is not None else None,
        log_level=doc.get("log_level", defaults.log_level),
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, or from the XDG config file when it exists.

    An explicitly given path must exist; the default location is optional.
    """
    if path is None:
        path = default_config_path()
        if not path.is_file():
            LOGGER.debug("No config file at %s, using defaults", path)
            return Settings()

    doc = _read_yaml(path)
    settings = _build_settings(doc, path)
    LOGGER.debug("Loaded settings from %s", path)
    return settings
