"""
Config Manager

Loads composition props from YAML or JSON, merges them over the default
props and validates them into an immutable AnimationConfig.

This is the only place props are validated; nothing past it re-checks.
"""

from __future__ import annotations

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from models.config import DEFAULT_PROPS, AnimationConfig, CompositionProps
from models.errors import ConfigValidationError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def _format_validation_errors(ex: ValidationError) -> List[Dict[str, Any]]:
    """Convert pydantic errors to {field, message, type} entries"""
    errors = []
    for error in ex.errors():
        errors.append({
            "field": ".".join(str(x) for x in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        })
    return errors


def validate_props(raw: Dict[str, Any]) -> AnimationConfig:
    """
    Validate raw props and build the engine config

    Args:
        raw: Props dict with camelCase keys

    Returns:
        Immutable AnimationConfig

    Raises:
        ConfigValidationError: missing field, wrong type or out-of-range value
    """
    try:
        props = CompositionProps.model_validate(raw)
    except ValidationError as ex:
        errors = _format_validation_errors(ex)
        log.error("Props validation failed", error_count=len(errors),
                  fields=", ".join(e["field"] for e in errors))
        raise ConfigValidationError(errors) from ex

    config = AnimationConfig.from_props(props)
    log.info(
        "Props validated",
        repository=f"{props.user}/{props.repository}",
        stars=config.stars_final,
        stargazers=config.entity_count,
        animation_frames=config.animation_duration_frames,
    )
    return config


class ConfigManager:
    """
    Props loader with include support

    A props file may list other files under `include:`; they are merged in
    order, then the including file's own keys are applied on top. Everything
    is merged over DEFAULT_PROPS, so a file only needs the keys it changes.

    Example:
        config = ConfigManager("props/book-pr.yaml").load()

        # props/book-pr.yaml
        include:
          - stargazers.json
        stars: 143
        repository: book-pr
    """

    def __init__(self, props_path: Optional[Union[str, Path]] = None, use_defaults: bool = True):
        """
        Initialize ConfigManager

        Args:
            props_path: YAML/JSON props file (None = defaults only)
            use_defaults: Merge over DEFAULT_PROPS (False = file must be complete)
        """
        self.props_path = Path(props_path) if props_path is not None else None
        self.use_defaults = use_defaults
        self.data: Dict[str, Any] = {}

    def load(self) -> AnimationConfig:
        """
        Load, merge and validate props

        Raises:
            ConfigValidationError: file unreadable/unparseable or props invalid
        """
        merged: Dict[str, Any] = dict(DEFAULT_PROPS) if self.use_defaults else {}

        if self.props_path is not None:
            merged.update(self._load_file(self.props_path, set()))
        else:
            log.info("No props file given, using default props")

        self.data = merged
        return validate_props(merged)

    def _load_file(self, path: Path, seen: set) -> Dict[str, Any]:
        """Load one props file, resolving its include list relative to it"""
        resolved = path.resolve()
        if resolved in seen:
            raise self._load_error(path, "circular include")
        seen = seen | {resolved}

        data = self._parse(path)

        includes = data.pop("include", None) or []
        if not isinstance(includes, list) or not all(isinstance(i, str) for i in includes):
            raise self._load_error(path, "include must be a list of file names")

        merged: Dict[str, Any] = {}
        for include in includes:
            merged.update(self._load_file(path.parent / include, seen))
        merged.update(data)

        log.info(f"Loaded {path.name}", keys=str(list(data.keys())[:10]))
        return merged

    def _parse(self, path: Path) -> Dict[str, Any]:
        suffix = path.suffix.lower()
        if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
            raise self._load_error(path, f"unsupported file type '{suffix}'")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix in JSON_SUFFIXES:
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except FileNotFoundError:
            raise self._load_error(path, "file not found") from None
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as ex:
            raise self._load_error(path, str(ex)) from ex

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise self._load_error(path, f"top level must be a mapping, got {type(data).__name__}")
        return data

    def _load_error(self, path: Path, reason: str) -> ConfigValidationError:
        log.error(f"Failed to load {path}", error=reason)
        return ConfigValidationError(
            [{"field": str(path), "message": reason, "type": "load_error"}],
            message=f"Cannot load props file {path}: {reason}",
            code="CONFIG_LOAD_FAILED",
        )
