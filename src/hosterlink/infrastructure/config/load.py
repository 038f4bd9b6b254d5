"""Layered config loading: defaults < YAML < env (incl. .env) < overrides."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_SECTION_KEYS: frozenset[str] = frozenset(
    {"provider", "catalog", "http", "cache", "logging"}
)

# Flat key -> (section, section_key)
_FLAT_MAP: dict[str, tuple[str, str]] = {
    "provider_name": ("provider", "name"),
    "main_url": ("provider", "main_url"),
    "catalog_base_url": ("catalog", "base_url"),
    "catalog_language": ("catalog", "language"),
    "catalog_page_size": ("catalog", "page_size"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_follow_redirects": ("http", "follow_redirects"),
    "http_user_agent": ("http", "user_agent"),
    "cache_ttl_seconds": ("cache", "ttl_seconds"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
}


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Nested mappings merge key by key; any other value replaces."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring a flat or sectioned layer into the sectioned shape.

    Unknown keys are dropped; flat keys win over their sectioned twin.
    """
    out: dict[str, Any] = {
        section: dict(layer[section])
        for section in _SECTION_KEYS
        if isinstance(layer.get(section), Mapping)
    }
    if "environment" in layer:
        out["environment"] = layer["environment"]

    for flat_key, (section, section_key) in _FLAT_MAP.items():
        if flat_key in layer:
            out.setdefault(section, {})[section_key] = layer[flat_key]
    return out


def _yaml_layer(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(config_path)
    parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def _env_layer(dotenv_path: Path | None) -> dict[str, Any]:
    # Variables already set in the process win over the .env file.
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)
    return EnvOverrides().to_update_dict()


def _fold(layers: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for layer in layers:
        _merge_into(merged, _sectioned(layer))
    return merged


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Build the provider config from its layers.

    Precedence: defaults < YAML file < env vars (``HOSTERLINK_*``, optionally
    seeded from *dotenv_path*) < *overrides*. Reads only; nothing is written
    to disk.

    Raises:
        FileNotFoundError: *config_path* or *dotenv_path* does not exist.
        ValueError: the YAML document is not a mapping.
        pydantic.ValidationError: the merged values are invalid.
    """
    layers: list[Mapping[str, Any]] = [deepcopy(DEFAULT_CONFIG)]
    if config_path is not None:
        layers.append(_yaml_layer(config_path))
    layers.append(_env_layer(dotenv_path))
    layers.append(overrides or {})
    return AppConfig.model_validate(_fold(layers))
