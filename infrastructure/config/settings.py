# infrastructure/config/settings.py
"""
Converter settings: defaults, then an optional YAML file, then environment
variables (a .env file in the working directory is loaded first).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

ENV_PREFIX = "FEATURE2CURL_"


class SettingsError(Exception):
    pass


@dataclass(frozen=True)
class ConverterSettings:
    features_dir: Path = Path("features")
    output_dir: Path = Path("generated")
    pattern: str = "*.feature"
    output_suffix: str = ".txt"
    log_level: str = "INFO"

    def merged(self, values: Mapping[str, Any]) -> "ConverterSettings":
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                raise SettingsError(f"Unknown setting: {key}")
            if value is None:
                continue
            if key in ("features_dir", "output_dir"):
                value = Path(value)
            else:
                value = str(value)
            changes[key] = value
        return replace(self, **changes)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise SettingsError(f"Unable to read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file must contain a mapping: {path}")
    return data


def _from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for f in fields(ConverterSettings):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw:
            values[f.name] = raw
    return values


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ConverterSettings:
    if environ is None:
        load_dotenv()
        environ = os.environ

    settings = ConverterSettings()
    if config_path is not None:
        settings = settings.merged(_load_yaml(Path(config_path)))
    return settings.merged(_from_env(environ))
