"""Simplified configuration service."""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .config_schema import ReporterSettings

CONFIG_KEY = "update-check"


class ConfigService:
    """Load reporter settings from the host project's settings file.

    ``composer.json`` keeps them under ``extra.update-check``; a YAML file may
    hold ``update-check`` at the top level.
    """

    def __init__(self, path: str = "composer.json"):
        self._path = Path(path)

    def load_config(self) -> ReporterSettings:
        """
        Load and validate the reporter section of the settings file.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            if self._path.suffix == ".json":
                raw = json.load(f)
            else:
                raw = yaml.safe_load(f)
        return ReporterSettings.model_validate(self._extract_section(raw or {}))

    def load_reporter_configuration(self) -> Dict[str, Any]:
        """
        Return the reporter section as a plain mapping, unset keys removed.
        """
        return self.load_config().model_dump(exclude_none=True)

    def get_config_path(self) -> str:
        """
        Return the absolute path to the configuration file.
        """
        return str(self._path.absolute())

    @staticmethod
    def _extract_section(raw: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            return {}
        if isinstance(raw.get(CONFIG_KEY), dict):
            return raw[CONFIG_KEY]
        extra = raw.get("extra")
        if isinstance(extra, dict) and isinstance(extra.get(CONFIG_KEY), dict):
            return extra[CONFIG_KEY]
        return {}
