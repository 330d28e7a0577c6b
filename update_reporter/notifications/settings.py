"""Resolution of service settings from environment variables and config file.

Every field of a service is looked up in an ordered list of sources and the
first source holding a value wins. The environment always comes first, so
``MATTERMOST_URL`` overrides ``mattermost.url`` from the configuration file.
"""

from __future__ import annotations

import os
from typing import Any, List, Mapping, Optional, Protocol

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .exceptions import InvalidConfigurationError, MissingConfigurationError

FALSY_VALUES = frozenset({"", "0", "false", "no", "off"})

_url_adapter = TypeAdapter(AnyUrl)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in FALSY_VALUES
    return bool(value)


class ConfigurationSource(Protocol):
    def location(self, field: str) -> str:  # pragma: no cover (interface)
        ...

    def get(self, field: str) -> Any:  # pragma: no cover (interface)
        ...


class EnvironmentSource:
    """Per-service environment variables named ``<SERVICE>_<FIELD>``."""

    def __init__(self, config_key: str, environ: Optional[Mapping[str, str]] = None):
        self.prefix = config_key.upper()
        self._environ = environ

    def location(self, field: str) -> str:
        return f"{self.prefix}_{field.upper()}"

    def get(self, field: str) -> Any:
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(self.location(field))
        return MISSING if value is None else value


class SettingsSource:
    """The service sub-tree of the configuration file."""

    def __init__(self, config_key: str, configuration: Mapping[str, Any]):
        self.config_key = config_key
        self._configuration = configuration or {}

    def location(self, field: str) -> str:
        return f"{self.config_key}.{field}"

    def get(self, field: str) -> Any:
        extra = self._configuration.get(self.config_key)
        if isinstance(extra, Mapping) and field in extra:
            return extra[field]
        return MISSING


class ServiceSettings:
    """Settings of one service, environment first then configuration file."""

    def __init__(
        self,
        service: str,
        config_key: str,
        configuration: Mapping[str, Any],
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.service = service
        self.environment = EnvironmentSource(config_key, environ)
        self.settings = SettingsSource(config_key, configuration)
        self.sources: List[ConfigurationSource] = [self.environment, self.settings]

    def get(self, field: str, default: Any = None) -> Any:
        for source in self.sources:
            value = source.get(field)
            if value is not MISSING:
                return value
        return default

    def require(self, field: str, label: Optional[str] = None) -> Any:
        value = self.get(field, MISSING)
        if value is MISSING:
            raise MissingConfigurationError(
                self.service,
                label or field,
                self.environment.location(field),
                self.settings.location(field),
            )
        return value

    def is_enabled(self) -> bool:
        # A falsy environment flag does not disable a service enabled in the file
        flag = self.environment.get("enable")
        if flag is not MISSING and is_truthy(flag):
            return True
        enable = self.settings.get("enable")
        return enable is not MISSING and is_truthy(enable)


def validate_url(service: str, field: str, value: Any) -> str:
    url = "" if value is None else str(value)
    if not url.strip():
        raise InvalidConfigurationError(service, field, "must not be empty")
    try:
        _url_adapter.validate_python(url)
    except ValidationError:
        raise InvalidConfigurationError(service, field, "is no valid URL") from None
    return url


def validate_text(service: str, field: str, value: Any) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise InvalidConfigurationError(service, field, "must not be empty")
    return text


__all__ = [
    "MISSING",
    "FALSY_VALUES",
    "is_truthy",
    "ConfigurationSource",
    "EnvironmentSource",
    "SettingsSource",
    "ServiceSettings",
    "validate_url",
    "validate_text",
]
