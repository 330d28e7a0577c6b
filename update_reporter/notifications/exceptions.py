"""Errors raised while configuring services and delivering reports."""

from __future__ import annotations

from typing import Optional


class UpdateReporterError(Exception):
    """Base class of every error raised by the reporter."""


class ConfigurationError(UpdateReporterError):
    """A service is enabled but cannot be built from the configuration."""


class MissingConfigurationError(ConfigurationError):
    def __init__(self, service: str, field: str, env_var: str, settings_key: str):
        self.service = service
        self.field = field
        self.env_var = env_var
        self.settings_key = settings_key
        super().__init__(
            f"{service} {field} is not defined. Define it either as ${env_var} "
            f"or in the configuration file as {settings_key!r}."
        )


class InvalidConfigurationError(ConfigurationError):
    def __init__(self, service: str, field: str, reason: str):
        self.service = service
        self.field = field
        super().__init__(f"{service} {field} {reason}.")


class InvalidServiceError(UpdateReporterError):
    def __init__(self, service: object):
        self.service = service
        name = getattr(service, "__name__", repr(service))
        super().__init__(
            f"The given service {name} is invalid. "
            "Services must implement the NotificationService protocol."
        )


class DeliveryError(UpdateReporterError):
    """The report could not be transmitted to the service at all.

    A rejected request (HTTP status >= 400) is not an error: the service
    returns ``False`` instead.
    """

    def __init__(self, service: str, cause: Optional[BaseException] = None):
        self.service = service
        self.cause = cause
        message = f"Unable to deliver report to {service}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


__all__ = [
    "UpdateReporterError",
    "ConfigurationError",
    "MissingConfigurationError",
    "InvalidConfigurationError",
    "InvalidServiceError",
    "DeliveryError",
]
