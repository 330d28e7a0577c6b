"""Notification services (interface + shared delivery flow)."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Type, runtime_checkable

import requests

from ..behavior import Options, OutputBehavior, Verbosity
from ..exceptions import DeliveryError, InvalidConfigurationError
from ..packages import OutdatedPackage, UpdateCheckResult
from ..settings import ServiceSettings

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


@runtime_checkable
class NotificationService(Protocol):
    @classmethod
    def from_configuration(
        cls, configuration: Mapping[str, Any]
    ) -> "NotificationService":  # pragma: no cover (interface)
        ...

    @classmethod
    def is_enabled(
        cls, configuration: Mapping[str, Any]
    ) -> bool:  # pragma: no cover (interface)
        ...

    def deliver(self, result: UpdateCheckResult) -> bool:  # pragma: no cover
        ...

    def set_behavior(
        self, behavior: OutputBehavior
    ) -> "NotificationService":  # pragma: no cover (interface)
        ...

    def set_options(
        self, options: Options
    ) -> "NotificationService":  # pragma: no cover (interface)
        ...


def render_title(result: UpdateCheckResult) -> str:
    count = len(result)
    return f"{count} outdated package{'s' if count != 1 else ''}"


def render_markdown_table(result: UpdateCheckResult) -> str:
    """Markdown table shared by the services accepting markdown text."""
    lines = [
        "| Package | Current version | New version |",
        "|:------- |:--------------- |:----------- |",
    ]
    for package in result:
        lines.append(
            f"| [{package.name}]({package.provider_link}) "
            f"| {package.outdated_version} "
            f"| **{package.new_version}**{render_security_notice(package)} |"
        )
    return "\n".join(lines)


def render_security_notice(package: OutdatedPackage) -> str:
    return " :warning: **`insecure`**" if package.insecure else ""


class BaseService(ABC):
    """Skip, send and status reporting common to every service.

    Subclasses provide ``from_configuration``, ``render`` and ``send``.
    """

    name: str = ""
    config_key: str = ""
    transport_errors: Tuple[Type[BaseException], ...] = ()

    def __init__(self) -> None:
        self.behavior = OutputBehavior()
        self.options = Options()

    @classmethod
    def settings(cls, configuration: Mapping[str, Any]) -> ServiceSettings:
        return ServiceSettings(cls.name, cls.config_key, configuration)

    @classmethod
    def is_enabled(cls, configuration: Mapping[str, Any]) -> bool:
        return cls.settings(configuration).is_enabled()

    @classmethod
    def resolve_timeout(cls, settings: ServiceSettings) -> Optional[float]:
        value = settings.get("timeout")
        if value is None or value == "":
            return None
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(
                cls.name, "timeout", "must be a number"
            ) from None
        if timeout <= 0:
            raise InvalidConfigurationError(cls.name, "timeout", "must be positive")
        return timeout

    @classmethod
    @abstractmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "BaseService":
        ...

    @abstractmethod
    def render(self, result: UpdateCheckResult) -> Any:
        """Build the backend specific payload for a non-empty result."""

    @abstractmethod
    def send(self, payload: Any) -> bool:
        """Transmit the payload once, return whether the backend accepted it."""

    def set_behavior(self, behavior: OutputBehavior) -> "BaseService":
        self.behavior = behavior
        return self

    def set_options(self, options: Options) -> "BaseService":
        self.options = options
        return self

    def deliver(self, result: UpdateCheckResult) -> bool:
        if result.is_empty():
            self.write(f"❌ Skipped {self.name} report.")
            return True

        payload = self.render(result)

        self.write(f"🚀 Sending report to {self.name}...")
        try:
            successful = self.send(payload)
        except self.transport_errors as e:
            logger.warning(f"Transport error while sending report to {self.name}: {e}")
            raise DeliveryError(self.name, e) from e

        if successful:
            self.write(f"✅ {self.name} report was successful.")
        else:
            logger.warning(f"{self.name} rejected the report")
            self.behavior.io.write_error(f"❌ Error during {self.name} report.")

        return successful

    def is_machine_output(self) -> bool:
        return self.options.json or self.behavior.is_json()

    def write(self, message: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        if self.is_machine_output() or self.behavior.verbosity < verbosity:
            return
        self.behavior.io.write(message)


class WebhookService(BaseService):
    """Service posting a JSON document to an HTTP endpoint."""

    transport_errors = (requests.RequestException,)

    def __init__(self, url: str, timeout: Optional[float] = None):
        super().__init__()
        self.url = url
        self.timeout = timeout or DEFAULT_TIMEOUT

    def headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def send(self, payload: Dict[str, Any]) -> bool:
        logger.debug(f"Posting report to {self.name}: {payload}")
        response = requests.post(
            self.url, json=payload, headers=self.headers(), timeout=self.timeout
        )
        self.write(
            f"{self.name} responded with status {response.status_code}",
            Verbosity.VERBOSE,
        )
        if response.status_code >= 400:
            logger.warning(
                f"{self.name} failed with status code {response.status_code}: "
                f"{response.text}"
            )
            return False
        return True


__all__ = [
    "NotificationService",
    "BaseService",
    "WebhookService",
    "DEFAULT_TIMEOUT",
    "render_title",
    "render_markdown_table",
    "render_security_notice",
]
