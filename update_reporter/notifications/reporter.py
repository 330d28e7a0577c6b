"""Reporter routing a check result to every enabled service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Type

from .behavior import NullOutput, Options, OutputBehavior, Style, Verbosity
from .channels import Email, GitLab, Mattermost, NotificationService, Slack, Teams
from .exceptions import DeliveryError, InvalidServiceError
from .packages import UpdateCheckResult

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = (Email, GitLab, Mattermost, Slack, Teams)


def service_name(service: Any) -> str:
    return getattr(service, "name", None) or type(service).__name__


@dataclass(frozen=True)
class Delivery:
    """Outcome of delivering one report to one service."""

    service: Type[Any]
    name: str
    successful: bool
    error: Optional[DeliveryError] = None


@dataclass
class ReportResult:
    """Outcomes of one ``Reporter.report`` call, one entry per delivered service.

    Entries are kept in delivery order; display names are not unique, so
    nothing here is keyed by name.
    """

    deliveries: List[Delivery] = field(default_factory=list)

    @property
    def successful(self) -> bool:
        return all(delivery.successful for delivery in self.deliveries)

    @property
    def outcomes(self) -> List[Tuple[str, bool]]:
        return [(delivery.name, delivery.successful) for delivery in self.deliveries]

    @property
    def errors(self) -> List[DeliveryError]:
        return [delivery.error for delivery in self.deliveries if delivery.error]

    def outcome_of(self, service: Type[Any]) -> Optional[bool]:
        for delivery in self.deliveries:
            if delivery.service is service:
                return delivery.successful
        return None

    def failed_services(self) -> List[str]:
        return [delivery.name for delivery in self.deliveries if not delivery.successful]

    def raise_for_errors(self) -> None:
        for error in self.errors:
            raise error


class Reporter:
    """Build the enabled services and deliver a check result to each of them.

    The registry is owned by the instance; ``services`` defaults to every
    built-in service.
    """

    def __init__(
        self,
        configuration: Optional[Mapping[str, Any]] = None,
        services: Optional[Iterable[Type[NotificationService]]] = None,
    ):
        self.configuration: Mapping[str, Any] = dict(configuration or {})
        self.behavior = OutputBehavior(Style.NORMAL, Verbosity.NORMAL, NullOutput())
        self.options = Options()
        self.services: List[Type[NotificationService]] = []
        for service in DEFAULT_SERVICES if services is None else services:
            self.register_service(service)

    @classmethod
    def from_config_service(cls, config_service, services=None) -> "Reporter":
        return cls(config_service.load_reporter_configuration(), services)

    def report(self, result: UpdateCheckResult) -> ReportResult:
        # Every enabled service is built before the first delivery so that a
        # configuration error aborts the run without any network call
        services = self.build_services()
        report = ReportResult()

        for service in services:
            name = service_name(service)
            try:
                successful = bool(service.deliver(result))
            except DeliveryError as e:
                logger.error(f"Delivery to {name} failed: {e}")
                report.deliveries.append(Delivery(type(service), name, False, e))
            else:
                report.deliveries.append(Delivery(type(service), name, successful))

        return report

    def build_services(self) -> List[NotificationService]:
        services = []
        for service_class in self.enabled_services():
            service = service_class.from_configuration(self.configuration)
            service.set_behavior(self.behavior)
            service.set_options(self.options)
            services.append(service)
        return services

    def enabled_services(self) -> List[Type[NotificationService]]:
        return [
            service
            for service in self.services
            if service.is_enabled(self.configuration)
        ]

    def set_behavior(self, behavior: OutputBehavior) -> "Reporter":
        self.behavior = behavior
        return self

    def set_options(self, options: Options) -> "Reporter":
        self.options = options
        return self

    def register_service(self, service: Type[NotificationService]) -> "Reporter":
        if not isinstance(service, type) or not issubclass(
            service, NotificationService
        ):
            raise InvalidServiceError(service)
        if service not in self.services:
            self.services.append(service)
        return self

    def unregister_service(self, service: Type[NotificationService]) -> "Reporter":
        if service in self.services:
            self.services.remove(service)
        return self


__all__ = ["Reporter", "ReportResult", "Delivery", "DEFAULT_SERVICES"]
