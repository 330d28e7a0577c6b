"""Formatting and delivery of update check reports."""

from .behavior import (
    BufferedOutput,
    ConsoleOutput,
    NullOutput,
    Options,
    OutputBehavior,
    Style,
    Verbosity,
)
from .exceptions import (
    ConfigurationError,
    DeliveryError,
    InvalidConfigurationError,
    InvalidServiceError,
    MissingConfigurationError,
    UpdateReporterError,
)
from .packages import OutdatedPackage, UpdateCheckResult
from .reporter import DEFAULT_SERVICES, Delivery, Reporter, ReportResult

__all__ = [
    "BufferedOutput",
    "ConsoleOutput",
    "NullOutput",
    "Options",
    "OutputBehavior",
    "Style",
    "Verbosity",
    "ConfigurationError",
    "DeliveryError",
    "InvalidConfigurationError",
    "InvalidServiceError",
    "MissingConfigurationError",
    "UpdateReporterError",
    "OutdatedPackage",
    "UpdateCheckResult",
    "DEFAULT_SERVICES",
    "Delivery",
    "Reporter",
    "ReportResult",
]
