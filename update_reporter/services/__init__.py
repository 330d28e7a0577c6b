"""Entrypoint for services package."""

from update_reporter.services.config_service import ConfigService

__all__ = ["ConfigService"]
