"""Microsoft Teams incoming webhook (legacy MessageCard format)."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..packages import OutdatedPackage, UpdateCheckResult
from ..settings import validate_url
from .base import WebhookService, render_title


class Teams(WebhookService):
    name = "MS Teams"
    config_key = "teams"

    theme_color = "EE0000"

    def __init__(self, url: str, timeout: Optional[float] = None):
        super().__init__(validate_url(self.name, "URL", url), timeout)

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "Teams":
        settings = cls.settings(configuration)
        url = settings.require("url", "URL")
        return cls(str(url), cls.resolve_timeout(settings))

    def render(self, result: UpdateCheckResult) -> Dict[str, Any]:
        title = render_title(result)
        return {
            "@type": "MessageCard",
            "@context": "https://schema.org/extensions",
            "summary": title,
            "themeColor": self.theme_color,
            "title": title,
            "sections": [self.render_section(package) for package in result],
        }

    def render_section(self, package: OutdatedPackage) -> Dict[str, Any]:
        facts = [
            {"name": "Current version", "value": package.outdated_version},
            {"name": "New version", "value": f"**{package.new_version}**"},
        ]
        if package.insecure:
            facts.append({"name": "Security state", "value": "⚠️ **insecure**"})
        return {
            "activityTitle": f"[{package.name}]({package.provider_link})",
            "facts": facts,
        }


__all__ = ["Teams"]
