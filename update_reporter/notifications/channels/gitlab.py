"""GitLab alert integration.

Each report opens an alert (and, depending on the project settings, an
incident issue) through the HTTP endpoint of a GitLab alert integration.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..packages import UpdateCheckResult
from ..settings import validate_text, validate_url
from .base import WebhookService, render_markdown_table, render_title

MONITORING_TOOL = "Composer update reporter"


class GitLab(WebhookService):
    name = "GitLab"
    config_key = "gitlab"

    def __init__(self, url: str, auth_key: str, timeout: Optional[float] = None):
        super().__init__(validate_url(self.name, "URL", url), timeout)
        self.auth_key = validate_text(self.name, "authorization key", auth_key)

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "GitLab":
        settings = cls.settings(configuration)
        url = settings.require("url", "URL")
        auth_key = settings.require("auth_key", "authorization key")
        return cls(str(url), str(auth_key), cls.resolve_timeout(settings))

    def headers(self) -> Dict[str, str]:
        headers = super().headers()
        headers["Authorization"] = f"Bearer {self.auth_key}"
        return headers

    def render(self, result: UpdateCheckResult) -> Dict[str, Any]:
        insecure = any(package.insecure for package in result)
        return {
            "title": render_title(result),
            "description": render_markdown_table(result),
            "monitoring_tool": MONITORING_TOOL,
            "severity": "critical" if insecure else "medium",
        }


__all__ = ["GitLab", "MONITORING_TOOL"]
