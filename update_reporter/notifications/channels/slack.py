"""Slack incoming webhook using Block Kit."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..packages import OutdatedPackage, UpdateCheckResult
from ..settings import validate_url
from .base import WebhookService, render_title


def _mrkdwn(text: str) -> Dict[str, str]:
    return {"type": "mrkdwn", "text": text}


class Slack(WebhookService):
    name = "Slack"
    config_key = "slack"

    def __init__(self, url: str, timeout: Optional[float] = None):
        super().__init__(validate_url(self.name, "URL", url), timeout)

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "Slack":
        settings = cls.settings(configuration)
        url = settings.require("url", "URL")
        return cls(str(url), cls.resolve_timeout(settings))

    def render(self, result: UpdateCheckResult) -> Dict[str, Any]:
        return {"blocks": self.render_blocks(result)}

    def render_blocks(self, result: UpdateCheckResult) -> List[Dict[str, Any]]:
        blocks: List[Dict[str, Any]] = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": render_title(result)},
            }
        ]
        for package in result:
            blocks.append({"type": "divider"})
            blocks.append({"type": "section", "fields": self.render_fields(package)})
        return blocks

    def render_fields(self, package: OutdatedPackage) -> List[Dict[str, str]]:
        fields = [
            _mrkdwn("*Package*"),
            _mrkdwn(f"<{package.provider_link}|{package.name}>"),
            _mrkdwn("*Current version*"),
            _mrkdwn(f"`{package.outdated_version}`"),
            _mrkdwn("*New version*"),
            _mrkdwn(f"*`{package.new_version}`*"),
        ]
        if package.insecure:
            fields.append(_mrkdwn("*Security state*"))
            fields.append(_mrkdwn("*Package is insecure* :warning:"))
        return fields


__all__ = ["Slack"]
