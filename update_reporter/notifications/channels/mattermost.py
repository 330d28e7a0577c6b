"""Mattermost incoming webhook."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..packages import UpdateCheckResult
from ..settings import validate_text, validate_url
from .base import WebhookService, render_markdown_table, render_title


class Mattermost(WebhookService):
    name = "Mattermost"
    config_key = "mattermost"

    color = "#EE0000"

    def __init__(
        self,
        url: str,
        channel_name: str,
        username: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(validate_url(self.name, "URL", url), timeout)
        self.channel_name = validate_text(self.name, "channel name", channel_name)
        self.username = username

    @classmethod
    def from_configuration(cls, configuration: Mapping[str, Any]) -> "Mattermost":
        settings = cls.settings(configuration)
        url = settings.require("url", "URL")
        channel_name = settings.require("channel", "channel name")
        username = settings.get("username")
        return cls(
            str(url),
            str(channel_name),
            str(username) if username is not None else None,
            cls.resolve_timeout(settings),
        )

    def render(self, result: UpdateCheckResult) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "channel": self.channel_name,
            "attachments": [
                {
                    "color": self.color,
                    "text": self.render_text(result),
                }
            ],
        }
        if self.username is not None:
            payload["username"] = self.username
        return payload

    def render_text(self, result: UpdateCheckResult) -> str:
        return f"#### :rotating_light: {render_title(result)}\n" + render_markdown_table(
            result
        )


__all__ = ["Mattermost"]
