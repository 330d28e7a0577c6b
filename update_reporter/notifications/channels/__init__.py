"""Built-in notification services."""

from .base import BaseService, NotificationService, WebhookService
from .email import Email
from .gitlab import GitLab
from .mattermost import Mattermost
from .slack import Slack
from .teams import Teams

__all__ = [
    "NotificationService",
    "BaseService",
    "WebhookService",
    "Email",
    "GitLab",
    "Mattermost",
    "Slack",
    "Teams",
]
