from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class ServiceSettings(BaseModel):
    """Keys shared by every service section."""

    # Custom services registered by embedders read their own keys
    model_config = ConfigDict(extra="allow")

    enable: Union[bool, str] = False
    url: Optional[str] = None
    timeout: Optional[float] = None


class MattermostSettings(ServiceSettings):
    channel: Optional[str] = None
    username: Optional[str] = None


class SlackSettings(ServiceSettings):
    pass


class TeamsSettings(ServiceSettings):
    pass


class GitLabSettings(ServiceSettings):
    auth_key: Optional[str] = None


class EmailSettings(ServiceSettings):
    dsn: Optional[str] = None
    receivers: Union[str, List[str], None] = None
    sender: Optional[str] = None


class ReporterSettings(BaseModel):
    """The ``update-check`` section of the project settings file."""

    model_config = ConfigDict(extra="allow")

    email: Optional[EmailSettings] = None
    gitlab: Optional[GitLabSettings] = None
    mattermost: Optional[MattermostSettings] = None
    slack: Optional[SlackSettings] = None
    teams: Optional[TeamsSettings] = None
