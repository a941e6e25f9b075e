from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import __version__
from ..constants import DEFAULT_LISTEN_HOST, DEFAULT_LISTEN_PORT


class IrcSettings(BaseModel):
    """Identity of the server as advertised in the registration replies.

    Attributes:
        hostname: Server name shown in RPL_YOURHOST and RPL_MYINFO.
        created_at: Timestamp shown in RPL_CREATED.
        version: Version string shown in RPL_YOURHOST and RPL_MYINFO.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hostname: str = Field(default="localhost", min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str = Field(default=f"ircd-{__version__}", min_length=1)

    @field_validator("hostname")
    @classmethod
    def validate_hostname(cls, v: str) -> str:
        """Hostnames end up as a reply parameter and may not contain spaces."""
        v = v.strip()
        if not v or " " in v:
            raise ValueError("hostname must be a single non-empty word")
        return v


class ListenSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = DEFAULT_LISTEN_HOST
    # 0 lets the OS pick a free port
    port: int = Field(default=DEFAULT_LISTEN_PORT, ge=0, le=65535)


class ServerConfig(BaseModel):
    """Root of the TOML configuration file.

    Example::

        [irc]
        hostname = "irc.example.net"
        created_at = 2020-01-01T00:00:00Z

        [listen]
        host = "0.0.0.0"
        port = 6667
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    irc: IrcSettings = Field(default_factory=IrcSettings)
    listen: ListenSettings = Field(default_factory=ListenSettings)
