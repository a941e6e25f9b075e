from datetime import UTC, datetime

import pytest

from ircd.config.model import IrcSettings

CREATED_AT = datetime(2020, 1, 1, tzinfo=UTC)


@pytest.fixture
def irc_settings() -> IrcSettings:
    """Deterministic server identity for reply assertions."""
    return IrcSettings(hostname="irc.example.net", created_at=CREATED_AT, version="ircd-test")


@pytest.fixture
def config_file(tmp_path):
    """Factory writing a TOML config into the test's tmp dir."""

    def _write(content: str, name: str = "ircd.toml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
