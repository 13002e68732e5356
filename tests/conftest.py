"""Shared fixtures for the autoproxy test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from autoproxy.adapters.privileged_fs import SudoFileWriter
from autoproxy.adapters.url_encoders import UrllibEncoder
from autoproxy.core.config import AppSettings
from autoproxy.core.services.network_policy import PrefixPolicy
from autoproxy.core.services.workflow import AutoproxyContext
from tests.fakes import RecordingInstaller, ScriptedPrompter


_SETTINGS_ENV = (
    "AUTOPROXY_PROXY_PREFIX",
    "AUTOPROXY_DEFAULT_PORT",
    "AUTOPROXY_APT_PROXY_CONF",
    "AUTOPROXY_PROFILE_SCRIPT",
    "AUTOPROXY_NO_PROXY",
    "AUTOPROXY_URL_ENCODER",
    "AUTOPROXY_USE_SUDO",
    "AUTOPROXY_LOG_LEVEL",
    "AUTOPROXY_SHOW_BANNER",
)


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer .env files and AUTOPROXY_* variables out of the tests."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Settings and collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        apt_proxy_conf=tmp_path / "etc" / "apt" / "apt.conf.d" / "95proxy",
        profile_script=tmp_path / "etc" / "profile.d" / "proxy.sh",
        use_sudo=False,
    )


@pytest.fixture
def writer() -> SudoFileWriter:
    return SudoFileWriter(use_sudo=False)


@pytest.fixture
def make_context(settings: AppSettings, writer: SudoFileWriter):
    """Build an `AutoproxyContext` for a given IP listing and prompt script."""

    def _make(
        listing: str,
        answers: list[str] | None = None,
        secrets: list[str] | None = None,
        **overrides,
    ) -> AutoproxyContext:
        values = dict(
            settings=settings,
            prompter=ScriptedPrompter(answers, secrets),
            writer=writer,
            installer=RecordingInstaller(),
            encoder=UrllibEncoder(),
            address_source=lambda: listing,
            policy=PrefixPolicy(settings.proxy_prefix),
        )
        values.update(overrides)
        return AutoproxyContext(**values)

    return _make
