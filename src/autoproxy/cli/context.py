"""Wiring of the production adapters into an `AutoproxyContext`."""

from __future__ import annotations

from autoproxy.adapters.host_network import hostname_addresses
from autoproxy.adapters.package_installer import AptInstaller
from autoproxy.adapters.privileged_fs import SudoFileWriter
from autoproxy.adapters.terminal_prompt import TyperPrompter
from autoproxy.adapters.url_encoders import build_encoder
from autoproxy.core.config import AppSettings
from autoproxy.core.services.network_policy import PrefixPolicy
from autoproxy.core.services.workflow import AutoproxyContext


def build_context(settings: AppSettings) -> AutoproxyContext:
    return AutoproxyContext(
        settings=settings,
        prompter=TyperPrompter(),
        writer=SudoFileWriter(use_sudo=settings.use_sudo),
        installer=AptInstaller(use_sudo=settings.use_sudo),
        encoder=build_encoder(settings.url_encoder),
        address_source=hostname_addresses,
        policy=PrefixPolicy(settings.proxy_prefix),
    )
