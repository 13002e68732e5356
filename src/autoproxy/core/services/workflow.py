"""The detect -> decide -> write/remove flow.

`run_autoproxy` walks the whole state machine for one invocation:

    Detecting -> NeedsProxy -> Prompting -> Writing
              -> NoProxyNeeded -> (existing config) ConfirmRemoval -> Removing | Keeping
                               -> (no config) done

All host access goes through the `AutoproxyContext` collaborators and all
user-facing messages through `WorkflowHooks`, so the CLI owns presentation
and tests can drive the flow with fakes. The process environment is never
touched here: the returned `WorkflowResult.environment` describes the change
and the caller applies it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from autoproxy.core.config import AppSettings
from autoproxy.core.domain.models import EnvironmentChange
from autoproxy.core.errors import IpDetectionError
from autoproxy.core.interfaces import (
    AddressPolicy,
    AddressSource,
    PackageInstaller,
    PrivilegedFileWriter,
    Prompter,
    UrlEncoder,
)
from autoproxy.core.services.dependencies import ensure_encoder_available
from autoproxy.core.services.network_policy import describe_policy, detect_ipv4
from autoproxy.core.services.prompting import ask_yes_no, collect_proxy_descriptor
from autoproxy.core.services.proxy_config import (
    has_existing_config,
    remove_proxy_config,
    write_proxy_config,
)


REMOVE_QUESTION = "Existing proxy configuration found. Remove it? (y/n) [default: y]"


class RunOutcome(str, Enum):
    """Terminal state of a run; every one of them exits with status 0."""

    CONFIGURED = "configured"
    REMOVED = "removed"
    KEPT = "kept"
    NOTHING_TO_DO = "nothing_to_do"


@dataclass
class AutoproxyContext:
    """Collaborators injected into the workflow."""

    settings: AppSettings
    prompter: Prompter
    writer: PrivilegedFileWriter
    installer: PackageInstaller
    encoder: UrlEncoder
    address_source: AddressSource
    policy: AddressPolicy


@dataclass
class WorkflowHooks:
    """Optional callbacks for the UI layer."""

    info: Callable[[str], None] | None = None
    success: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class WorkflowResult:
    outcome: RunOutcome
    address: str
    environment: EnvironmentChange = field(default_factory=EnvironmentChange)
    written: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback is not None:
        callback(message)


def run_autoproxy(context: AutoproxyContext, hooks: WorkflowHooks | None = None) -> WorkflowResult:
    hooks = hooks or WorkflowHooks()

    _emit(hooks.info, "Detecting IP address...")
    address = detect_ipv4(context.address_source)
    if address is None:
        raise IpDetectionError("Could not detect IP address")
    _emit(hooks.success, f"Detected IP address: {address}")

    if context.policy(address):
        _emit(hooks.success, f"IP {describe_policy(context.policy)} - Proxy configuration required")
        return _configure(context, hooks, address)

    _emit(hooks.info, f"IP {describe_policy(context.policy, negate=True)} - No proxy needed")
    return _cleanup(context, hooks, address)


def _configure(context: AutoproxyContext, hooks: WorkflowHooks, address: str) -> WorkflowResult:
    ensure_encoder_available(context.encoder, installer=context.installer, warn=hooks.warning)
    descriptor = collect_proxy_descriptor(context.prompter, default_port=context.settings.default_port)

    _emit(hooks.info, "Configuring proxy settings...")
    result = write_proxy_config(
        descriptor,
        settings=context.settings,
        writer=context.writer,
        encoder=context.encoder,
    )
    _emit(hooks.success, f"APT proxy configured at {result.apt_conf_path}")
    _emit(hooks.success, f"System-wide proxy configured at {result.profile_script_path}")
    return WorkflowResult(
        outcome=RunOutcome.CONFIGURED,
        address=address,
        environment=result.environment,
        written=[result.apt_conf_path, result.profile_script_path],
    )


def _cleanup(context: AutoproxyContext, hooks: WorkflowHooks, address: str) -> WorkflowResult:
    if not has_existing_config(settings=context.settings, writer=context.writer):
        _emit(hooks.success, "No proxy configuration needed and none found")
        return WorkflowResult(outcome=RunOutcome.NOTHING_TO_DO, address=address)

    if not ask_yes_no(context.prompter, REMOVE_QUESTION, default=True):
        _emit(hooks.info, "Keeping existing proxy configuration")
        return WorkflowResult(outcome=RunOutcome.KEPT, address=address)

    _emit(hooks.info, "Removing proxy configuration...")
    removal = remove_proxy_config(settings=context.settings, writer=context.writer)
    for path in removal.removed:
        _emit(hooks.success, f"Removed {path}")
    return WorkflowResult(
        outcome=RunOutcome.REMOVED,
        address=address,
        environment=removal.environment,
        removed=removal.removed,
    )
