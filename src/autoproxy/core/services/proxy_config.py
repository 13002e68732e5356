"""Config Writer and Config Remover.

Writing renders two artifacts from a `ProxyDescriptor`:

- the APT file with `Acquire::{http,https,ftp}::Proxy` directives,
- the login profile script exporting the proxy variables and their
  uppercase mirrors.

The pair is written as a unit: both contents are rendered before anything
touches the disk, and if the profile script cannot be written the APT file
is put back the way it was.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from autoproxy.adapters.template_renderer import render_artifacts
from autoproxy.adapters.url_encoders import UrllibEncoder
from autoproxy.core.config import AppSettings
from autoproxy.core.domain.models import (
    LOWERCASE_PROXY_VARS,
    PROXY_ENV_VARS,
    EnvironmentChange,
    ProxyDescriptor,
    RemovalResult,
    WriteResult,
)
from autoproxy.core.errors import ConfigWriteError
from autoproxy.core.interfaces import PrivilegedFileWriter, UrlEncoder


logger = logging.getLogger(__name__)

_APT_DIRECTIVE_RE = re.compile(r'^Acquire::(?P<scheme>\w+)::Proxy\s+"(?P<url>[^"]*)";', re.MULTILINE)
_URL_CREDENTIALS_RE = re.compile(r"(?P<scheme>[a-z]+://)(?P<user>[^:@/\s\"]+):(?P<password>[^@/\s\"]+)@")


def build_authority(descriptor: ProxyDescriptor, encoder: UrlEncoder | None = None) -> str:
    """`user:pass@host:port` with encoded credentials, or `host:port`."""

    endpoint = f"{descriptor.host}:{descriptor.port}"
    if not descriptor.has_credentials:
        return endpoint
    encoder = encoder or UrllibEncoder()
    user = encoder.encode(descriptor.username)
    password = encoder.encode(descriptor.password.get_secret_value())
    return f"{user}:{password}@{endpoint}"


def proxy_urls(authority: str) -> dict[str, str]:
    """Scheme -> proxy URL. HTTPS traffic goes through an http:// proxy URL."""

    return {
        "http": f"http://{authority}",
        "https": f"http://{authority}",
        "ftp": f"ftp://{authority}",
    }


def proxy_environment(authority: str, *, no_proxy: str) -> EnvironmentChange:
    urls = proxy_urls(authority)
    values = {
        "http_proxy": urls["http"],
        "https_proxy": urls["https"],
        "ftp_proxy": urls["ftp"],
        "no_proxy": no_proxy,
    }
    assignments = dict(values)
    assignments.update({name.upper(): values[name] for name in LOWERCASE_PROXY_VARS})
    return EnvironmentChange(assignments=assignments)


def read_authority(apt_conf: str, scheme: str = "http") -> str | None:
    """Authority referenced by the `scheme` directive of a rendered APT file."""

    for match in _APT_DIRECTIVE_RE.finditer(apt_conf):
        if match.group("scheme") == scheme:
            return match.group("url").split("://", 1)[-1]
    return None


def mask_credentials(text: str) -> str:
    """Replace passwords in any `scheme://user:pass@` URL with `***`."""

    return _URL_CREDENTIALS_RE.sub(r"\g<scheme>\g<user>:***@", text)


def write_proxy_config(
    descriptor: ProxyDescriptor,
    *,
    settings: AppSettings,
    writer: PrivilegedFileWriter,
    encoder: UrlEncoder | None = None,
) -> WriteResult:
    authority = build_authority(descriptor, encoder)
    artifacts = render_artifacts(proxy_urls=proxy_urls(authority), no_proxy=settings.no_proxy)

    apt_path = settings.apt_proxy_conf
    profile_path = settings.profile_script
    logger.info("Writing proxy configuration for %s", mask_credentials(f"http://{authority}"))

    previous_apt = writer.read_text(apt_path)
    previous_profile = writer.read_text(profile_path)
    writer.write_text(apt_path, artifacts.apt_conf)
    try:
        writer.write_text(profile_path, artifacts.profile_script)
        writer.make_executable(profile_path)
    except ConfigWriteError:
        _restore(writer, profile_path, previous_profile)
        _restore(writer, apt_path, previous_apt)
        raise

    return WriteResult(
        authority=authority,
        apt_conf_path=apt_path,
        profile_script_path=profile_path,
        environment=proxy_environment(authority, no_proxy=settings.no_proxy),
    )


def _restore(writer: PrivilegedFileWriter, path: Path, previous: str | None) -> None:
    try:
        if previous is None:
            writer.remove(path)
        else:
            writer.write_text(path, previous)
    except ConfigWriteError as exc:
        logger.error("Could not roll back %s: %s", path, exc)
    else:
        logger.warning("Rolled back %s after a failed write", path)


def has_existing_config(*, settings: AppSettings, writer: PrivilegedFileWriter) -> bool:
    return writer.exists(settings.apt_proxy_conf) or writer.exists(settings.profile_script)


def remove_proxy_config(*, settings: AppSettings, writer: PrivilegedFileWriter) -> RemovalResult:
    """Delete both artifacts if present and unset the eight proxy variables."""

    removed: list[Path] = []
    for path in (settings.apt_proxy_conf, settings.profile_script):
        if writer.exists(path):
            writer.remove(path)
            removed.append(path)
            logger.info("Removed %s", path)
    return RemovalResult(removed=removed, environment=EnvironmentChange(removals=PROXY_ENV_VARS))
