"""Rendering of the configuration artifacts (Jinja2).

The templates are plain text (APT directives and a POSIX shell script), so
autoescaping is off and trailing newlines are preserved.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from autoproxy.core.domain.models import ProxyArtifacts


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

APT_TEMPLATE = "apt_proxy.conf.j2"
PROFILE_TEMPLATE = "proxy.sh.j2"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_artifacts(*, proxy_urls: dict[str, str], no_proxy: str) -> ProxyArtifacts:
    """Render both files from the scheme -> proxy URL mapping."""

    env = _get_env()
    context = {"urls": proxy_urls, "no_proxy": no_proxy}
    return ProxyArtifacts(
        apt_conf=env.get_template(APT_TEMPLATE).render(**context),
        profile_script=env.get_template(PROFILE_TEMPLATE).render(**context),
    )
