"""Interactive collection of the proxy endpoint.

Required answers are checked once: an empty host, username or password
aborts the run with `MissingInputError` instead of asking again.
"""

from __future__ import annotations

from autoproxy.core.domain.models import ProxyDescriptor
from autoproxy.core.errors import InputError, MissingInputError
from autoproxy.core.interfaces import Prompter


HOST_QUESTION = "Enter proxy host (e.g., proxy.company.com or IP)"
AUTH_QUESTION = "Does the proxy require authentication? (y/n) [default: y]"
USERNAME_QUESTION = "Enter proxy username"
PASSWORD_QUESTION = "Enter proxy password"


def ask_yes_no(prompter: Prompter, question: str, *, default: bool = True) -> bool:
    """Blank keeps `default`; `y`/`yes` (any case) is yes, anything else no."""

    answer = prompter.prompt_line(question).strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def parse_port(raw: str, default: int) -> int:
    value = raw.strip()
    if not value:
        return default
    try:
        port = int(value)
    except ValueError:
        raise InputError(f"Proxy port must be a number, got {value!r}") from None
    if not 1 <= port <= 65535:
        raise InputError(f"Proxy port must be between 1 and 65535, got {port}")
    return port


def collect_proxy_descriptor(prompter: Prompter, *, default_port: int = 8080) -> ProxyDescriptor:
    host = prompter.prompt_line(HOST_QUESTION).strip()
    if not host:
        raise MissingInputError("Proxy host is required")

    port = parse_port(prompter.prompt_line(f"Enter proxy port [default: {default_port}]"), default_port)

    if not ask_yes_no(prompter, AUTH_QUESTION, default=True):
        return ProxyDescriptor(host=host, port=port)

    username = prompter.prompt_line(USERNAME_QUESTION)
    password = prompter.prompt_secret(PASSWORD_QUESTION)
    if not username.strip() or not password.strip():
        raise MissingInputError("Username and password are required for authentication")
    return ProxyDescriptor(host=host, port=port, username=username, password=password)
