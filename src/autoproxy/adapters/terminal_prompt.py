"""Terminal `Prompter` built on Typer's prompt helpers."""

from __future__ import annotations

import typer


class TyperPrompter:
    def prompt_line(self, question: str, default: str = "") -> str:
        return typer.prompt(question, default=default, show_default=False)

    def prompt_secret(self, question: str) -> str:
        # An empty default keeps click from re-asking on a blank answer, so
        # the caller can reject it.
        return typer.prompt(question, default="", show_default=False, hide_input=True)
