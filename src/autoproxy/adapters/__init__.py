"""Adapters: host commands, privileged filesystem, templates and terminal."""
