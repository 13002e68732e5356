"""Core: domain, contracts and services.

The core knows nothing about Typer or Rich. Host side effects (sudo, apt,
`hostname`, the terminal) reach it through the protocols in
`core.interfaces`. The two side-effect free adapters, the Jinja2 artifact
renderer and the urllib credential encoder, are used by
`services.proxy_config` directly as its defaults.
"""
