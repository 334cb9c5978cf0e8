"""Static package metadata surfaced to the CLI commands and documentation.

Values here mirror ``pyproject.toml`` so that ``glitcha info`` and
``--version`` work without reading installed distribution metadata.

Contents:
    * Metadata constants (name, title, version, homepage, author).
    * ``LAYEREDCONF_*`` identifiers used by ``lib_layered_config``.
    * :func:`print_info` - Render the metadata block.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "glitcha"
title: Final[str] = "Endless glitch text generator for the terminal"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/glitcha/glitcha"
author: Final[str] = "glitcha contributors"
author_email: Final[str] = "glitcha@users.noreply.github.com"
shell_command: Final[str] = "glitcha"

#: Vendor, app, and slug identifiers drive the platform-specific config paths.
LAYEREDCONF_VENDOR: Final[str] = "glitcha"
LAYEREDCONF_APP: Final[str] = "glitcha"
LAYEREDCONF_SLUG: Final[str] = "glitcha"


def print_info() -> None:
    """Print the summarised metadata block used by ``glitcha info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for glitcha:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
