"""File extensions the editor integration opens in Neovim.

Unity asks the external editor to open every asset a user double-clicks.
Only files whose extension is in the handled list go to Neovim; anything
else is left to Unity's default handler.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from unvim.config import EditorSettings
from unvim.exceptions import ConfigError

# Unity's built-in project generation extensions.
BUILTIN_EXTENSIONS: tuple[str, ...] = (
    "cs",
    "uxml",
    "uss",
    "shader",
    "compute",
    "cginc",
    "hlsl",
    "glslinc",
    "template",
    "raytrace",
)

# Extra text assets worth editing in Neovim.
CUSTOM_EXTENSIONS: tuple[str, ...] = ("json", "asmdef", "log")


def default_extensions(user_extensions: Iterable[str] = ()) -> list[str]:
    """Builtin, user and custom extensions, de-duplicated in that order."""
    return list(
        dict.fromkeys([*BUILTIN_EXTENSIONS, *user_extensions, *CUSTOM_EXTENSIONS])
    )


def parse_extensions(raw: str) -> list[str]:
    """Split a ``;``-separated list like ``"*.cs;.json;log"`` into bare names."""
    parts = (p.strip().lstrip(".*") for p in raw.split(";"))
    return [p for p in parts if p]


def handled_extensions(settings: EditorSettings) -> list[str]:
    """Extensions to open, from settings or the defaults.

    Raises:
        ConfigError: If ``settings.user_extensions`` is set but lists no
            usable extension (e.g. ``";;"`` or ``"*."``).
    """
    if settings.user_extensions is not None:
        extensions = parse_extensions(settings.user_extensions)
        if not extensions:
            raise ConfigError(
                f"UNVIM_EXTENSIONS lists no extensions: {settings.user_extensions!r}"
            )
        return extensions
    return parse_extensions(";".join(default_extensions()))


def file_extension(path: str) -> str:
    """Return the extension of ``path``'s filename, including the dot.

    Everything from the last dot of the filename on counts, so a dotfile
    such as ``.editorconfig`` has the extension ``.editorconfig``. A
    trailing dot or no dot at all yields an empty string.
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


def supports_extension(path: str, handled: Iterable[str]) -> bool:
    """Check whether ``path`` has one of the ``handled`` extensions.

    Comparison is case-sensitive; a path with no extension never matches.
    """
    extension = file_extension(path)
    if not extension:
        return False
    return extension.lstrip(".") in set(handled)
