"""Path segmentation shared by layout detection, resolution and classification.

Archive listings may use either ``/`` or ``\\`` as separator regardless of the
host platform, so every comparison goes through :func:`normalize` which
canonicalises to ``/`` and lower-cases each segment.  Emitted paths are built
from :func:`split_path`, which keeps the original casing.
"""

from __future__ import annotations

SEPARATOR = "/"


def is_directory_entry(path: str) -> bool:
    """Return ``True`` for directory placeholders (trailing separator)."""
    return path.endswith(("/", "\\"))


def split_path(path: str) -> tuple[str, ...]:
    """Split *path* into its original-case segments.

    >>> split_path("BepInEx\\\\plugins/Mod.dll")
    ('BepInEx', 'plugins', 'Mod.dll')
    """
    return tuple(part for part in path.replace("\\", SEPARATOR).split(SEPARATOR) if part)


def normalize(path: str) -> tuple[str, ...]:
    """Lower-cased segments of *path*, for comparison only.

    >>> normalize("BepInEx/Plugins/")
    ('bepinex', 'plugins')
    """
    return tuple(part.lower() for part in split_path(path))


def directory_segments(path: str) -> tuple[str, ...]:
    """Normalized segments of the directory containing *path*."""
    return normalize(path)[:-1]


def basename(path: str) -> str:
    segments = split_path(path)
    return segments[-1] if segments else ""


def join_segments(segments: tuple[str, ...] | list[str]) -> str:
    return SEPARATOR.join(segments)
