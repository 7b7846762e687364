"""Archive layout detection for the BepInEx mixed installer.

Decides whether an archive listing looks like BepInEx content (anything
living under a ``config``, ``plugins`` or ``patchers`` directory) for the
supported game.  A non-matching archive is a normal negative result so the
host can fall back to another installer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bepinex_installer.constants import BEPINEX_LAYOUT, NEXUS_GAME_ID, LoaderLayout
from bepinex_installer.schemas.install import LayoutDecision
from bepinex_installer.services.path_normalizer import directory_segments, is_directory_entry

logger = logging.getLogger(__name__)


def has_special_directory(files: Iterable[str], layout: LoaderLayout = BEPINEX_LAYOUT) -> bool:
    """Return ``True`` if any file sits beneath one of the layout's special directories."""
    targets = {name.lower() for name in layout.special_dirs}
    return any(
        targets.intersection(directory_segments(file))
        for file in files
        if not is_directory_entry(file)
    )


def check_supported(
    files: Iterable[str],
    game_id: str,
    layout: LoaderLayout = BEPINEX_LAYOUT,
) -> LayoutDecision:
    """Determine whether the mixed installer supports *files* for *game_id*.

    Parameters
    ----------
    files:
        Flat archive listing; directory placeholders end with a separator.
    game_id:
        Identifier of the game the archive is being installed for.
    layout:
        Loader names to match against, BepInEx by default.
    """
    supported = game_id == NEXUS_GAME_ID and has_special_directory(files, layout)
    logger.debug("Layout test for game %s: supported=%s", game_id, supported)
    return LayoutDecision(required_files=[], supported=supported)
