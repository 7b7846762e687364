"""BepInEx mod types and the classifier that selects between them.

A mod type is an installation policy: where a mod's files are deployed and
whether several mods of that type may be merged into the same directory.
The host picks the first mod type whose :meth:`ModTypeDefinition.test`
accepts a mod's resolved instructions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bepinex_installer.constants import (
    BEPINEX_5_CORE_DLL,
    BEPINEX_6_CORE_DLL,
    BEPINEX_INJECTOR_CORE_FILES,
    BEPINEX_LAYOUT,
    NEXUS_GAME_ID,
    LoaderLayout,
)
from bepinex_installer.schemas.game import GameDiscovery
from bepinex_installer.schemas.install import InstallInstruction
from bepinex_installer.services.path_normalizer import join_segments, normalize

logger = logging.getLogger(__name__)


def copy_destinations(instructions: Iterable[InstallInstruction]) -> list[tuple[str, ...]]:
    """Normalized destinations of every copy instruction that has one."""
    return [
        normalize(instruction.destination)
        for instruction in instructions
        if instruction.type == "copy" and instruction.destination
    ]


def required_core_paths(version_marker: str, layout: LoaderLayout = BEPINEX_LAYOUT) -> list[str]:
    """Lower-cased ``<install root>/core/<file>`` paths a loader install must contain."""
    return [
        join_segments(normalize(f"{layout.install_root}/{layout.core_dir}/{file}"))
        for file in [*BEPINEX_INJECTOR_CORE_FILES, version_marker]
    ]


def matches_mod_type(
    instructions: Iterable[InstallInstruction],
    version_marker: str,
    layout: LoaderLayout = BEPINEX_LAYOUT,
) -> bool:
    """Return ``True`` if *instructions* deploy a full loader of the given version.

    Requires at least one destination rooted at the install root, and every
    injector core file plus *version_marker* present under its core directory.
    """
    destinations = copy_destinations(instructions)
    root = layout.install_root.lower()
    if not any(dest and dest[0] == root for dest in destinations):
        return False
    present = {join_segments(dest) for dest in destinations}
    return all(path in present for path in required_core_paths(version_marker, layout))


@dataclass(frozen=True, slots=True)
class ModTypeDefinition:
    id: str
    name: str
    priority: int
    version_marker: str
    merge_mods: bool = True
    game_id: str = NEXUS_GAME_ID
    layout: LoaderLayout = BEPINEX_LAYOUT

    def is_supported(self, game_id: str) -> bool:
        return game_id == self.game_id

    def get_path(self, discovery: GameDiscovery | None) -> str:
        """Absolute install directory for this mod type, ``""`` if the game is undiscovered."""
        if discovery is None:
            return ""
        return discovery.path or ""

    def test(self, instructions: Iterable[InstallInstruction]) -> bool:
        result = matches_mod_type(instructions, self.version_marker, self.layout)
        logger.debug("Mod type %s test: %s", self.id, result)
        return result


BEPINEX_5_MOD_TYPE = ModTypeDefinition(
    id="bepinex-5",
    name="BepInEx 5",
    priority=50,
    version_marker=BEPINEX_5_CORE_DLL,
)

BEPINEX_6_MOD_TYPE = ModTypeDefinition(
    id="bepinex-6",
    name="BepInEx 6",
    priority=50,
    version_marker=BEPINEX_6_CORE_DLL,
)
