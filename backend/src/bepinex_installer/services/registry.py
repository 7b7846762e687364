"""Installer and mod-type registration, and install planning.

Binds the pure layout, resolution and classification functions into the
registration points a mod-manager host expects.  Host state (the active game
and its discovered install path) is passed in explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import PurePath

from bepinex_installer.constants import BEPINEX_DIR, BEPINEX_MOD_PATH, NEXUS_GAME_ID
from bepinex_installer.schemas.game import GameDiscovery
from bepinex_installer.schemas.install import (
    InstallInstruction,
    InstallPlan,
    InstallResult,
    LayoutDecision,
)
from bepinex_installer.services.archive_layout import check_supported
from bepinex_installer.services.install_resolver import install
from bepinex_installer.services.mod_types import (
    BEPINEX_5_MOD_TYPE,
    BEPINEX_6_MOD_TYPE,
    ModTypeDefinition,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallerDefinition:
    id: str
    priority: int
    test_supported: Callable[[list[str], str], LayoutDecision]
    install: Callable[[list[str]], InstallResult]


BEPINEX_MIXED_INSTALLER = InstallerDefinition(
    id="bepinex-mixed",
    priority=60,
    test_supported=check_supported,
    install=install,
)


def get_discovery(
    discoveries: dict[str, GameDiscovery],
    game_id: str = NEXUS_GAME_ID,
) -> GameDiscovery | None:
    """Return the discovery result for *game_id*, or ``None`` if undiscovered."""
    return discoveries.get(game_id)


def _game_subpath(game_path: str, relative: str) -> str:
    return str(PurePath(game_path, relative))


def get_mod_path(game_path: str = "") -> str:
    """Path to the game's mods directory (always the BepInEx plugins folder)."""
    return _game_subpath(game_path, BEPINEX_MOD_PATH)


def get_loader_path(game_path: str = "") -> str:
    """Path to the BepInEx directory, the default mod type's install root."""
    return _game_subpath(game_path, BEPINEX_DIR)


@dataclass
class ExtensionRegistry:
    _installers: list[InstallerDefinition] = field(default_factory=list)
    _mod_types: list[ModTypeDefinition] = field(default_factory=list)

    def register_installer(self, installer: InstallerDefinition) -> None:
        self._installers.append(installer)
        logger.debug("Registered installer %s (priority %d)", installer.id, installer.priority)

    def register_mod_type(self, mod_type: ModTypeDefinition) -> None:
        self._mod_types.append(mod_type)
        logger.debug("Registered mod type %s (priority %d)", mod_type.id, mod_type.priority)

    def installers(self) -> list[InstallerDefinition]:
        return sorted(self._installers, key=lambda i: i.priority)

    def mod_types(self) -> list[ModTypeDefinition]:
        return sorted(self._mod_types, key=lambda m: m.priority)

    def get_mod_type(self, mod_type_id: str) -> ModTypeDefinition | None:
        return next((m for m in self._mod_types if m.id == mod_type_id), None)

    def find_installer(self, files: list[str], game_id: str) -> InstallerDefinition | None:
        for installer in self.installers():
            if installer.test_supported(files, game_id).supported:
                return installer
        return None

    def select_mod_type(
        self,
        game_id: str,
        instructions: Iterable[InstallInstruction],
    ) -> ModTypeDefinition | None:
        instructions = list(instructions)
        for mod_type in self.mod_types():
            if mod_type.is_supported(game_id) and mod_type.test(instructions):
                return mod_type
        return None


def default_registry() -> ExtensionRegistry:
    registry = ExtensionRegistry()
    registry.register_installer(BEPINEX_MIXED_INSTALLER)
    registry.register_mod_type(BEPINEX_5_MOD_TYPE)
    registry.register_mod_type(BEPINEX_6_MOD_TYPE)
    return registry


def plan_install(
    registry: ExtensionRegistry,
    files: Iterable[str],
    game_id: str,
    discovery: GameDiscovery | None = None,
) -> InstallPlan:
    """Run the installer gate, resolve instructions and pick a mod type.

    When no registered installer supports *files*, the plan is unsupported
    and carries no instructions.  When no mod type accepts the instructions,
    the game's default mod type applies: files land in ``<game>/BepInEx``.
    """
    files = list(files)
    installer = registry.find_installer(files, game_id)
    if installer is None:
        logger.info("No installer supports archive for game %s", game_id)
        return InstallPlan(supported=False)

    game_path = discovery.path if discovery is not None else None
    instructions = installer.install(files).instructions
    mod_type = registry.select_mod_type(game_id, instructions)
    if mod_type is None:
        install_path = get_loader_path(game_path) if game_path else ""
        merge_mods = True
    else:
        install_path = mod_type.get_path(discovery)
        merge_mods = mod_type.merge_mods

    logger.info(
        "Planned %d instruction(s) via %s, mod type %s",
        len(instructions),
        installer.id,
        mod_type.id if mod_type else "default",
    )
    return InstallPlan(
        supported=True,
        installer_id=installer.id,
        instructions=instructions,
        mod_type_id=mod_type.id if mod_type else None,
        install_path=install_path,
        mods_path=get_mod_path(game_path) if game_path else "",
        merge_mods=merge_mods,
    )
