from pathlib import PurePath

from bepinex_installer.constants import BEPINEX_5_CORE_DLL, BEPINEX_INJECTOR_CORE_FILES, NEXUS_GAME_ID
from bepinex_installer.schemas.game import GameDiscovery
from bepinex_installer.schemas.install import InstallInstruction, InstallResult, LayoutDecision
from bepinex_installer.services.mod_types import BEPINEX_5_MOD_TYPE, ModTypeDefinition
from bepinex_installer.services.registry import (
    BEPINEX_MIXED_INSTALLER,
    ExtensionRegistry,
    InstallerDefinition,
    default_registry,
    get_discovery,
    get_loader_path,
    get_mod_path,
    plan_install,
)

DISCOVERY = GameDiscovery(game_id=NEXUS_GAME_ID, path="/games/sts")


def _loader_pack_installer() -> InstallerDefinition:
    """An installer that emits archive paths unchanged, used to feed the classifier."""

    def _supported(files: list[str], game_id: str) -> LayoutDecision:
        return LayoutDecision(supported=True)

    def _install(files: list[str]) -> InstallResult:
        return InstallResult(
            instructions=[InstallInstruction(source=f, destination=f) for f in files]
        )

    return InstallerDefinition(id="loader-pack", priority=10, test_supported=_supported, install=_install)


class TestHelpers:
    def test_get_mod_path(self):
        assert get_mod_path("/games/sts") == str(PurePath("/games/sts", "BepInEx", "plugins"))

    def test_get_loader_path(self):
        assert get_loader_path("/games/sts") == str(PurePath("/games/sts", "BepInEx"))

    def test_get_discovery(self):
        discoveries = {NEXUS_GAME_ID: DISCOVERY}
        assert get_discovery(discoveries) is DISCOVERY
        assert get_discovery(discoveries, "subnautica") is None


class TestExtensionRegistry:
    def test_default_registration(self):
        registry = default_registry()
        assert [i.id for i in registry.installers()] == ["bepinex-mixed"]
        assert [m.id for m in registry.mod_types()] == ["bepinex-5", "bepinex-6"]
        assert BEPINEX_MIXED_INSTALLER.priority == 60

    def test_installers_sorted_by_priority(self):
        registry = ExtensionRegistry()
        registry.register_installer(BEPINEX_MIXED_INSTALLER)
        registry.register_installer(_loader_pack_installer())
        assert [i.id for i in registry.installers()] == ["loader-pack", "bepinex-mixed"]

    def test_find_installer_none_for_unsupported(self):
        registry = default_registry()
        assert registry.find_installer(["readme.txt"], NEXUS_GAME_ID) is None

    def test_get_mod_type(self):
        registry = default_registry()
        assert registry.get_mod_type("bepinex-5") is BEPINEX_5_MOD_TYPE
        assert registry.get_mod_type("missing") is None

    def test_select_mod_type_skips_unsupported_games(self):
        other = ModTypeDefinition(
            id="other-5", name="Other", priority=1, version_marker=BEPINEX_5_CORE_DLL, game_id="other"
        )
        registry = ExtensionRegistry()
        registry.register_mod_type(other)
        registry.register_mod_type(BEPINEX_5_MOD_TYPE)
        files = [f"BepInEx/core/{n}" for n in [*BEPINEX_INJECTOR_CORE_FILES, BEPINEX_5_CORE_DLL]]
        instructions = [InstallInstruction(source=f, destination=f) for f in files]
        assert registry.select_mod_type(NEXUS_GAME_ID, instructions) is BEPINEX_5_MOD_TYPE


class TestPlanInstall:
    def test_plugin_archive_uses_default_mod_type(self):
        plan = plan_install(default_registry(), ["BepInEx/plugins/Mod.dll"], NEXUS_GAME_ID, DISCOVERY)
        assert plan.supported
        assert plan.installer_id == "bepinex-mixed"
        assert [i.destination for i in plan.instructions] == ["plugins/Mod.dll"]
        assert plan.mod_type_id is None
        assert plan.install_path == str(PurePath("/games/sts", "BepInEx"))
        assert plan.mods_path == get_mod_path("/games/sts")
        assert plan.merge_mods is True

    def test_unsupported_archive(self):
        plan = plan_install(default_registry(), ["Mod/Mod.dll"], NEXUS_GAME_ID, DISCOVERY)
        assert not plan.supported
        assert plan.instructions == []
        assert plan.installer_id is None

    def test_wrong_game(self):
        plan = plan_install(default_registry(), ["BepInEx/plugins/Mod.dll"], "subnautica", DISCOVERY)
        assert not plan.supported

    def test_undiscovered_game_has_empty_install_path(self):
        plan = plan_install(default_registry(), ["plugins/Mod.dll"], NEXUS_GAME_ID)
        assert plan.supported
        assert plan.install_path == ""
        assert plan.mods_path == ""

    def test_loader_pack_selects_bepinex_5(self):
        registry = default_registry()
        registry.register_installer(_loader_pack_installer())
        files = [f"BepInEx/core/{n}" for n in [*BEPINEX_INJECTOR_CORE_FILES, BEPINEX_5_CORE_DLL]]
        plan = plan_install(registry, files, NEXUS_GAME_ID, DISCOVERY)
        assert plan.installer_id == "loader-pack"
        assert plan.mod_type_id == "bepinex-5"
        assert plan.install_path == "/games/sts"
        assert plan.merge_mods is True
