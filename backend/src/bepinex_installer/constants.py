from dataclasses import dataclass, field

NEXUS_GAME_ID = "spacetrashscavenger"

BEPINEX_DIR = "BepInEx"
BEPINEX_CORE_DIR = "core"
BEPINEX_PLUGINS_DIR = "plugins"
BEPINEX_PATCHERS_DIR = "patchers"
BEPINEX_CONFIG_DIR = "config"
BEPINEX_CONFIG_FILE = "BepInEx.cfg"
BEPINEX_MOD_PATH = f"{BEPINEX_DIR}/{BEPINEX_PLUGINS_DIR}"

# Files every BepInEx distribution ships in BepInEx/core, regardless of version
BEPINEX_INJECTOR_CORE_FILES = [
    "0Harmony.dll",
    "Mono.Cecil.dll",
    "MonoMod.RuntimeDetour.dll",
    "MonoMod.Utils.dll",
]

BEPINEX_5_CORE_DLL = "BepInEx.dll"
BEPINEX_6_CORE_DLL = "BepInEx.Core.dll"


@dataclass(frozen=True, slots=True)
class LoaderLayout:
    """Directory and file names that make up a plugin loader install.

    ``wrapper_dir`` is the top-level folder stripped from archives that wrap
    their payload; it is the install root unless given explicitly.
    """

    install_root: str = BEPINEX_DIR
    core_dir: str = BEPINEX_CORE_DIR
    plugins_dir: str = BEPINEX_PLUGINS_DIR
    patchers_dir: str = BEPINEX_PATCHERS_DIR
    config_dir: str = BEPINEX_CONFIG_DIR
    config_file: str = BEPINEX_CONFIG_FILE
    wrapper_dir: str = field(default="")

    def __post_init__(self) -> None:
        if not self.wrapper_dir:
            object.__setattr__(self, "wrapper_dir", self.install_root)

    @property
    def special_dirs(self) -> tuple[str, str, str]:
        return (self.config_dir, self.plugins_dir, self.patchers_dir)


BEPINEX_LAYOUT = LoaderLayout()
