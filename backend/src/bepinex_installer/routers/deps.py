from bepinex_installer.config import settings
from bepinex_installer.schemas.game import GameDiscovery
from bepinex_installer.services.registry import (
    ExtensionRegistry,
    default_registry,
    get_discovery,
)

_registry = default_registry()


def get_registry() -> ExtensionRegistry:
    return _registry


def configured_discoveries() -> dict[str, GameDiscovery]:
    """Discovery results known from settings, keyed by game id."""
    if settings.game_path is None:
        return {}
    return {settings.game_id: GameDiscovery(game_id=settings.game_id, path=str(settings.game_path))}


def resolve_game(game_id: str | None, game_path: str | None) -> tuple[str, GameDiscovery | None]:
    """Fill in the configured game when the request leaves it out.

    A ``game_path`` in the request overrides the configured discovery.
    """
    gid = game_id or settings.game_id
    discoveries = configured_discoveries()
    if game_path:
        discoveries[gid] = GameDiscovery(game_id=gid, path=game_path)
    return gid, get_discovery(discoveries, gid)
