"""Endpoints for inspecting registered mod types."""

from fastapi import APIRouter, Depends, HTTPException

from bepinex_installer.routers.deps import get_registry
from bepinex_installer.schemas.mod_type import ModTypeOut, ModTypeTestRequest, ModTypeTestResult
from bepinex_installer.services.registry import ExtensionRegistry

router = APIRouter(prefix="/mod-types", tags=["mod-types"])


@router.get("", response_model=list[ModTypeOut])
async def list_mod_types(
    registry: ExtensionRegistry = Depends(get_registry),
) -> list[ModTypeOut]:
    return [
        ModTypeOut(
            id=m.id,
            name=m.name,
            priority=m.priority,
            merge_mods=m.merge_mods,
            version_marker=m.version_marker,
        )
        for m in registry.mod_types()
    ]


@router.post("/{mod_type_id}/test", response_model=ModTypeTestResult)
async def check_mod_type(
    mod_type_id: str,
    data: ModTypeTestRequest,
    registry: ExtensionRegistry = Depends(get_registry),
) -> ModTypeTestResult:
    """Check whether a set of copy instructions belongs to a mod type."""
    mod_type = registry.get_mod_type(mod_type_id)
    if mod_type is None:
        raise HTTPException(404, f"Unknown mod type: {mod_type_id}")
    return ModTypeTestResult(mod_type_id=mod_type.id, matches=mod_type.test(data.instructions))
