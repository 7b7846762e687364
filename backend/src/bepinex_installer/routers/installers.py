"""Endpoints exposing layout detection, instruction resolution, and install planning."""

import logging
import zipfile
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from py7zr.exceptions import Bad7zFile

from bepinex_installer.archive.handler import entry_paths, open_archive
from bepinex_installer.config import settings
from bepinex_installer.routers.deps import get_registry, resolve_game
from bepinex_installer.schemas.install import (
    ArchivePlanRequest,
    InstallPlan,
    InstallRequest,
    InstallResult,
    LayoutDecision,
    PlanRequest,
    SupportedCheckRequest,
)
from bepinex_installer.services.archive_layout import check_supported
from bepinex_installer.services.install_resolver import install
from bepinex_installer.services.registry import ExtensionRegistry, plan_install

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/installers", tags=["installers"])


@router.post("/test-supported", response_model=LayoutDecision)
async def check_supported_endpoint(data: SupportedCheckRequest) -> LayoutDecision:
    """Check whether the mixed installer supports an archive listing."""
    return check_supported(data.files, data.game_id or settings.game_id)


@router.post("/install", response_model=InstallResult)
async def install_endpoint(data: InstallRequest) -> InstallResult:
    """Resolve an archive listing into copy instructions."""
    return install(data.files)


@router.post("/plan", response_model=InstallPlan)
async def plan_endpoint(
    data: PlanRequest,
    registry: ExtensionRegistry = Depends(get_registry),
) -> InstallPlan:
    """Pick an installer and mod type for an archive listing."""
    game_id, discovery = resolve_game(data.game_id, data.game_path)
    return plan_install(registry, data.files, game_id, discovery)


@router.post("/plan-archive", response_model=InstallPlan)
async def plan_archive_endpoint(
    data: ArchivePlanRequest,
    registry: ExtensionRegistry = Depends(get_registry),
) -> InstallPlan:
    """List an archive from the staging folder and plan its installation."""
    staging = Path(settings.staging_dir)
    archive_path = staging / data.archive_filename
    if not archive_path.resolve().is_relative_to(staging.resolve()):
        raise HTTPException(400, "Invalid archive filename")
    if not archive_path.is_file():
        raise HTTPException(404, f"Archive not found: {data.archive_filename}")

    try:
        with open_archive(archive_path) as archive:
            files = entry_paths(archive.list_entries())
    except (ValueError, zipfile.BadZipFile, Bad7zFile) as exc:
        raise HTTPException(400, str(exc)) from exc
    except (FileNotFoundError, RuntimeError) as exc:
        raise HTTPException(422, str(exc)) from exc

    logger.info("Listed %d entries from %s", len(files), archive_path.name)
    game_id, discovery = resolve_game(data.game_id, data.game_path)
    return plan_install(registry, files, game_id, discovery)
