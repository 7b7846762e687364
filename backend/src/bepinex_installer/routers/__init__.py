from fastapi import APIRouter

from bepinex_installer.routers.installers import router as installers_router
from bepinex_installer.routers.mod_types import router as mod_types_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(installers_router)
api_router.include_router(mod_types_router)
