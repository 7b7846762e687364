from pydantic import BaseModel

from bepinex_installer.schemas.install import InstallInstruction


class ModTypeOut(BaseModel):
    id: str
    name: str
    priority: int
    merge_mods: bool
    version_marker: str


class ModTypeTestRequest(BaseModel):
    instructions: list[InstallInstruction]


class ModTypeTestResult(BaseModel):
    mod_type_id: str
    matches: bool
