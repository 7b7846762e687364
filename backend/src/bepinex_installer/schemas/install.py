from typing import Literal

from pydantic import BaseModel


class InstallInstruction(BaseModel):
    type: Literal["copy"] = "copy"
    source: str
    destination: str


class InstallResult(BaseModel):
    instructions: list[InstallInstruction] = []


class LayoutDecision(BaseModel):
    required_files: list[str] = []
    supported: bool


class InstallPlan(BaseModel):
    supported: bool
    installer_id: str | None = None
    instructions: list[InstallInstruction] = []
    mod_type_id: str | None = None
    install_path: str = ""
    mods_path: str = ""
    merge_mods: bool = True


class SupportedCheckRequest(BaseModel):
    files: list[str]
    game_id: str | None = None


class InstallRequest(BaseModel):
    files: list[str]


class PlanRequest(BaseModel):
    files: list[str]
    game_id: str | None = None
    game_path: str | None = None


class ArchivePlanRequest(BaseModel):
    archive_filename: str
    game_id: str | None = None
    game_path: str | None = None
