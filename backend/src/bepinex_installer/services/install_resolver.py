"""Copy-instruction resolution for the BepInEx mixed installer.

Maps archive entries to destinations relative to the loader directory.
Archives that wrap their payload in a top-level ``BepInEx`` folder have that
folder stripped; loader-owned files (the ``core`` directory and the loader's
own config file) are never emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bepinex_installer.constants import BEPINEX_LAYOUT, LoaderLayout
from bepinex_installer.schemas.install import InstallInstruction, InstallResult
from bepinex_installer.services.path_normalizer import (
    basename,
    directory_segments,
    is_directory_entry,
    join_segments,
    normalize,
    split_path,
)

logger = logging.getLogger(__name__)


def root_index(files: Iterable[str], layout: LoaderLayout = BEPINEX_LAYOUT) -> int:
    """Return ``1`` if any file's top-level directory is the wrapper folder, else ``0``."""
    wrapper = layout.wrapper_dir.lower()
    for file in files:
        dirs = directory_segments(file)
        if dirs and dirs[0] == wrapper:
            return 1
    return 0


def _is_loader_owned(segments: tuple[str, ...], index: int, layout: LoaderLayout) -> bool:
    core = layout.core_dir.lower()
    if segments[index] == core:
        return True
    retained = segments[index:]
    return len(retained) > 1 and retained[0] == layout.install_root.lower() and retained[1] == core


def resolve_instructions(
    files: Iterable[str],
    layout: LoaderLayout = BEPINEX_LAYOUT,
) -> list[InstallInstruction]:
    """Build copy instructions for *files*, preserving input order and case."""
    sans_directories = [file for file in files if not is_directory_entry(file)]
    index = root_index(sans_directories, layout)
    config_file = layout.config_file.lower()

    instructions: list[InstallInstruction] = []
    for source in sans_directories:
        segments = normalize(source)
        if len(segments) <= index:
            logger.debug("Skipping entry outside wrapper: %s", source)
            continue
        if _is_loader_owned(segments, index, layout):
            logger.debug("Skipping loader core file: %s", source)
            continue
        if basename(source).lower() == config_file:
            logger.debug("Skipping loader config file: %s", source)
            continue
        destination = join_segments(split_path(source)[index:])
        instructions.append(InstallInstruction(source=source, destination=destination))
    return instructions


def install(files: Iterable[str], layout: LoaderLayout = BEPINEX_LAYOUT) -> InstallResult:
    """Parse the given archive files into installation instructions."""
    return InstallResult(instructions=resolve_instructions(files, layout))
