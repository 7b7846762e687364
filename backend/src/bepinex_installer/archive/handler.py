"""Archive listing for ZIP, 7z, and RAR mod archives.

Only enumerates entries; the resolver works from the flat path list and
never needs file contents.
"""

from __future__ import annotations

import shutil
import subprocess
import zipfile
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

SUPPORTED_EXTENSIONS = {".zip", ".7z", ".rar"}


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    filename: str
    is_dir: bool
    size: int = 0


class ArchiveHandler(ABC):
    """Base class for archive format handlers."""

    @abstractmethod
    def list_entries(self) -> list[ArchiveEntry]:
        """Return all entries in the archive."""

    @abstractmethod
    def close(self) -> None:
        """Release resources."""

    def __enter__(self) -> ArchiveHandler:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()


class ZipHandler(ArchiveHandler):
    """Handler for .zip archives using stdlib zipfile."""

    def __init__(self, path: str | Path) -> None:
        self._zf = zipfile.ZipFile(path, "r")

    def list_entries(self) -> list[ArchiveEntry]:
        return [
            ArchiveEntry(filename=info.filename, is_dir=info.is_dir(), size=info.file_size)
            for info in self._zf.infolist()
        ]

    def close(self) -> None:
        self._zf.close()


class SevenZipHandler(ArchiveHandler):
    """Handler for .7z archives using py7zr."""

    def __init__(self, path: str | Path) -> None:
        try:
            import py7zr
        except ImportError as exc:
            raise ImportError("py7zr is required for .7z support: pip install py7zr") from exc
        self._archive = py7zr.SevenZipFile(Path(path), mode="r")

    def list_entries(self) -> list[ArchiveEntry]:
        return [
            ArchiveEntry(
                filename=entry.filename,
                is_dir=entry.is_directory,
                size=entry.uncompressed if hasattr(entry, "uncompressed") else 0,
            )
            for entry in self._archive.list()
        ]

    def close(self) -> None:
        self._archive.close()


def _find_7zip() -> str | None:
    """Locate the 7-Zip CLI executable."""
    common = [
        r"C:\Program Files\7-Zip\7z.exe",
        r"C:\Program Files (x86)\7-Zip\7z.exe",
    ]
    for p in common:
        if Path(p).exists():
            return p
    return shutil.which("7z")


def parse_7z_listing(output: str) -> list[ArchiveEntry]:
    """Parse the technical listing produced by ``7z l -slt``."""
    entries: list[ArchiveEntry] = []
    current_path = ""
    current_size = 0
    current_is_dir = False

    for line in output.splitlines():
        line = line.strip()
        if line.startswith("Path = "):
            if current_path:
                entries.append(
                    ArchiveEntry(filename=current_path, is_dir=current_is_dir, size=current_size)
                )
            current_path = line[7:]
            current_size = 0
            current_is_dir = False
        elif line.startswith("Size = "):
            try:
                current_size = int(line[7:])
            except ValueError:
                current_size = 0
        elif line.startswith("Folder = +"):
            current_is_dir = True

    if current_path:
        entries.append(ArchiveEntry(filename=current_path, is_dir=current_is_dir, size=current_size))
    return entries


class RarHandler(ArchiveHandler):
    """Handler for .rar archives using 7-Zip CLI.

    Listing RAR archives requires 7-Zip to be installed on the system.
    """

    def __init__(self, path: str | Path) -> None:
        self._exe = _find_7zip()
        if not self._exe:
            raise FileNotFoundError(
                "RAR listing requires 7-Zip. Install via: winget install 7zip.7zip"
            )
        self._path = str(path)

    def list_entries(self) -> list[ArchiveEntry]:
        result = subprocess.run(
            [self._exe, "l", "-slt", self._path],  # type: ignore[list-item]
            capture_output=True,
            text=True,
            timeout=60,
        )
        if result.returncode != 0:
            raise RuntimeError(f"7z list failed (exit {result.returncode}): {result.stderr}")
        # The first "Path = " block describes the archive itself
        entries = parse_7z_listing(result.stdout)
        return [e for e in entries if e.filename != self._path]

    def close(self) -> None:
        pass


def entry_paths(entries: Iterable[ArchiveEntry]) -> list[str]:
    """Flatten entries into archive paths, marking directories with a trailing ``/``."""
    paths: list[str] = []
    for entry in entries:
        name = entry.filename
        if entry.is_dir and not name.endswith(("/", "\\")):
            name += "/"
        paths.append(name)
    return paths


def open_archive(path: str | Path) -> ArchiveHandler:
    """Open an archive file and return the appropriate handler.

    Raises:
        ValueError: If the file extension is not supported.
        FileNotFoundError: For RAR files when 7-Zip is not installed.
        zipfile.BadZipFile: If a ZIP file is corrupt.
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext == ".zip":
        return ZipHandler(path)
    if ext == ".7z":
        return SevenZipHandler(path)
    if ext == ".rar":
        return RarHandler(path)

    raise ValueError(f"Unsupported archive format: {ext}")
