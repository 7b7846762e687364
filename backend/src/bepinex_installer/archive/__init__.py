from bepinex_installer.archive.handler import (
    ArchiveEntry,
    ArchiveHandler,
    RarHandler,
    SevenZipHandler,
    ZipHandler,
    entry_paths,
    open_archive,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveHandler",
    "RarHandler",
    "SevenZipHandler",
    "ZipHandler",
    "entry_paths",
    "open_archive",
]
