# notas/library.py
"""
Directory listing and safe file lookup for the notas folder.

- list_files: scan the configured directory and describe every document in it
- open_document: resolve an untrusted file name to a document inside the directory
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from stat import S_ISREG
from typing import List, Optional
from urllib.parse import quote

from notas.config import QUERY, NotasConfig

logger = logging.getLogger(__name__)

# characters encodeURIComponent leaves alone on top of quote()'s defaults
_QUERY_SAFE = "!*'()"


class ListingError(Exception):
    """The directory exists but could not be read (or created)."""


@dataclass(frozen=True)
class FileDescriptor:
    name: str
    path: str

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path}


@dataclass(frozen=True)
class Document:
    name: str
    path: Path
    stat: os.stat_result
    media_type: str

    @property
    def size(self) -> int:
        return self.stat.st_size


def make_locator(name: str, config: NotasConfig) -> str:
    if config.locator == QUERY:
        return f"{config.file_endpoint}?name={quote(name, safe=_QUERY_SAFE)}"
    return f"{config.static_prefix.rstrip('/')}/{quote(name, safe='')}"


def has_extension(name: str, extension: str) -> bool:
    return name.lower().endswith(extension.lower())


def _ensure_directory(config: NotasConfig) -> bool:
    directory = config.directory
    if directory.is_dir():
        return True
    if not config.create_missing:
        logger.debug("Directory %s does not exist, nothing to list", directory)
        return False
    logger.info("Creating notas directory %s", directory)
    directory.mkdir(parents=True, exist_ok=True)
    return True


def list_files(config: NotasConfig) -> List[FileDescriptor]:
    """
    Return a descriptor for every regular file in config.directory whose name
    ends with config.extension (case-insensitive), in enumeration order.

    A missing directory lists as empty (or is created first when
    config.create_missing is set). Other I/O failures raise ListingError when
    config.strict is set and list as empty otherwise.
    """
    descriptors = []
    try:
        if not _ensure_directory(config):
            return []
        for entry in config.directory.iterdir():
            if not has_extension(entry.name, config.extension):
                continue
            # a directory called "x.pdf" is not a document
            if not entry.is_file():
                continue
            if not _is_utf8(entry.name):
                logger.warning("Skipping %r in %s: name is not valid UTF-8", entry.name, config.directory)
                continue
            descriptors.append(FileDescriptor(entry.name, make_locator(entry.name, config)))
    except OSError as e:
        if config.strict:
            raise ListingError(f"cannot list {config.directory}: {e}") from e
        logger.warning("Cannot list %s: %s", config.directory, e)
        return []
    logger.debug("Listed %d file(s) in %s", len(descriptors), config.directory)
    return descriptors


def _is_utf8(name: str) -> bool:
    # undecodable bytes come back from the OS as lone surrogates
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def base_name(requested: str) -> str:
    """Keep only the last path component, treating / and \\ as separators."""
    return requested.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def resolve_path(directory: Path, requested: Optional[str]) -> Optional[Path]:
    if not requested:
        return None
    name = base_name(requested)
    if name in ("", ".", "..") or "\x00" in name:
        return None
    return Path(directory) / name


def open_document(config: NotasConfig, requested: Optional[str]) -> Optional[Document]:
    """
    Look up `requested` inside config.directory. Returns None when there is
    no such regular file; the result never points outside the directory.
    """
    path = resolve_path(config.directory, requested)
    try:
        stat = path.stat() if path is not None else None
    except OSError as e:
        logger.debug("No document for %r in %s: %s", requested, config.directory, e)
        return None
    if stat is None or not S_ISREG(stat.st_mode):
        logger.debug("No document for %r in %s", requested, config.directory)
        return None
    return Document(
        name=path.name,
        path=path,
        stat=stat,
        media_type=config.media_type,
    )
