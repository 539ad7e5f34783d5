"""Resolve configured WSDL inputs into an ordered list of sources.

Three strategies, chosen by which inputs are present:

1. dependency reference given: entries of ``wsdl_files`` are looked up
   inside the matching dependency archive
2. ``wsdl_files`` given: each entry is a path, relative ones resolved
   against ``wsdl_directory``
3. otherwise: every ``*.wsdl`` file directly inside ``wsdl_directory``
"""

import logging
import os
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from wsdl2xsd.contracts import ArtifactRecord
from wsdl2xsd.errors import ConfigurationError, ResolutionError
from wsdl2xsd.kernel.sources import (
    ArchiveResourceSource,
    DirectoryEntrySource,
    FilePathSource,
    WsdlSource,
)

logger = logging.getLogger(__name__)

WSDL_EXTENSION = ".wsdl"

PathLike = Union[str, os.PathLike]


def resolve_sources(
    wsdl_directory: Optional[PathLike],
    wsdl_files: Optional[Sequence[str]] = None,
    dependency: Optional[str] = None,
    artifacts: Iterable[ArtifactRecord] = (),
) -> List[WsdlSource]:
    """Resolve the configured inputs into WSDL sources, in processing order.

    Args:
        wsdl_directory: Base directory for relative file names and the
            directory scanned when no file list is given. It is not used
            with a dependency reference. ``None`` falls back to the current
            working directory.
        wsdl_files: Explicit WSDL names. ``None`` means scan the directory.
        dependency: ``group:artifact`` reference to a dependency archive.
        artifacts: The build's resolved artifacts, searched for ``dependency``.

    Raises:
        ConfigurationError: Malformed dependency reference, or a dependency
            given without file names.
        ResolutionError: Any named input cannot be found.
    """
    if dependency is not None:
        sources = _resolve_from_dependency(dependency, wsdl_files, artifacts)
    elif wsdl_files is not None:
        sources = [_resolve_file(wsdl_directory, filename) for filename in wsdl_files]
    else:
        sources = _scan_directory(wsdl_directory)

    if not sources:
        logger.warning("No WSDL resolved; no schema will be extracted.")
    return sources


def _resolve_file(wsdl_directory: Optional[PathLike], filename: str) -> FilePathSource:
    path = Path(filename)
    if not path.is_absolute() and wsdl_directory is not None:
        path = Path(wsdl_directory) / path
    path = path.absolute()
    if not path.is_file():
        raise ResolutionError(f"WSDL does not exist: {path}", details={"path": str(path)})
    return FilePathSource(path=path)


def _scan_directory(wsdl_directory: Optional[PathLike]) -> List[DirectoryEntrySource]:
    directory = Path(wsdl_directory if wsdl_directory is not None else ".").absolute()
    if not directory.exists():
        raise ResolutionError(
            "Must specify a WSDL and/or directory to search for WSDL.  "
            f"No WSDL specified and directory does not exist: {directory}",
            details={"directory": str(directory)},
        )
    wsdls: List[DirectoryEntrySource] = []
    if directory.is_dir():
        # enumeration order of the filesystem, not sorted
        for entry in directory.iterdir():
            if entry.name.endswith(WSDL_EXTENSION) and entry.is_file():
                wsdls.append(DirectoryEntrySource(path=entry))
    if not wsdls:
        raise ResolutionError(
            f"No WSDL found in specified directory: {directory}",
            details={"directory": str(directory)},
        )
    return wsdls


def split_dependency(dependency: str) -> Tuple[str, str]:
    """Split a ``group:artifact`` reference into its two ids."""
    parts = dependency.split(":")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigurationError(
            f"WSDL dependency invalid: {dependency}",
            details={"dependency": dependency},
        )
    return parts[0], parts[1]


def _find_artifact_file(
    group_id: str,
    artifact_id: str,
    artifacts: Iterable[ArtifactRecord],
) -> Path:
    matches = [
        artifact
        for artifact in artifacts
        if artifact.group_id == group_id
        and artifact.artifact_id == artifact_id
        and artifact.file is not None
    ]
    if len(matches) != 1:
        raise ResolutionError(
            f"Expected only 1 but found {len(matches)} matching WSDL dependency.",
            details={"group_id": group_id, "artifact_id": artifact_id, "found": len(matches)},
        )
    return Path(matches[0].file)


def _resolve_from_dependency(
    dependency: str,
    wsdl_files: Optional[Sequence[str]],
    artifacts: Iterable[ArtifactRecord],
) -> List[ArchiveResourceSource]:
    if not wsdl_files:
        raise ConfigurationError(
            "WSDL files must be specified when using a WSDL dependency.",
            details={"dependency": dependency},
        )
    group_id, artifact_id = split_dependency(dependency)
    archive_path = _find_artifact_file(group_id, artifact_id, artifacts)
    logger.debug("Resolving WSDL resources from %s", archive_path)

    try:
        archive = zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as e:
        raise ResolutionError(
            f"Unable to open WSDL dependency archive: {archive_path}",
            details={"archive": str(archive_path)},
            cause=e,
        ) from e

    sources: List[ArchiveResourceSource] = []
    with archive:
        entries = set(archive.namelist())
        for name in wsdl_files:
            # resource names are classpath-relative; a leading '/' is tolerated
            entry = name.lstrip("/")
            if entry not in entries:
                raise ResolutionError(
                    f"Wsdl resource not found: {name}",
                    details={"archive": str(archive_path), "resource": name},
                )
            sources.append(ArchiveResourceSource(archive=archive_path, resource=entry))
    return sources
