"""WSDL source variants.

A source identifies one WSDL input for the duration of a run. Sources are
immutable; reading one always goes through ``open()``, which scopes every
underlying handle to the ``with`` block.
"""

import zipfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict


class _PathSource(BaseModel):
    path: Path

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        """Final path segment, used to derive the schema filename."""
        return self.path.name

    @property
    def location(self) -> str:
        return str(self.path)

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        with open(self.path, "rb") as stream:
            yield stream


class FilePathSource(_PathSource):
    """A WSDL named explicitly in the configured file list."""
    kind: Literal["file"] = "file"


class DirectoryEntrySource(_PathSource):
    """A WSDL found by scanning the configured directory."""
    kind: Literal["directory"] = "directory"


class ArchiveResourceSource(BaseModel):
    """A WSDL stored as an entry inside a dependency archive (jar/zip)."""
    kind: Literal["archive"] = "archive"
    archive: Path
    resource: str  # entry name inside the archive, '/'-separated

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return PurePosixPath(self.resource).name

    @property
    def location(self) -> str:
        return f"{self.archive}!/{self.resource}"

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        try:
            archive = zipfile.ZipFile(self.archive)
        except zipfile.BadZipFile as e:
            raise OSError(f"Not a readable archive: {self.archive}") from e
        with archive:
            try:
                stream = archive.open(self.resource)
            except KeyError as e:
                raise FileNotFoundError(f"No entry {self.resource} in {self.archive}") from e
            with stream:
                yield stream


WsdlSource = Union[FilePathSource, DirectoryEntrySource, ArchiveResourceSource]
