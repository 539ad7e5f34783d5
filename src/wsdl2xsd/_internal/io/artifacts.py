"""Artifact manifest loaders and models.

A manifest lists the build's resolved artifacts as JSON:

    {"artifacts": [{"groupId": "...", "artifactId": "...", "file": "lib/x.jar"}]}

Relative ``file`` values resolve against the manifest's directory.
"""

import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wsdl2xsd.contracts import ArtifactRecord
from wsdl2xsd.errors import ConfigurationError


class ArtifactManifest(BaseModel):
    artifacts: List[ArtifactRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


def load_artifact_manifest(path: Union[str, Path]) -> List[ArtifactRecord]:
    """Load artifact records from a JSON manifest file."""
    manifest_path = Path(path)
    try:
        data = json.loads(manifest_path.read_bytes().decode("utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Unable to read artifact manifest {manifest_path}: {e}",
            details={"path": str(manifest_path)},
            cause=e,
        ) from e
    try:
        manifest = ArtifactManifest.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid artifact manifest {manifest_path}: {e}",
            details={"path": str(manifest_path)},
            cause=e,
        ) from e

    base = manifest_path.parent
    records: List[ArtifactRecord] = []
    for artifact in manifest.artifacts:
        if artifact.file is not None and not artifact.file.is_absolute():
            artifact = artifact.model_copy(update={"file": base / artifact.file})
        records.append(artifact)
    return records
