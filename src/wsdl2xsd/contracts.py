"""Public models shared by the API, the CLI and the kernel."""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ArtifactRecord(BaseModel):
    """One resolved build artifact: group/artifact ids and its file, if resolved."""
    group_id: str = Field(validation_alias=AliasChoices("group_id", "groupId"))
    artifact_id: str = Field(validation_alias=AliasChoices("artifact_id", "artifactId"))
    version: Optional[str] = None
    file: Optional[Path] = None  # None when the build could not resolve the artifact

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ExtractionResult(BaseModel):
    """A schema successfully extracted from one WSDL and written to disk."""
    source: str  # display location of the WSDL
    output_path: Path
    schema_text: str
