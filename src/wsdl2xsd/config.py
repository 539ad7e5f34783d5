"""Extraction configuration.

Values mirror the build parameters: an optional WSDL file list, the WSDL
directory, the schema destination directory and an optional
``group:artifact`` dependency reference.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from wsdl2xsd.errors import ConfigurationError

DEFAULT_WSDL_DIRECTORY = Path("src") / "wsdl"
DEFAULT_DEST_DIRECTORY = Path("src") / "xsd"


class ExtractionConfig(BaseModel):
    """Already-validated inputs for one extraction run."""
    wsdl_files: Optional[List[str]] = Field(
        default=None,
        validation_alias=AliasChoices("wsdl_files", "wsdlFiles"),
    )
    wsdl_directory: Path = Field(
        default=DEFAULT_WSDL_DIRECTORY,
        validation_alias=AliasChoices("wsdl_directory", "wsdlDirectory"),
    )
    source_dest_dir: Optional[Path] = Field(
        default=DEFAULT_DEST_DIRECTORY,
        validation_alias=AliasChoices("source_dest_dir", "sourceDestDir"),
    )
    wsdl_dependency: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("wsdl_dependency", "wsdlDependency"),
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @classmethod
    def for_project(cls, project_dir: Union[str, Path], **overrides: Any) -> "ExtractionConfig":
        """Config with the build defaults ``<project>/src/wsdl`` and ``<project>/src/xsd``.

        Overrides whose value is None are ignored.
        """
        project = Path(project_dir)
        values: Dict[str, Any] = {
            "wsdl_directory": project / DEFAULT_WSDL_DIRECTORY,
            "source_dest_dir": project / DEFAULT_DEST_DIRECTORY,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return _build(values)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "ExtractionConfig":
        """Load config from a JSON object; relative directories resolve against the file."""
        config_path = Path(path)
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Unable to read configuration {config_path}: {e}",
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {config_path} must be a JSON object.")

        config = _build(data)
        base = config_path.parent
        updates: Dict[str, Any] = {}
        if not config.wsdl_directory.is_absolute():
            updates["wsdl_directory"] = base / config.wsdl_directory
        if config.source_dest_dir is not None and not config.source_dest_dir.is_absolute():
            updates["source_dest_dir"] = base / config.source_dest_dir
        return config.model_copy(update=updates)


def _build(values: Dict[str, Any]) -> ExtractionConfig:
    try:
        return ExtractionConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
