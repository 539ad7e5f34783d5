"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from wsdl2xsd.config import ExtractionConfig
from wsdl2xsd._internal.io.artifacts import ArtifactManifest


def generate_schemas(schemas_dir=None):
    """Generate JSON schemas for the configuration and artifact manifest files."""
    schemas_dir = Path(schemas_dir) if schemas_dir else Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    # Generate extraction config schema
    config_schema = ExtractionConfig.model_json_schema()
    config_schema_path = schemas_dir / "extraction_config.schema.json"
    with open(config_schema_path, 'w', encoding='utf-8') as f:
        json.dump(config_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {config_schema_path}")

    # Generate artifact manifest schema
    manifest_schema = ArtifactManifest.model_json_schema()
    manifest_schema_path = schemas_dir / "artifact_manifest.schema.json"
    with open(manifest_schema_path, 'w', encoding='utf-8') as f:
        json.dump(manifest_schema, f, indent=2, ensure_ascii=False)
    print(f"Generated: {manifest_schema_path}")

    print("\nSchema generation complete!")
    return config_schema_path, manifest_schema_path


if __name__ == "__main__":
    generate_schemas()
