"""Drive extraction over resolved sources and write one schema file each.

The run is fail-fast: the first failing source aborts the whole run.
Files already written for earlier sources are left in place.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

from wsdl2xsd.contracts import ExtractionResult
from wsdl2xsd.errors import ConfigurationError, OutputWriteError
from wsdl2xsd.kernel.provider import SchemaProvider, SimpleEmbeddedSchemaProvider
from wsdl2xsd.kernel.sources import WsdlSource

logger = logging.getLogger(__name__)

SCHEMA_FILE_EXTENSION = ".xsd"


def schema_filename(wsdl_name: str) -> str:
    """Derive the schema filename from a WSDL filename.

    The last extension is stripped only when its dot is past position 0,
    so ``service.v1.wsdl`` gives ``service.v1.xsd`` and ``.wsdl`` gives
    ``.wsdl.xsd``.
    """
    index = wsdl_name.rfind(".")
    if index > 0:
        wsdl_name = wsdl_name[:index]
    return wsdl_name + SCHEMA_FILE_EXTENSION


def require_destination(destination_dir: Optional[Union[str, os.PathLike]]) -> Path:
    """Return the destination as a Path, raising ConfigurationError when it is missing."""
    if destination_dir is None:
        raise ConfigurationError("Schema destination directory must be specified.")
    return Path(destination_dir)


def write_schema(destination_dir: Path, wsdl_name: str, schema: str) -> Path:
    """Write schema text as UTF-8, creating parents and overwriting silently."""
    output = (destination_dir / schema_filename(wsdl_name)).absolute()
    parent = output.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            f"Unable to create parent for: {output}",
            details={"path": str(output)},
            cause=e,
        ) from e

    logger.info("Writing schema: %s", output)
    try:
        output.write_bytes(schema.encode("utf-8"))
    except OSError as e:
        raise OutputWriteError(
            f"Unable to write schema: {output}: {e}",
            details={"path": str(output)},
            cause=e,
        ) from e
    return output


def run_extraction(
    sources: Sequence[WsdlSource],
    destination_dir: Optional[Union[str, os.PathLike]],
    provider: Optional[SchemaProvider] = None,
) -> List[ExtractionResult]:
    """Extract and write the schema of every source, in order.

    Raises:
        ConfigurationError: ``destination_dir`` is None; raised before any
            source is read.
        Wsdl2XsdError: The first failure of any source, unchanged.
    """
    destination = require_destination(destination_dir)
    provider = provider or SimpleEmbeddedSchemaProvider()

    results: List[ExtractionResult] = []
    for source in sources:
        schema = provider.get_schema(source)
        output = write_schema(destination, source.name, schema)
        results.append(ExtractionResult(
            source=source.location,
            output_path=output,
            schema_text=schema,
        ))
    return results
