"""Public API for wsdl2xsd.

High-level functions that resolve, extract and write schemas.
Callers should use these instead of importing kernel modules directly.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from wsdl2xsd.config import ExtractionConfig
from wsdl2xsd.contracts import ArtifactRecord, ExtractionResult
from wsdl2xsd.kernel.orchestrator import require_destination, run_extraction
from wsdl2xsd.kernel.provider import SchemaProvider, SimpleEmbeddedSchemaProvider
from wsdl2xsd.kernel.resolver import resolve_sources as _resolve_sources
from wsdl2xsd.kernel.sources import FilePathSource, WsdlSource


def _normalize_source(source: Union[str, os.PathLike, WsdlSource]) -> WsdlSource:
    """Normalize a path input to a FilePathSource."""
    if isinstance(source, (str, os.PathLike)):
        return FilePathSource(path=Path(source))
    return source


def extract_schema(source: Union[str, os.PathLike, WsdlSource]) -> str:
    """Return the embedded schema of one WSDL as XML text, without writing it."""
    return SimpleEmbeddedSchemaProvider().get_schema(_normalize_source(source))


def resolve_sources(
    config: ExtractionConfig,
    artifacts: Iterable[ArtifactRecord] = (),
) -> List[WsdlSource]:
    """Resolve the WSDL sources named by ``config``, in processing order."""
    return _resolve_sources(
        config.wsdl_directory,
        wsdl_files=config.wsdl_files,
        dependency=config.wsdl_dependency,
        artifacts=artifacts,
    )


def extract_schemas(
    config: ExtractionConfig,
    artifacts: Iterable[ArtifactRecord] = (),
    provider: Optional[SchemaProvider] = None,
) -> List[ExtractionResult]:
    """Resolve every configured WSDL and write its schema to the destination.

    The destination is checked before anything is resolved or read. The
    first failing WSDL aborts the run.
    """
    destination = require_destination(config.source_dest_dir)
    sources = resolve_sources(config, artifacts)
    return run_extraction(sources, destination, provider=provider)
