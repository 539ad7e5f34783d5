"""wsdl2xsd: extract the embedded schema of a WSDL into a standalone XSD file."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("wsdl2xsd")
except PackageNotFoundError:
    __version__ = "dev"

from wsdl2xsd.api import extract_schema, extract_schemas, resolve_sources
from wsdl2xsd.codes import ErrorCode
from wsdl2xsd.config import ExtractionConfig
from wsdl2xsd.contracts import ArtifactRecord, ExtractionResult
from wsdl2xsd.errors import (
    ConfigurationError,
    OutputWriteError,
    ParseError,
    ResolutionError,
    SchemaCountError,
    SerializeError,
    Wsdl2XsdError,
)

__all__ = [
    "__version__",
    "extract_schema",
    "extract_schemas",
    "resolve_sources",
    "ErrorCode",
    "ExtractionConfig",
    "ArtifactRecord",
    "ExtractionResult",
    "Wsdl2XsdError",
    "ConfigurationError",
    "ResolutionError",
    "ParseError",
    "SchemaCountError",
    "SerializeError",
    "OutputWriteError",
]
