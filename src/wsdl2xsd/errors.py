"""Error taxonomy for wsdl2xsd.

Every failure is fatal to the current run. Errors carry a stable
``ErrorCode`` and, where one exists, the underlying cause.
"""

from typing import Any, Dict, Optional

from wsdl2xsd.codes import ErrorCode


class Wsdl2XsdError(Exception):
    """Base class for all wsdl2xsd errors."""

    code: ErrorCode = ErrorCode.CONFIGURATION_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(Wsdl2XsdError):
    """Missing or invalid configuration value."""
    code = ErrorCode.CONFIGURATION_ERROR


class ResolutionError(Wsdl2XsdError):
    """A WSDL source could not be resolved."""
    code = ErrorCode.RESOLUTION_ERROR


class ParseError(Wsdl2XsdError):
    """A WSDL document could not be read or parsed safely."""
    code = ErrorCode.PARSE_ERROR


class SchemaCountError(Wsdl2XsdError):
    """A WSDL does not contain exactly one embedded schema."""
    code = ErrorCode.SCHEMA_COUNT_ERROR


class SerializeError(Wsdl2XsdError):
    """A schema element could not be serialized."""
    code = ErrorCode.SERIALIZE_ERROR


class OutputWriteError(Wsdl2XsdError):
    """The schema file or its parent directory could not be written."""
    code = ErrorCode.OUTPUT_WRITE_ERROR
