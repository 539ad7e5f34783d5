"""Error code constants for wsdl2xsd errors.

These constants prevent stringly-typed error codes and let callers
branch on the failure kind without matching on messages.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by every Wsdl2XsdError."""

    # Configuration
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Source resolution
    RESOLUTION_ERROR = "RESOLUTION_ERROR"

    # Extraction
    PARSE_ERROR = "PARSE_ERROR"
    SCHEMA_COUNT_ERROR = "SCHEMA_COUNT_ERROR"
    SERIALIZE_ERROR = "SERIALIZE_ERROR"

    # Output
    OUTPUT_WRITE_ERROR = "OUTPUT_WRITE_ERROR"
