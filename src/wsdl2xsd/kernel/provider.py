"""Schema providers: turn one WSDL source into schema text."""

import logging
from typing import Protocol

from wsdl2xsd.errors import SchemaCountError, SerializeError
from wsdl2xsd.kernel.schema_locator import locate_schema
from wsdl2xsd.kernel.serializer import serialize_schema
from wsdl2xsd.kernel.sources import WsdlSource
from wsdl2xsd.kernel.xml_parser import parse_source

logger = logging.getLogger(__name__)


class SchemaProvider(Protocol):
    """Anything that can produce the schema text for a WSDL source."""

    def get_schema(self, source: WsdlSource) -> str:
        ...


class SimpleEmbeddedSchemaProvider:
    """Provider for WSDLs carrying exactly one inline schema.

    Assumes the WSDL embeds its schema inline and embeds only one.
    Imported or included schemas are not followed.
    """

    def get_schema(self, source: WsdlSource) -> str:
        logger.info("Reading WSDL: %s", source.location)
        document = parse_source(source)
        try:
            return serialize_schema(locate_schema(document))
        except (SchemaCountError, SerializeError) as e:
            details = dict(e.details)
            details["location"] = source.location
            raise type(e)(
                f"{e.message} WSDL: {source.location}",
                details=details,
                cause=e.cause,
            ) from e
