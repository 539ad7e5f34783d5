"""Locate the single embedded schema inside a parsed WSDL."""

from lxml import etree

from wsdl2xsd.errors import SchemaCountError

XML_SCHEMA_NS = "http://www.w3.org/2001/XMLSchema"
SCHEMA_LOCAL_NAME = "schema"
SCHEMA_TAG = f"{{{XML_SCHEMA_NS}}}{SCHEMA_LOCAL_NAME}"


def locate_schema(doc: etree._ElementTree) -> etree._Element:
    """Return the one XML Schema ``schema`` element found anywhere in ``doc``.

    Only a single inline schema is supported. Zero or several matches
    are an error; the first match is never picked on its own.
    """
    schemas = list(doc.iter(SCHEMA_TAG))
    if len(schemas) != 1:
        raise SchemaCountError(
            "Expected a single schema within the given wsdl.",
            details={"found": len(schemas)},
        )
    return schemas[0]
