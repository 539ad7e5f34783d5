"""Hardened XML parsing for WSDL documents.

The parser is namespace-aware and never touches anything outside the
input stream:

- external entities are never fetched; declaring one rejects the document
- the network is never used and no external DTD is loaded or validated against
- internal entities are expanded within libxml2's limits (huge_tree disabled)
"""

from typing import BinaryIO, Optional, Union

from lxml import etree

from wsdl2xsd.errors import ParseError
from wsdl2xsd.kernel.sources import WsdlSource


def _secure_parser(resolve_entities: Union[bool, str] = False) -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=resolve_entities,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
        huge_tree=False,
    )


def _parse_bytes(data: bytes, location: str, parser: etree.XMLParser) -> etree._ElementTree:
    try:
        return etree.fromstring(data, parser=parser).getroottree()
    except etree.XMLSyntaxError as e:
        raise ParseError(
            f"Unable to parse WSDL {location}: {e}",
            details={"location": location},
            cause=e,
        ) from e
    except (etree.LxmlError, ValueError) as e:
        raise ParseError(
            f"Unable to read WSDL {location}: {e}",
            details={"location": location},
            cause=e,
        ) from e


def _declared_entities(tree: etree._ElementTree) -> list:
    dtd = tree.docinfo.internalDTD
    if dtd is None:
        return []
    return list(dtd.iterentities())


def _reject_external_entities(entities: list, location: str) -> None:
    """Raise ParseError if any declared entity points at an external resource."""
    names = sorted(entity.name for entity in entities if entity.system_url)
    if names:
        raise ParseError(
            f"External entity declarations are not allowed in WSDL {location}: {', '.join(names)}",
            details={"location": location, "entities": names},
        )


def parse_wsdl(stream: BinaryIO, location: Optional[str] = None) -> etree._ElementTree:
    """Parse a WSDL byte stream into a namespace-aware tree.

    The document is first parsed with no entity substitution at all. If
    its internal DTD subset declares only internal entities it is parsed
    again with those expanded.

    Args:
        stream: Binary stream positioned at the start of the document.
        location: Display name of the document, used in error messages.

    Returns:
        The parsed document tree.

    Raises:
        ParseError: Malformed XML, external entity declarations, entity
            expansion past libxml2's limits, or I/O failure while reading.
            No partial document is ever returned.
    """
    location = location or "<stream>"
    try:
        data = stream.read()
    except OSError as e:
        raise ParseError(
            f"Unable to read WSDL {location}: {e}",
            details={"location": location},
            cause=e,
        ) from e

    tree = _parse_bytes(data, location, _secure_parser())
    entities = _declared_entities(tree)
    if not entities:
        return tree
    _reject_external_entities(entities, location)
    return _parse_bytes(data, location, _secure_parser(resolve_entities="internal"))


def parse_source(source: WsdlSource) -> etree._ElementTree:
    """Open a resolved source and parse it; the stream is closed on every path."""
    try:
        with source.open() as stream:
            return parse_wsdl(stream, location=source.location)
    except OSError as e:
        raise ParseError(
            f"Unable to read WSDL {source.location}: {e}",
            details={"location": source.location},
            cause=e,
        ) from e
