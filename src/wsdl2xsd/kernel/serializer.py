"""Serialize a schema element back into standalone XML text."""

from lxml import etree

from wsdl2xsd.errors import SerializeError


def serialize_schema(node: etree._Element) -> str:
    """Serialize ``node`` and its subtree as a standalone document.

    Namespace declarations in scope at ``node`` are copied onto the
    serialized root so the result reparses on its own. Tail text that
    belongs to the enclosing document is dropped. Serialization performs
    no I/O, so no external DTD or stylesheet can be fetched here.
    """
    try:
        data = etree.tostring(
            node,
            encoding="UTF-8",
            xml_declaration=True,
            with_tail=False,
        )
    except (etree.LxmlError, ValueError, TypeError) as e:
        raise SerializeError(f"Unable to serialize schema: {e}", cause=e) from e
    return data.decode("utf-8")
