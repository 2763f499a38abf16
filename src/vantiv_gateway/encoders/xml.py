"""Declarative XML tree used by the request encoders.

Encoders describe a request as nested `Node` values and serialize it in
one pass. Optional fields are built with `optional()`, which returns
`None` for blank values, and `element()` drops `None` children, so a
blank value never produces an empty element.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from lxml import etree

XML_NAMESPACE = "http://www.litle.com/schema"


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings. Zero is not blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Node:
    """An XML element: tag, optional text, ordered attributes and children."""

    tag: str
    text: Optional[str] = None
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple["Node", ...] = ()


def element(
    tag: str,
    *children: Optional[Node],
    attributes: Optional[Mapping[str, Any]] = None,
) -> Node:
    """Container element. `None` children and `None` attribute values are dropped."""
    attrs = tuple(
        (name, _stringify(value))
        for name, value in (attributes or {}).items()
        if value is not None
    )
    return Node(
        tag=tag,
        attributes=attrs,
        children=tuple(child for child in children if child is not None),
    )


def text(tag: str, value: Any) -> Node:
    """Leaf element that is always emitted."""
    return Node(tag=tag, text=_stringify(value))


def optional(tag: str, value: Any) -> Optional[Node]:
    """Leaf element emitted only when `value` is not blank."""
    if is_blank(value):
        return None
    return text(tag, value)


def serialize(root: Node, namespace: str = XML_NAMESPACE) -> str:
    """Serialize `root` with every element in the default `namespace`."""
    return etree.tostring(_build(root, namespace), encoding="unicode")


def _build(node: Node, namespace: str, parent: Optional[etree._Element] = None) -> etree._Element:
    tag = f"{{{namespace}}}{node.tag}"
    if parent is None:
        xml_element = etree.Element(tag, nsmap={None: namespace})
    else:
        xml_element = etree.SubElement(parent, tag)

    for name, value in node.attributes:
        xml_element.set(name, value)
    if node.text is not None:
        xml_element.text = node.text
    for child in node.children:
        _build(child, namespace, xml_element)

    return xml_element
