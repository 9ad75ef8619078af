"""Node kind classification for lxml query results.

lxml hands back heterogeneous objects from XPath evaluation: element proxies
(of which comments, processing instructions and entity references are
subclasses), smart strings for attribute values and text nodes, tuples for
namespace nodes and plain scalars for non node-set expressions.
``classify_node`` maps each of them onto the closed ``NodeKind`` variant once,
so the rest of the package can filter on the tag alone.
"""

from enum import Enum, auto
from typing import Any

from lxml import etree


class NodeKind(Enum):
    """Kinds of nodes an XPath evaluation can produce."""

    ELEMENT = auto()                 # Markup tag
    ATTRIBUTE = auto()               # Attribute value
    TEXT = auto()                    # Text or tail text, including CDATA
    COMMENT = auto()                 # <!-- ... -->
    PROCESSING_INSTRUCTION = auto()  # <?target data?>
    ENTITY = auto()                  # Unresolved entity reference
    NAMESPACE = auto()               # (prefix, uri) from the namespace axis
    DOCUMENT = auto()                # Document node / element tree
    VALUE = auto()                   # Number, boolean or free-standing string


# Special tag factories lxml uses to mark non-element subclasses of _Element
_SPECIAL_TAGS = {
    etree.Comment: NodeKind.COMMENT,
    etree.ProcessingInstruction: NodeKind.PROCESSING_INSTRUCTION,
    etree.Entity: NodeKind.ENTITY,
}


def classify_node(item: Any) -> NodeKind:
    """Determine the node kind of a single XPath result item.

    Args:
        item: One entry of an lxml XPath result

    Returns:
        The NodeKind of the item

    Examples:
        >>> root = etree.fromstring('<a x="1">t<!--c--></a>')
        >>> classify_node(root)
        <NodeKind.ELEMENT: 1>
        >>> classify_node(root.xpath('@x')[0])
        <NodeKind.ATTRIBUTE: 2>
        >>> classify_node(root.xpath('comment()')[0])
        <NodeKind.COMMENT: 4>
    """
    if etree.iselement(item):
        return _SPECIAL_TAGS.get(item.tag, NodeKind.ELEMENT)
    if isinstance(item, etree._ElementTree):
        return NodeKind.DOCUMENT
    if getattr(item, "is_attribute", False):
        return NodeKind.ATTRIBUTE
    if getattr(item, "is_text", False) or getattr(item, "is_tail", False):
        return NodeKind.TEXT
    if isinstance(item, tuple) and len(item) == 2:
        return NodeKind.NAMESPACE
    return NodeKind.VALUE


def is_element(item: Any) -> bool:
    """Check whether an XPath result item is an element node."""
    return classify_node(item) is NodeKind.ELEMENT
