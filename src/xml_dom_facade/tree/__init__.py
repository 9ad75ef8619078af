"""Document tree access for the XML DOM facade.

Key Components:
    NodeKind: Closed set of node kinds an XPath result item can have
    classify_node: Maps a raw lxml result item onto its NodeKind
    parse_document: Parses in-memory or streamed content into a document element
    parse_document_file: Parses a file on disk into a document element
"""

from .document import (
    SourceType,
    build_parser,
    parse_document,
    parse_document_file,
)
from .nodes import (
    NodeKind,
    classify_node,
    is_element,
)

__all__ = [
    "SourceType",
    "build_parser",
    "parse_document",
    "parse_document_file",
    "NodeKind",
    "classify_node",
    "is_element",
]
