"""Read-only element facade over a parsed XML document.

``XmlElement`` wraps a single lxml element and exposes navigation in pairs:
a ``try_*`` accessor that returns ``None`` when nothing matches, and a strict
accessor that raises instead. Absence is a value; only invalid input and
asserted-but-missing results are errors.
"""

from pathlib import Path
from typing import Any, List, Optional, Set, Union

from xml_dom_facade.query import QueryEvaluator
from xml_dom_facade.shared import (
    FacadeConfig,
    InvalidArgumentError,
    InvalidQueryError,
    NoParentError,
    NotAnElementError,
    NotFoundError,
    get_logger,
)
from xml_dom_facade.tree import (
    NodeKind,
    SourceType,
    classify_node,
    is_element,
    parse_document,
    parse_document_file,
)

PARENT_QUERY = "parent::node()"


class XmlElement:
    """Facade for work with elements of an XML document.

    Instances are immutable and never modify the document. Every navigation
    method returns new instances; two instances compare equal when they wrap
    the same node.

    Examples:
        >>> root = XmlElement.root_of(b'<a><b id="1">x</b><b id="2"/></a>')
        >>> [b.attr("id") for b in root.find_all("b")]
        ['1', '2']
        >>> root.find("b").text()
        'x'
        >>> root.try_get_parent() is None
        True
    """

    __slots__ = ("_node", "_evaluator")

    def __init__(self, node: Any, evaluator: QueryEvaluator) -> None:
        """Wrap an element node. Internal: use ``root_of`` or navigation.

        Raises:
            NotAnElementError: If the node is not an element
        """
        kind = classify_node(node)
        if kind is not NodeKind.ELEMENT:
            get_logger(__name__, evaluator.correlation_id, "xml_element").error(
                "Attempted to wrap a non-element node",
                extra={"node_kind": kind.name},
                exc_info=False
            )
            raise NotAnElementError(f"Node is not an element: {kind.name}")

        self._node = node
        self._evaluator = evaluator

    @classmethod
    def _wrap(cls, node: Any, evaluator: QueryEvaluator) -> Optional["XmlElement"]:
        """Wrap the node if it is an element, otherwise return None."""
        if not is_element(node):
            return None
        return cls(node, evaluator)

    @classmethod
    def root_of(
        cls,
        source: SourceType,
        config: Optional[FacadeConfig] = None,
        correlation_id: Optional[str] = None
    ) -> "XmlElement":
        """Get the root element of a document.

        Args:
            source: XML content as bytes, string or readable file-like object
            config: Facade configuration (secure defaults when omitted)
            correlation_id: Optional correlation ID for request tracking

        Returns:
            The root element

        Raises:
            InvalidDocumentError: If the XML document is empty or invalid
        """
        config = config or FacadeConfig()
        root = parse_document(source, config.document, correlation_id)
        return cls(root, QueryEvaluator(config.query, correlation_id))

    @classmethod
    def root_of_file(
        cls,
        file_path: Union[str, Path],
        config: Optional[FacadeConfig] = None,
        correlation_id: Optional[str] = None
    ) -> "XmlElement":
        """Get the root element of a document stored in a file.

        Raises:
            InvalidDocumentError: If the file cannot be read or is not valid XML
        """
        config = config or FacadeConfig()
        root = parse_document_file(file_path, config.document, correlation_id)
        return cls(root, QueryEvaluator(config.query, correlation_id))

    @property
    def tag(self) -> str:
        """Tag name of this element."""
        return self._node.tag

    def try_get_parent(self) -> Optional["XmlElement"]:
        """Try get the parent of this element.

        Returns:
            The parent element, or None for the root element
        """
        return self.try_find(PARENT_QUERY)

    def get_parent(self) -> "XmlElement":
        """Get the parent of this element.

        Raises:
            NoParentError: If this element has no parent (it is the root element)
        """
        parent = self.try_get_parent()
        if parent is None:
            raise NoParentError(f"Element <{self.tag}> has no parent element")
        return parent

    def parent(self) -> "XmlElement":
        """Short form of ``get_parent()``."""
        return self.get_parent()

    def find_all(self, query: str) -> List["XmlElement"]:
        """Find all matching elements inside this element.

        Attribute, text and other non-element results of the query are
        skipped. The order is the order of the evaluator's node-set.

        Args:
            query: XPath expression, evaluated with this element as context

        Returns:
            The list of elements, empty when nothing matches

        Raises:
            InvalidQueryError: If the XPath expression is empty or invalid
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError("XPath expression is None or empty.", query)

        nodes = self._evaluator.evaluate(self._node, query)
        wrapped = (self._wrap(node, self._evaluator) for node in nodes)
        return [element for element in wrapped if element is not None]

    def try_find(self, query: str) -> Optional["XmlElement"]:
        """Try find the first matching element inside this element.

        Raises:
            InvalidQueryError: If the XPath expression is empty or invalid
        """
        elements = self.find_all(query)
        return elements[0] if elements else None

    def find(self, query: str) -> "XmlElement":
        """Find the first matching element inside this element.

        Raises:
            InvalidQueryError: If the XPath expression is empty or invalid
            NotFoundError: If no element matches
        """
        element = self.try_find(query)
        if element is None:
            raise NotFoundError(f"No element matches {query!r}")
        return element

    def text(self) -> str:
        """Get the text content of this element and all elements inside it."""
        return self._evaluator.string_value(self._node)

    def try_get_attribute(self, name: str) -> Optional[str]:
        """Try get the value of an attribute by its name.

        Raises:
            InvalidArgumentError: If the name is None or empty
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Name of attribute is None or empty.", name)

        try:
            return self._node.get(name)
        except ValueError as e:
            # lxml rejects malformed Clark notation such as "{uri"
            raise InvalidArgumentError(f"Invalid attribute name {name!r}: {e}", name) from e

    def get_attribute(self, name: str) -> str:
        """Get the value of an attribute by its name.

        Raises:
            InvalidArgumentError: If the name is None or empty
            NotFoundError: If the attribute is not present
        """
        value = self.try_get_attribute(name)
        if value is None:
            raise NotFoundError(f"Element <{self.tag}> has no attribute {name!r}")
        return value

    def attr(self, name: str) -> str:
        """Short form of ``get_attribute()``."""
        return self.get_attribute(name)

    def get_attributes(self) -> Set[str]:
        """Get the names of all attributes as an unordered set."""
        return set(self._node.attrib.keys())

    def attrs(self) -> Set[str]:
        """Short form of ``get_attributes()``."""
        return self.get_attributes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlElement):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(self._node)

    def __repr__(self) -> str:
        return f"<XmlElement {self.tag!r}>"


def root_of(
    source: SourceType,
    config: Optional[FacadeConfig] = None,
    correlation_id: Optional[str] = None
) -> XmlElement:
    """Get the root element of a document.

    Examples:
        >>> root_of(b'<newsletters/>').tag
        'newsletters'
    """
    return XmlElement.root_of(source, config, correlation_id)


def root_of_file(
    file_path: Union[str, Path],
    config: Optional[FacadeConfig] = None,
    correlation_id: Optional[str] = None
) -> XmlElement:
    """Get the root element of a document stored in a file."""
    return XmlElement.root_of_file(file_path, config, correlation_id)
