"""Exception hierarchy for the XML DOM facade.

Every failure raised by the facade derives from ``XmlFacadeError``. Each class
also subclasses the closest built-in exception so callers that only know the
standard library (``ValueError``, ``LookupError``, ``TypeError``) keep working.
"""

from typing import Optional


class XmlFacadeError(Exception):
    """Base exception for all facade errors."""


class InvalidDocumentError(XmlFacadeError, ValueError):
    """Raised when the input cannot be parsed into an XML document."""


class InvalidQueryError(XmlFacadeError, ValueError):
    """Raised when an XPath expression is empty, malformed or unusable."""

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query


class InvalidArgumentError(XmlFacadeError, ValueError):
    """Raised when an accessor argument is empty or of the wrong form."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument


class NotFoundError(XmlFacadeError, LookupError):
    """Raised by the strict accessors when nothing matches."""


class NoParentError(NotFoundError):
    """Raised when an element has no parent element (it is the root)."""


class NotAnElementError(XmlFacadeError, TypeError):
    """Raised when a non-element node reaches the element constructor.

    The public API only ever wraps nodes that were classified as elements, so
    seeing this exception means the facade itself is broken.
    """
