"""XML DOM Facade.

A read-only navigation facade over parsed XML documents: parent lookup,
XPath-based search, attribute access and text extraction, each offered as an
optional accessor and as a strict one that raises when nothing is found.

Progressive API Disclosure:
- Level 1: Simple functions - root_of(), root_of_file()
- Level 2: The XmlElement facade
- Level 3: Configuration - FacadeConfig, DocumentConfig, QueryConfig
"""

__version__ = "0.1.0"
__author__ = "XML DOM Facade Team"

# Progressive API disclosure - Level 1 and Level 2
from .api import XmlElement, root_of, root_of_file

# Configuration classes for advanced usage
from .shared.config import (
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    FacadeConfig,
    QueryConfig,
)

# Error taxonomy
from .shared.errors import (
    InvalidArgumentError,
    InvalidDocumentError,
    InvalidQueryError,
    NoParentError,
    NotAnElementError,
    NotFoundError,
    XmlFacadeError,
)

# Building blocks
from .query import QueryEvaluator
from .shared.logging import get_logger
from .tree import NodeKind, classify_node

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple entry points
    "root_of",
    "root_of_file",

    # Level 2: Element facade
    "XmlElement",

    # Level 3: Configuration
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "FacadeConfig",
    "QueryConfig",

    # Errors
    "InvalidArgumentError",
    "InvalidDocumentError",
    "InvalidQueryError",
    "NoParentError",
    "NotAnElementError",
    "NotFoundError",
    "XmlFacadeError",

    # Building blocks
    "QueryEvaluator",
    "NodeKind",
    "classify_node",
    "get_logger",
]
