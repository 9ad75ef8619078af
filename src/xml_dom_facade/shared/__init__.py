"""Shared utilities for the XML DOM facade.

This module provides the error taxonomy, configuration objects and logging
helpers used across the tree, query and api layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    DocumentConfig,
    FacadeConfig,
    QueryConfig,
)
from .errors import (
    InvalidArgumentError,
    InvalidDocumentError,
    InvalidQueryError,
    NoParentError,
    NotAnElementError,
    NotFoundError,
    XmlFacadeError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "DocumentConfig",
    "FacadeConfig",
    "QueryConfig",
    "InvalidArgumentError",
    "InvalidDocumentError",
    "InvalidQueryError",
    "NoParentError",
    "NotAnElementError",
    "NotFoundError",
    "XmlFacadeError",
    "CorrelationLogger",
    "get_logger",
]
