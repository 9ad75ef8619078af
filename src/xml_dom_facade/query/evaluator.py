"""XPath evaluation for the XML DOM facade.

The evaluator compiles query strings with lxml, caches the compiled
expressions and evaluates them against a context node. It enforces the
node-set contract: a query either yields an ordered list of nodes or fails
with ``InvalidQueryError``.
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Optional

from lxml import etree

from xml_dom_facade.shared import (
    InvalidQueryError,
    QueryConfig,
    get_logger,
)

# XPath selecting the string-value of the context node
_STRING_VALUE_QUERY = "string()"


class QueryEvaluator:
    """Compiles and evaluates XPath queries against lxml nodes.

    One evaluator is shared by every element derived from the same document.
    It holds no per-query state besides the compile cache, which is safe to
    use from several threads.
    """

    def __init__(
        self,
        config: Optional[QueryConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the evaluator.

        Args:
            config: Query settings (defaults when omitted)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or QueryConfig()
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, "query_evaluator")

        self._compile: Callable[[str], etree.XPath]
        if self.config.cache_size_limit > 0:
            self._compile = functools.lru_cache(
                maxsize=self.config.cache_size_limit
            )(self._compile_uncached)
        else:
            self._compile = self._compile_uncached

    def compile(self, query: str) -> etree.XPath:
        """Compile a query, reusing a cached expression when possible.

        Args:
            query: XPath expression

        Returns:
            Compiled lxml XPath object

        Raises:
            InvalidQueryError: If the expression is not valid XPath
        """
        return self._compile(query)

    def evaluate(self, context_node: etree._Element, query: str) -> List[Any]:
        """Evaluate a query and return the resulting node-set.

        The context node only fixes where relative paths start; absolute
        paths still address the whole document the node belongs to.

        Args:
            context_node: Node the query is evaluated against
            query: XPath expression

        Returns:
            Result items in the order lxml produced them

        Raises:
            InvalidQueryError: If the expression is invalid, fails to evaluate
                or does not select a node-set
        """
        compiled = self.compile(query)

        try:
            result = compiled(context_node)
        except etree.XPathError as e:
            self._logger.debug(
                "XPath evaluation failed",
                extra={"query": query, "error": str(e)}
            )
            raise InvalidQueryError(f"Invalid XPath expression {query!r}: {e}", query) from e

        if not isinstance(result, list):
            raise InvalidQueryError(
                f"XPath expression {query!r} does not select a node-set",
                query
            )

        if self._logger.is_enabled_for(logging.DEBUG):
            extra: Dict[str, Any] = {"query": query, "result_count": len(result)}
            cache_info = self.cache_info()
            if cache_info is not None:
                extra["cache_hits"] = cache_info.hits
                extra["cache_misses"] = cache_info.misses
            self._logger.debug("XPath evaluated", extra=extra)
        return result

    def string_value(self, context_node: etree._Element) -> str:
        """Return the XPath string-value of a node.

        This is the concatenation of all descendant text nodes in document
        order; comments and processing instructions do not contribute.
        """
        return str(self.compile(_STRING_VALUE_QUERY)(context_node))

    def cache_info(self) -> Optional[Any]:
        """Statistics of the compile cache, or None when caching is disabled."""
        info = getattr(self._compile, "cache_info", None)
        return info() if info is not None else None

    def _compile_uncached(self, query: str) -> etree.XPath:
        # lxml raises ValueError for strings that are not XML compatible
        try:
            compiled = etree.XPath(
                query,
                regexp=self.config.enable_regexp,
                smart_strings=self.config.smart_strings,
            )
        except (etree.XPathError, ValueError) as e:
            self._logger.debug(
                "XPath compilation failed",
                extra={"query": query, "error": str(e)}
            )
            raise InvalidQueryError(f"Invalid XPath expression {query!r}: {e}", query) from e

        self._logger.debug("XPath compiled", extra={"query": query})
        return compiled
