"""Document parsing for the XML DOM facade.

This module turns raw input (bytes, text, file-like objects or files on disk)
into an lxml document element. Parsing is strict by default: anything the
parser rejects surfaces as ``InvalidDocumentError`` with the parser's own
error chained, never reinterpreted.
"""

import time
from pathlib import Path
from typing import IO, Any, Optional, Union

from lxml import etree

from xml_dom_facade.shared import (
    CorrelationLogger,
    DocumentConfig,
    InvalidDocumentError,
    get_logger,
)

# Type definitions for input data
SourceType = Union[bytes, bytearray, memoryview, str, IO[Any]]

MS_PER_SECOND = 1000


def build_parser(config: Optional[DocumentConfig] = None) -> etree.XMLParser:
    """Create an lxml parser from a document configuration.

    Args:
        config: Parser settings (secure defaults when omitted)

    Returns:
        Configured lxml XMLParser
    """
    config = config or DocumentConfig()
    return etree.XMLParser(**config.parser_options())


def parse_document(
    source: SourceType,
    config: Optional[DocumentConfig] = None,
    correlation_id: Optional[str] = None
) -> etree._Element:
    """Parse XML content and return its document element.

    File-like sources are read to the end before parsing, so the caller may
    close them as soon as this function returns.

    Args:
        source: XML content as bytes, string or readable file-like object
        config: Parser settings (secure defaults when omitted)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The document element of the parsed tree

    Raises:
        InvalidDocumentError: If the content is empty, too large or malformed
        TypeError: If the source is of an unsupported type

    Examples:
        >>> parse_document(b'<root><item/></root>').tag
        'root'
    """
    config = config or DocumentConfig()
    logger = get_logger(__name__, correlation_id, "parse_document")

    if hasattr(source, "read"):
        logger.debug(
            "Reading file-like source",
            extra={"source_type": type(source).__name__}
        )
        # Closed streams raise ValueError rather than OSError
        try:
            source = source.read()
        except (OSError, ValueError) as e:
            logger.warning("Failed to read XML source", extra={"error": str(e)})
            raise InvalidDocumentError(f"Unable to read XML source: {e}") from e

    if isinstance(source, (bytearray, memoryview)):
        source = bytes(source)
    if not isinstance(source, (bytes, str)):
        raise TypeError(
            f"Unsupported XML source type: {type(source).__name__}"
        )

    return _parse_content(source, config, logger)


def parse_document_file(
    file_path: Union[str, Path],
    config: Optional[DocumentConfig] = None,
    correlation_id: Optional[str] = None
) -> etree._Element:
    """Parse an XML file and return its document element.

    The file is read in binary mode so the parser can honour the encoding
    declared in the document itself.

    Args:
        file_path: Path to XML file (string or Path object)
        config: Parser settings (secure defaults when omitted)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The document element of the parsed tree

    Raises:
        InvalidDocumentError: If the file cannot be read or is not valid XML
    """
    path_obj = Path(file_path)
    logger = get_logger(__name__, correlation_id, "parse_document_file")

    logger.debug("Reading XML file", extra={"file_path": str(path_obj)})

    try:
        with path_obj.open("rb") as file:
            content = file.read()
    except OSError as e:
        logger.warning(
            "Failed to read XML file",
            extra={"file_path": str(path_obj), "error": str(e)}
        )
        raise InvalidDocumentError(f"Unable to read XML file {path_obj}: {e}") from e

    return _parse_content(content, config or DocumentConfig(), logger)


def _parse_content(
    content: Union[bytes, str],
    config: DocumentConfig,
    logger: CorrelationLogger
) -> etree._Element:
    """Run the lxml parser over in-memory content."""
    start_time = time.time()

    if not content or not content.strip():
        logger.warning("Rejected empty XML document")
        raise InvalidDocumentError("XML document is empty")

    try:
        size = len(content.encode("utf-8") if isinstance(content, str) else content)
    except UnicodeEncodeError as e:
        logger.warning("Rejected unencodable XML text", extra={"error": str(e)})
        raise InvalidDocumentError(f"Invalid XML document: {e}") from e

    limit = config.max_input_size_bytes
    if limit is not None and size > limit:
        logger.warning(
            "Rejected oversized XML document",
            extra={"input_size_bytes": size, "max_input_size_bytes": limit}
        )
        raise InvalidDocumentError(
            f"XML document is {size} bytes, exceeding the limit of {limit} bytes"
        )

    try:
        root = etree.fromstring(content, build_parser(config))
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning(
            "Rejected malformed XML document",
            extra={"error": str(e), "input_size_bytes": size}
        )
        raise InvalidDocumentError(f"Invalid XML document: {e}") from e

    # A recovering parser may give up without producing any element
    if root is None:
        logger.warning("Parsed XML document has no document element")
        raise InvalidDocumentError("XML document has no document element")

    processing_time = (time.time() - start_time) * MS_PER_SECOND
    logger.info(
        "Parsed XML document",
        extra={
            "root_tag": root.tag,
            "input_size_bytes": size,
            "processing_time_ms": processing_time
        }
    )
    return root
