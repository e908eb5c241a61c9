#!/usr/bin/env python3
"""
JSON Utilities for query_json

Centralized JSON handling for the tool:

1. Loading and decoding the input document (load_document)
2. Encoding values back to text in pretty or compact form (dump_json)

Both sides use the standard json module; strictness rules live here so the
loader and the renderer agree on what counts as JSON.
"""

import json
import logging
from typing import Any

from query_json.errors import DocumentParseError, FileOpenError, FileReadError

logger = logging.getLogger(__name__)


def _reject_constant(name):
    # json accepts NaN/Infinity by default; they are not JSON
    raise ValueError(f"invalid literal {name!r}")


def decode_document(data) -> Any:
    """
    Decode JSON text (str or bytes) into a document.

    Raises:
        DocumentParseError: If the data is not valid JSON
    """
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DocumentParseError(e) from e
    except ValueError as e:
        # UnicodeDecodeError and rejected constants
        raise DocumentParseError(e) from e


def load_document(path: str) -> Any:
    """
    Read a whole JSON file into memory and decode it.

    Args:
        path: Path to the JSON file

    Returns:
        The decoded document

    Raises:
        FileOpenError: If the file cannot be opened
        FileReadError: If the file cannot be read
        DocumentParseError: If the content is not valid JSON
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileOpenError(path, e) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise FileReadError(path, e) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return decode_document(data)


def dump_json(value: Any, pretty: bool = True, indent: int = 2, sort_keys: bool = True) -> str:
    """
    Encode a value as JSON text without a trailing newline.

    Args:
        value: Document value to encode
        pretty: Indent nested structures when True, compact separators otherwise
        indent: Spaces per nesting level in pretty mode
        sort_keys: Emit object keys in lexicographic order

    Returns:
        JSON text
    """
    if pretty:
        return json.dumps(value, indent=indent, sort_keys=sort_keys,
                          ensure_ascii=False, allow_nan=False)
    return json.dumps(value, separators=(",", ":"), sort_keys=sort_keys,
                      ensure_ascii=False, allow_nan=False)
