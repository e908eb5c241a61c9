"""
Rendering utilities for query results.
Handles formatting of a normalized query result into JSON or raw text.
"""

import logging
from decimal import Decimal
from typing import Any, List

from query_json.cli.common.config import Config, config
from query_json.errors import OutputFormatError
from query_json.utils.json_utils import dump_json

logger = logging.getLogger(__name__)


def format_raw_scalar(value: Any, float_format: str = ".10g") -> str:
    """
    Format a bool, int or float for raw output.

    Floats keep up to 10 significant digits with trailing zeros trimmed
    (30.0 -> "30", 999.99 -> "999.99") and are always written out in
    positional notation (1e20 -> "100000000000000000000"). Ints print all
    their digits.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    text = format(value, float_format)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _raw_lines(items: List[Any], cfg: Config) -> List[str]:
    lines = []
    for item in items:
        if isinstance(item, str):
            lines.append(item)
        else:
            # Anything that isn't a string falls back to compact JSON
            lines.append(dump_json(item, pretty=False, sort_keys=cfg.sort_keys))
    return lines


def render_result(value: Any, pretty: bool = True, raw: bool = False, cfg: Config = config) -> str:
    """
    Render a normalized query result for stdout.

    Args:
        value: Unwrapped result (None, scalar, list or dict)
        pretty: Indent JSON output
        raw: Print strings unquoted, numbers and booleans as plain text,
             and arrays one element per line
        cfg: Output defaults

    Returns:
        Output text; every line ends with a newline. A raw empty array
        renders as the empty string.

    Raises:
        OutputFormatError: If the value cannot be encoded
    """
    if value is None:
        return "null\n"

    try:
        if raw:
            if isinstance(value, str):
                return value + "\n"
            if isinstance(value, (bool, int, float)):
                return format_raw_scalar(value, cfg.raw_float_format) + "\n"
            if isinstance(value, list):
                return "".join(line + "\n" for line in _raw_lines(value, cfg))

        text = dump_json(value, pretty=pretty, indent=cfg.indent, sort_keys=cfg.sort_keys)
    except (TypeError, ValueError) as e:
        logger.debug(f"Could not encode result of type {type(value).__name__}")
        raise OutputFormatError(e) from e

    return text + "\n"
