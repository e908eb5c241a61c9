#!/usr/bin/env python3
"""
JSONPath query handling

This module sits between the CLI and the python-jsonpath library:

1. A cheap structural pre-check of the query string (validate_query)
2. Compilation of the query (compile_query)
3. Evaluation against a decoded document (evaluate)
4. Normalization of the match list into the value that gets printed
   (normalize_matches)

Grammar and matching semantics (filters with &&, || and =~, wildcards,
recursive descent, slices, negative indices) belong to python-jsonpath;
nothing here inspects them.
"""

import logging
from typing import Any, List

import jsonpath

from query_json.errors import InvalidQueryError, QueryEvaluationError, QuerySyntaxError

logger = logging.getLogger(__name__)

ROOT_MARKER = "$"


def _first_line(error: Exception) -> str:
    # Newer python-jsonpath releases append a multi-line context diagram
    lines = str(error).splitlines()
    return lines[0] if lines else type(error).__name__


def validate_query(query: str) -> None:
    """
    Reject queries that can never be valid JSONPath.

    Only checks that the query is non-empty and starts at the root; the
    evaluator does the real syntax checking.

    Raises:
        InvalidQueryError: If the query is empty or does not start with '$'
    """
    if not query:
        raise InvalidQueryError("empty JSONPath")
    if not query.startswith(ROOT_MARKER):
        raise InvalidQueryError(f"JSONPath must start with '{ROOT_MARKER}'")


def compile_query(query: str) -> jsonpath.JSONPath:
    """
    Parse a query string into a python-jsonpath expression.

    Args:
        query: JSONPath expression, e.g. "$.users[?(@.age > 25 && @.active == true)].name"

    Returns:
        Compiled JSONPath expression

    Raises:
        QuerySyntaxError: If the lexer or parser rejects the expression
    """
    try:
        expr = jsonpath.compile(query)
    except jsonpath.JSONPathError as e:
        raise QuerySyntaxError(_first_line(e)) from e
    logger.debug(f"Compiled {query!r} to {expr!r}")
    return expr


def evaluate(expr: jsonpath.JSONPath, document: Any) -> List[Any]:
    """
    Return every value in document matched by expr, in evaluator order.

    Raises:
        QueryEvaluationError: If the evaluator fails on this document
    """
    try:
        if isinstance(document, str):
            # findall() would decode a str argument as JSON text. No selector
            # descends into a string, so only matches of the root itself can
            # occur; find those against an empty container instead.
            values = [document for _ in expr.findall(())]
        else:
            values = expr.findall(document)
    except jsonpath.JSONPathError as e:
        raise QueryEvaluationError(_first_line(e)) from e
    except (TypeError, ValueError, AttributeError) as e:
        raise QueryEvaluationError(e) from e
    logger.debug(f"Query matched {len(values)} value(s)")
    return list(values)


def normalize_matches(matches: List[Any]) -> Any:
    """
    Turn the evaluator's match list into the value to print.

    No match becomes None (printed as null), a single match is unwrapped,
    and several matches stay a list.
    """
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return list(matches)


def run_query(query: str, document: Any) -> Any:
    """Compile, evaluate and normalize query against document."""
    return normalize_matches(evaluate(compile_query(query), document))
