"""query_json: evaluate JSONPath queries against JSON files from the command line."""

from query_json.core.query import compile_query, evaluate, normalize_matches, run_query, validate_query
from query_json.utils.json_utils import load_document

__all__ = [
    "compile_query",
    "evaluate",
    "load_document",
    "normalize_matches",
    "run_query",
    "validate_query",
]
