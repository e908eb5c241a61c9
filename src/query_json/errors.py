#!/usr/bin/env python3
"""
Error taxonomy for query_json.

Every failure the tool can hit is raised as a QueryJSONError subclass.
Each class carries the stage label printed in front of the message on
stderr, so the CLI reports all of them the same way:

    <label>: <message>

None of these are recoverable; the CLI exits with status 1 on any of them.
"""


class QueryJSONError(Exception):
    """Base class for all query_json failures."""

    label = "Error"
    exit_code = 1

    def __init__(self, message):
        self.message = str(message)
        super().__init__(self.message)

    def report_line(self) -> str:
        """Return the single stderr line for this error."""
        return f"{self.label}: {self.message}"


class UsageError(QueryJSONError):
    """Missing file argument or missing --query."""


class InvalidQueryError(QueryJSONError):
    """Query failed the structural pre-check."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"Invalid JSONPath query: {reason}")


class DocumentIOError(QueryJSONError):
    """Input file could not be opened or read."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(cause)


class FileOpenError(DocumentIOError):
    label = "Error opening file"


class FileReadError(DocumentIOError):
    label = "Error reading file"


class DocumentParseError(QueryJSONError):
    label = "Error parsing JSON"


class QuerySyntaxError(QueryJSONError):
    label = "Error parsing JSONPath"


class QueryEvaluationError(QueryJSONError):
    label = "Error evaluating JSONPath"


class OutputFormatError(QueryJSONError):
    label = "Error formatting output"


class LogFileError(QueryJSONError):
    """The --log-file path could not be opened."""

    label = "Error opening log file"

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(cause)
