from typing import Any, NamedTuple


class Violation(NamedTuple):
    """A single constraint failure on a candidate record."""

    path: str  # dotted wire path, "" for the record itself
    kind: str  # e.g. missing, string_too_long, literal_error, datetime_format
    value: Any  # offending value (None when the field is missing)
    message: str = ""

    def describe(self) -> str:
        return f"{self.path or '<root>'}: {self.message or self.kind}"


class ValidationError(ValueError):
    """Raised when a record does not conform to its schema.

    Every violation found on the candidate is carried in ``violations``.
    """

    def __init__(self, schema: str, violations: list[Violation]):
        self.schema = schema
        self.violations = list(violations)
        super().__init__(f"{schema}: {format_violations(self.violations)}")

    def paths(self) -> list[str]:
        return [v.path for v in self.violations]

    def kinds_for(self, path: str) -> list[str]:
        return [v.kind for v in self.violations if v.path == path]


def format_violations(violations: list[Violation]) -> str:
    """Render violations as ``path: message; path: message``."""
    return "; ".join(v.describe() for v in violations)
