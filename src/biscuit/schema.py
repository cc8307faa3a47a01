"""The validation contract consumed by :mod:`biscuit.typed`.

Any object with a synchronous ``validate(value) -> SchemaResult`` method is
a schema. Biscuit never looks further inside it, so any validation library
can be wired in with a small adapter::

    class PydanticSchema:
        def __init__(self, model):
            self.adapter = TypeAdapter(model)

        def validate(self, value):
            try:
                return SchemaResult.ok(self.adapter.validate_python(value))
            except ValidationError as exc:
                return SchemaResult.fail(
                    *(SchemaIssue(e["msg"], tuple(e["loc"])) for e in exc.errors())
                )

Two adapters ship here: ``validator_schema`` for plain rule callables and
``type_schema`` for isinstance checks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

# A rule returns an error message, or None when the value is fine
Rule: TypeAlias = Callable[[Any], str | None]


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    """A single problem found while validating a value."""

    message: str
    path: tuple[str | int, ...] = ()

    def __str__(self) -> str:
        if self.path:
            location = ".".join(str(part) for part in self.path)
            return f"{location}: {self.message}"
        return self.message


@dataclass(frozen=True, slots=True)
class SchemaResult:
    """The outcome of ``Schema.validate``: a value, or a list of issues.

    Falsy when there are issues, so you can write::

        result = schema.validate(data)
        if not result:
            log(result.issues)
    """

    value: Any = None
    issues: tuple[SchemaIssue, ...] = ()

    @classmethod
    def ok(cls, value: Any) -> SchemaResult:
        return cls(value=value)

    @classmethod
    def fail(cls, *issues: SchemaIssue | str) -> SchemaResult:
        return cls(
            issues=tuple(
                issue if isinstance(issue, SchemaIssue) else SchemaIssue(issue) for issue in issues
            ),
        )

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def __bool__(self) -> bool:
        return self.is_valid


@runtime_checkable
class Schema(Protocol):
    """Anything that can synchronously validate a decoded cookie value."""

    def validate(self, value: Any, /) -> SchemaResult: ...


@dataclass(frozen=True, slots=True)
class _RuleSchema:
    rules: tuple[Rule, ...]

    def validate(self, value: Any, /) -> SchemaResult:
        messages = [message for rule in self.rules if (message := rule(value)) is not None]
        if messages:
            return SchemaResult.fail(*messages)
        return SchemaResult.ok(value)


def validator_schema(*rules: Rule) -> Schema:
    """Build a schema from rule callables.

    Every rule runs; each message it returns becomes an issue. The
    validated value is the input, unchanged::

        def positive(value):
            if not isinstance(value, int) or value <= 0:
                return "Must be a positive integer"
            return None

        schema = validator_schema(positive)
    """
    return _RuleSchema(rules)


@dataclass(frozen=True, slots=True)
class _TypeSchema:
    types: tuple[type, ...]

    def validate(self, value: Any, /) -> SchemaResult:
        # bool is an int subclass; only accept it when asked for
        if isinstance(value, bool) and bool not in self.types:
            return SchemaResult.fail(self._message(value))
        if isinstance(value, self.types):
            return SchemaResult.ok(value)
        return SchemaResult.fail(self._message(value))

    def _message(self, value: Any) -> str:
        expected = " or ".join(t.__name__ for t in self.types)
        return f"Expected {expected}, got {type(value).__name__}"


def type_schema(*types: type) -> Schema:
    """Build a schema that accepts instances of *types*.

    ``type(None)`` admits JSON ``null``.
    """
    if not types:
        msg = "type_schema() needs at least one type"
        raise TypeError(msg)
    return _TypeSchema(types)
