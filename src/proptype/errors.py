"""Error types: exceptions for raise-based code plus struct variants for Result payloads."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

import msgspec

__all__ = [
    'ConstraintError',
    'FrozenSchemaError',
    'InvalidObjectError',
    'MissingPropertyError',
    'ProptypeError',
    'UnknownAttributeError',
    'UnknownKindError',
    'UnwrapError',
    'UnwrapFailureError',
    'Violation',
]


class ProptypeError(Exception):
    """Base class for every error raised by proptype."""


# --- Configuration errors ---


class ConstraintError(ProptypeError, ValueError):
    """A Type was declared with a constraint that can never be satisfied."""


class UnknownKindError(ProptypeError, TypeError):
    """No Type class is registered for a native kind."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f'type class for {_kind_name(kind)} is unknown')


# --- Schema errors ---


class UnknownAttributeError(ProptypeError, TypeError):
    """A record was constructed with attributes it does not declare."""

    def __init__(self, unknown: Iterable[str]) -> None:
        self.unknown = tuple(sorted(unknown))
        super().__init__(f'Unknown attributes: {", ".join(self.unknown)}')


class MissingPropertyError(ProptypeError, TypeError):
    """A required property was neither supplied nor defaulted."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Missing required property: {name}')


class FrozenSchemaError(ProptypeError, TypeError):
    """A property was declared on a schema that has already been finalized."""

    def __init__(self, schema: str, name: str) -> None:
        self.schema = schema
        self.name = name
        super().__init__(f'Cannot add property {name!r} to finalized schema {schema}')


# --- Result misuse ---


class UnwrapError(ProptypeError, ValueError):
    """A Failure holding a non-exception error was unwrapped."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(str(error))


class UnwrapFailureError(ProptypeError, RuntimeError):
    """The failure payload of a Success was requested."""

    def __init__(self) -> None:
        super().__init__('Cannot unwrap failure from success')


# --- Validation errors ---


class Violation(msgspec.Struct, frozen=True, gc=False):
    """One validation problem on one property - struct variant for Result payloads."""

    property: str
    message: str

    def to_exception(self, schema: str, input: Mapping[str, Any] | None = None) -> InvalidObjectError:  # noqa: A002
        """Convert to exception for raise-based code."""
        return InvalidObjectError(schema, input or {}, {self.property: (self.message,)})


class InvalidObjectError(ProptypeError, ValueError):
    """A record could not be built from its input.

    Attributes:
        schema: Name of the record class that rejected the input.
        input: The attributes that were supplied.
        errors: Property name mapped to the messages collected for it.
    """

    def __init__(
        self,
        schema: str,
        input: Mapping[str, Any],  # noqa: A002
        errors: Mapping[str, Iterable[str]],
    ) -> None:
        self.schema = schema
        self.input = MappingProxyType(dict(input))
        self.errors = MappingProxyType({name: tuple(messages) for name, messages in errors.items()})
        super().__init__(schema, self.input, self.errors)

    def __str__(self) -> str:
        return f'Invalid {self.schema} with input: {dict(self.input)!r} and errors: {dict(self.errors)!r}'

    def __getitem__(self, name: str) -> tuple[str, ...]:
        """Return the messages collected for one property."""
        return self.errors[name]

    def violations(self) -> Iterator[Violation]:
        """Yield every collected message as a Violation struct."""
        for name, messages in self.errors.items():
            for message in messages:
                yield Violation(name, message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.schema, dict(self.input), dict(self.errors)))


def _kind_name(kind: Any) -> str:
    return getattr(kind, '__qualname__', None) or repr(kind)
