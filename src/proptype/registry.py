"""Registry mapping native value kinds to the Type classes that validate them."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from proptype._config import UnknownKindPolicy, get_config
from proptype._logging import get_logger
from proptype.errors import UnknownKindError

if TYPE_CHECKING:
    from proptype.types.base import Type

__all__ = ['TypeRegistry']

log = get_logger(__name__)


class TypeRegistry:
    """An explicit kind -> Type class mapping.

    Lookups try the exact kind first, then walk the kind's MRO (stopping short
    of ``object``), so a ``class Email(str)`` kind resolves to whatever handles
    ``str``. A kind that resolves to nothing is handled by ``policy``: with
    ``FALLBACK`` it resolves to the Type registered for ``object``; with
    ``RAISE`` it raises UnknownKindError.

    Type classes hold a handle to one registry and share it with all of their
    subclasses, so registering through any of them is visible to every other.

    Attributes:
        policy: The unknown-kind policy, or None to follow ``get_config()``.

    Example:
        ```python
        registry = TypeRegistry()
        registry.register(Decimal, DecimalType)
        registry.lookup(Decimal)  # DecimalType
        ```
    """

    def __init__(self, policy: UnknownKindPolicy | None = None) -> None:
        self.policy = policy
        self._types: dict[Any, type[Type]] = {}

    def register(self, kind: Any, type_class: type[Type]) -> type[Type]:
        """Map ``kind`` to ``type_class``, replacing any previous mapping.

        Returns:
            The registered type class.
        """
        self._types[kind] = type_class
        log.debug('registry.registered', kind=_name(kind), type_class=type_class.__qualname__)
        return type_class

    def unregister(self, kind: Any) -> None:
        """Remove the mapping for ``kind`` if there is one."""
        self._types.pop(kind, None)

    def declare_default_kind(self, kind: Any, type_class: type[Type]) -> type[Type]:
        """Register ``type_class`` for ``kind`` and record ``kind`` as the kind it handles."""
        type_class.kind = kind
        return self.register(kind, type_class)

    def lookup(self, kind: Any) -> type[Type]:
        """Return the Type class for ``kind``.

        Raises:
            UnknownKindError: If nothing matches and the policy does not allow a
                fallback, or no Type is registered for ``object``.
        """
        type_class = self._find(kind)
        if type_class is not None:
            return type_class

        if self._resolved_policy() is UnknownKindPolicy.FALLBACK and object in self._types:
            return self._types[object]

        raise UnknownKindError(kind)

    def _find(self, kind: Any) -> type[Type] | None:
        if kind in self._types:
            return self._types[kind]

        for base in getattr(kind, '__mro__', ())[1:-1]:
            if base in self._types:
                return self._types[base]

        return None

    def _resolved_policy(self) -> UnknownKindPolicy:
        return self.policy if self.policy is not None else get_config().unknown_kind

    def __contains__(self, kind: Any) -> bool:
        return kind in self._types

    def __repr__(self) -> str:
        return f'<TypeRegistry with {len(self._types)} kinds>'


def _name(kind: Any) -> str:
    return getattr(kind, '__qualname__', None) or repr(kind)
