"""The Type descriptor: one property's validation rule."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Self

from proptype.equality import Equality
from proptype.errors import ConstraintError, MissingPropertyError
from proptype.freeze import deep_freeze
from proptype.registry import TypeRegistry
from proptype.result import Failure, Result, Success

__all__ = ['MISSING', 'Type']


class _Missing:
    """Marker for an option that was not given (``None`` is a valid default)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'


MISSING: Any = _Missing()


class Type(Equality):
    """Base class for Type descriptors.

    A Type is created once per declared property and is immutable once its
    constructor returns: owned structures (``includes``, ``options``) are
    deep-frozen, and attribute assignment raises AttributeError. Subclasses
    set their own attributes before calling ``super().__init__``, which
    freezes the instance.

    Every Type class holds a ``registry`` handle. Subclasses share their
    parent's handle unless one is passed explicitly::

        class MoneyType(Type, registry=my_registry): ...

    Attributes:
        name: Property name the Type validates.
        required: Whether construction fails when the property is absent.
        includes: Optional enumeration the value must belong to.
        options: The declaration options (``required`` and, if given, ``default``).
    """

    registry: ClassVar[TypeRegistry] = TypeRegistry()
    kind: ClassVar[Any] = None

    def __init_subclass__(cls, registry: TypeRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if registry is not None:
            cls.registry = registry

    @classmethod
    def declare_kind(cls, kind: Any) -> type[Self]:
        """Register this class as the handler for ``kind`` in its registry.

        Example:
            ```python
            class DecimalType(Type): ...

            DecimalType.declare_kind(Decimal)
            Type.registry.lookup(Decimal)  # DecimalType
            ```
        """
        cls.registry.declare_default_kind(kind, cls)
        return cls

    @classmethod
    def from_kind(cls, name: str, kind: Any, **options: Any) -> Self:  # noqa: ARG003
        """Construct the Type for a property declared with ``kind``."""
        return cls(name, **options)

    def __init__(
        self,
        name: str,
        *,
        required: bool = True,
        includes: Iterable[Any] | None = None,
        default: Any = MISSING,
    ) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            msg = f'name must be an identifier, but was: {name!r}'
            raise ConstraintError(msg)

        options: dict[str, Any] = {'required': required}
        if default is not MISSING:
            options['default'] = default

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'required', required)
        object.__setattr__(self, 'includes', _freeze_includes(includes))
        object.__setattr__(self, 'options', deep_freeze(options))
        self.freeze()

    def __setattr__(self, name: str, value: Any) -> None:
        if self.frozen:
            msg = f'{type(self).__name__} is frozen; cannot set {name!r}'
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        msg = f'{type(self).__name__} is frozen; cannot delete {name!r}'
        raise AttributeError(msg)

    @property
    def frozen(self) -> bool:
        return vars(self).get('_frozen', False)

    @property
    def default(self) -> Any:
        """The default value, or None when none was given."""
        return self.options.get('default')

    @property
    def has_default(self) -> bool:
        return 'default' in self.options

    def object_state(self) -> Mapping[str, Any]:
        return {key: value for key, value in vars(self).items() if key != '_frozen'}

    def init(self, target: object, attributes: Mapping[str, Any]) -> Self:
        """Populate this property on ``target`` from ``attributes``.

        A supplied value is parsed and stored; a parse failure is raised via
        ``unwrap``. An absent value falls back to the default; without one a
        required property raises MissingPropertyError and an optional one is
        stored as None. An explicit None for an optional property is stored
        without parsing.

        Returns:
            This Type, so calls can be chained.

        Raises:
            MissingPropertyError: If the property is required and has no value.
        """
        if self.name in attributes:
            value = attributes[self.name]
            if value is None and not self.required:
                return self.set(target, None)
            return self.set(target, self.parse(value).unwrap())

        if self.has_default:
            return self.set(target, self.default)
        if self.required:
            raise MissingPropertyError(self.name)
        return self.set(target, None)

    def get(self, target: object) -> Any:
        """Read this property's field from ``target``; None if never set."""
        return vars(target).get(self.name)

    def set(self, target: object, value: Any) -> Self:
        """Write this property's field on ``target``, bypassing its read-only accessors."""
        vars(target)[self.name] = value
        return self

    def parse(self, value: Any) -> Result[Any, str]:
        """Validate ``value`` against ``includes``.

        Returns:
            Success(value) when there is no enumeration or the value is a
            member, otherwise a Failure describing the mismatch.
        """
        if self.includes is None or _is_member(value, self.includes):
            return Success(value)
        return Failure(f'must be one of {self.includes!r}, but was {value!r}')

    def add_methods(self, descendant: type) -> Self:
        """Install the accessors for this property on ``descendant``.

        Returns:
            This Type.
        """
        self._add_reader(descendant)
        return self

    def accessor_names(self) -> tuple[str, ...]:
        """Names of the attributes ``add_methods`` installs on a record class."""
        return (self.name,)

    def _add_reader(self, descendant: type) -> None:
        setattr(descendant, self.name, property(self.get, doc=f'The {self.name} property.'))

    def finalize(self) -> Self:
        """Freeze the Type (idempotent) and return it."""
        return self.freeze()

    def freeze(self) -> Self:
        object.__setattr__(self, '_frozen', True)
        return self

    def __repr__(self) -> str:
        state = ', '.join(f'{key}={value!r}' for key, value in self.object_state().items() if key != 'name')
        return f'{type(self).__name__}({self.name!r}, {state})'


def _freeze_includes(includes: Iterable[Any] | None) -> Any:
    if includes is None or isinstance(includes, range):
        return includes
    return deep_freeze(tuple(includes))


def _is_member(value: Any, includes: Any) -> bool:
    # bool is an int subclass, but True is not a member of (1, 2) nor 1 of (True, False).
    if isinstance(includes, range):
        return isinstance(value, int) and not isinstance(value, bool) and value in includes
    return any(item == value and isinstance(item, bool) is isinstance(value, bool) for item in includes)
