"""proptype: declarative typed properties for Python 3.13+.

Records are declared as a set of typed properties, validated on construction,
and compared structurally. Validation that should not raise goes through the
Result type.

Flat imports (preferred):
    from proptype import Record, Success, Failure, Result
    from proptype import IntRange, TypeRegistry, init

Submodule imports (for organization):
    from proptype.record import Record
    from proptype.result import Success, Failure, collect, safe
    from proptype.types import IntegerType, StringType, default_registry
"""

# Configuration
from proptype._config import Settings, UnknownKindPolicy, get_config, init

# Equality
from proptype.equality import Equality, strict_equal

# Errors
from proptype.errors import (
    ConstraintError,
    FrozenSchemaError,
    InvalidObjectError,
    MissingPropertyError,
    ProptypeError,
    UnknownAttributeError,
    UnknownKindError,
    UnwrapError,
    UnwrapFailureError,
    Violation,
)
from proptype.freeze import FrozenList, deep_freeze
from proptype.ranges import IntRange, normalize_range

# Records
from proptype.record import Record
from proptype.registry import TypeRegistry
from proptype.result import (
    Failure,
    Result,
    Success,
    collect,
    safe,
)

# Types
from proptype.types import (
    MISSING,
    BooleanType,
    IntegerType,
    ObjectType,
    StringType,
    Type,
    default_registry,
)

__all__ = [
    'MISSING',
    # Types
    'BooleanType',
    # Errors
    'ConstraintError',
    # Equality
    'Equality',
    # Result
    'Failure',
    'FrozenList',
    'FrozenSchemaError',
    # Ranges
    'IntRange',
    'IntegerType',
    'InvalidObjectError',
    'MissingPropertyError',
    'ObjectType',
    'ProptypeError',
    # Records
    'Record',
    'Result',
    # Configuration
    'Settings',
    'StringType',
    'Success',
    'Type',
    'TypeRegistry',
    'UnknownAttributeError',
    'UnknownKindError',
    'UnknownKindPolicy',
    'UnwrapError',
    'UnwrapFailureError',
    'Violation',
    'collect',
    'deep_freeze',
    'default_registry',
    'get_config',
    'init',
    'normalize_range',
    'safe',
    'strict_equal',
]
