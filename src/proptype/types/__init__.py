"""Type descriptors and the built-in kind registry.

Importing this package registers the built-in kinds on ``default_registry``:

* ``object`` -> ObjectType (also the fallback for unregistered kinds)
* ``bool``   -> BooleanType
* ``int``    -> IntegerType
* ``str``    -> StringType
"""

from proptype.types.base import MISSING, Type
from proptype.types.object import ObjectType
from proptype.types.boolean import BooleanType
from proptype.types.integer import IntegerType
from proptype.types.string import StringType

default_registry = Type.registry

__all__ = [
    'MISSING',
    'BooleanType',
    'IntegerType',
    'ObjectType',
    'StringType',
    'Type',
    'default_registry',
]
