'''Conversion between sets of methods and method bitmasks. Bit i stands for the method with value i'''
from typing import Final

from models.flags import Method
from models.typing import MethodsLike

__all__ = ('method_count', 'methods_to_bitmask', 'bitmask_to_methods', 'is_method_allowed',
           'READ_METHODS', 'WRITE_METHODS',
           'ALL_METHODS_BITMASK', 'READ_ONLY_METHODS_BITMASK', 'WRITE_METHODS_BITMASK')

READ_METHODS: Final[frozenset[Method]] = frozenset((Method.HEAD, Method.GET, Method.OPTIONS, Method.LOCATE))
WRITE_METHODS: Final[frozenset[Method]] = frozenset((Method.POST, Method.PUT, Method.PATCH, Method.DELETE, Method.DEFINE))

def method_count() -> int:
    return len(Method)

def methods_to_bitmask(methods: MethodsLike) -> int:
    mask: int = 0
    for method in methods:
        mask |= (1 << int(method))
    return mask

def bitmask_to_methods(mask: int) -> list[Method]:
    '''Methods set in `mask`, in ascending order of value. Bits beyond the last method are ignored'''
    return [method for method in sorted(Method) if mask & (1 << method)]

def is_method_allowed(mask: int, method: Method) -> bool:
    return bool(mask & (1 << method))


ALL_METHODS_BITMASK: Final[int] = methods_to_bitmask(Method)
READ_ONLY_METHODS_BITMASK: Final[int] = methods_to_bitmask(READ_METHODS)
WRITE_METHODS_BITMASK: Final[int] = methods_to_bitmask(WRITE_METHODS)
