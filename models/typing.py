'''Typing utilities for codec and permission models'''
from typing import Iterable, TypeAlias, Union

from models.flags import Method

RoleIdentifier:     TypeAlias = bytes
OriginsArray:       TypeAlias = tuple[RoleIdentifier, ...]
PropertyCode:       TypeAlias = int
CodeLike:           TypeAlias = Union[int, bytes, str]
MethodsLike:        TypeAlias = Iterable[Union[Method, int]]
