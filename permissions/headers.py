'''Header presets and the custom header builder.

Presets are built once at import. `create_custom_header` accepts loosely typed
options (snake_case or the camelCase keys used by collaborator payloads) and
normalises anything it can't use instead of raising.
'''
import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Final, Iterable, Mapping, Optional, TypeVar

from models.errors import InvalidRoleIdentifier
from models.flags import CachePreset, CORSPreset, Method
from models.header_model import UINT16_MAX, CacheControl, CORSPolicy, HeaderInfo, Redirect
from models.roles import BLACKLIST_ROLE, PUBLIC_ROLE, ROLE_WIDTH, role_from_hex
from models.typing import OriginsArray, RoleIdentifier
from permissions.methods import ALL_METHODS_BITMASK, READ_METHODS, READ_ONLY_METHODS_BITMASK, methods_to_bitmask
from permissions.origins import (ORIGINS_ADMIN_ONLY, ORIGINS_API_PATTERN, ORIGINS_IMMUTABLE_CONTENT, ORIGINS_INTRA_SITE,
                                 ORIGINS_PUBLIC, ORIGINS_READ_ONLY_PUBLIC, ORIGINS_READ_PUBLIC_WRITE_ADMIN,
                                 normalise_origins)

__all__ = ('make_header', 'create_custom_header',
           'PUBLIC_HEADER', 'ADMIN_ONLY_HEADER', 'READ_ONLY_PUBLIC_HEADER', 'API_HEADER', 'INTRA_SITE_HEADER',
           'IMMUTABLE_PUBLIC_HEADER', 'STRICT_READ_ONLY_HEADER', 'DEFAULT_HEADERS', 'DEFAULT_HEADER')

logger = logging.getLogger(__name__)

_E = TypeVar('_E', bound=IntEnum)

# camelCase payload keys -> keyword names
OPTION_ALIASES: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        'cachePreset' : 'cache_preset',
        'corsPreset' : 'cors_preset',
        'redirectCode' : 'redirect_code',
        'redirectLocation' : 'redirect_location',
        'customCache' : 'custom_cache',
        'customCors' : 'custom_cors'
    }
)

HEADER_OPTIONS: Final[frozenset[str]] = frozenset(('methods', 'origins', 'immutable', *OPTION_ALIASES.values()))

def make_header(cache_preset: CachePreset,
                cors_preset: CORSPreset,
                methods: int,
                origins: OriginsArray,
                immutable: bool = False,
                custom_cache: str = '',
                custom_cors: str = '',
                redirect_code: int = 0,
                redirect_location: str = '') -> HeaderInfo:
    return HeaderInfo(cache=CacheControl(immutable_flag=immutable, preset=cache_preset, custom=custom_cache),
                      cors=CORSPolicy(methods=methods, origins=origins, preset=cors_preset, custom=custom_cors),
                      redirect=Redirect(code=redirect_code, location=redirect_location))

def _coerce_preset(enum_cls: type[_E], value: Any, default: _E) -> _E:
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        logger.debug('Unrecognised %s %r, using %s', enum_cls.__name__, value, default.name)
        return default

def _coerce_methods(methods: Any) -> int:
    if isinstance(methods, (str, bytes)) or not isinstance(methods, Iterable):
        logger.debug('Methods %r are not an iterable of methods, using read methods', methods)
        return methods_to_bitmask(READ_METHODS)

    valid: list[Method] = []
    for method in methods:
        try:
            valid.append(Method[method.upper()] if isinstance(method, str) else Method(method))
        except (KeyError, ValueError, TypeError):
            logger.debug('Dropping unrecognised method %r', method)
    return methods_to_bitmask(valid)

def _coerce_role(role: Any) -> RoleIdentifier:
    if isinstance(role, (bytes, bytearray)) and len(role) == ROLE_WIDTH:
        return bytes(role)
    if isinstance(role, str):
        try:
            return role_from_hex(role)
        except InvalidRoleIdentifier:
            pass
    logger.debug('Malformed role identifier %r replaced by blacklist role', role)
    return BLACKLIST_ROLE

def _coerce_origins(origins: Any) -> OriginsArray:
    if isinstance(origins, (str, bytes)) or not isinstance(origins, Iterable):
        logger.debug('Origins %r are not a sequence of roles, using read-public/write-admin', origins)
        return ORIGINS_READ_PUBLIC_WRITE_ADMIN
    return tuple(_coerce_role(role) for role in normalise_origins(list(origins)))

def _coerce_uint16(value: Any, default: int = 0) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= UINT16_MAX:
        return value
    logger.debug('Value %r does not fit in a uint16, using %d', value, default)
    return default

def create_custom_header(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> HeaderInfo:
    '''Build a HeaderInfo from loosely typed options.

    Recognised options, given as a mapping, keyword arguments or both (keywords win):
    `methods` (default: HEAD, GET, OPTIONS, LOCATE), `origins` (default: read public,
    write admin), `cache_preset` (default: DEFAULT), `cors_preset` (default: MIXED_ACCESS),
    `immutable`, `redirect_code`, `redirect_location`, `custom_cache`, `custom_cors`.
    camelCase spellings such as `cachePreset` are accepted. Unknown options are ignored.

    An origins array of the wrong length is replaced by its first role (or the public
    role if empty) broadcast to every method. Unusable values fall back to defaults.
    '''
    merged: dict[str, Any] = {}
    for key, value in {**(options or {}), **kwargs}.items():
        name: str = OPTION_ALIASES.get(key, key)
        if name not in HEADER_OPTIONS:
            logger.debug('Ignoring unknown header option %r', key)
            continue
        merged[name] = value

    return make_header(cache_preset=_coerce_preset(CachePreset, merged.get('cache_preset', CachePreset.DEFAULT), CachePreset.DEFAULT),
                       cors_preset=_coerce_preset(CORSPreset, merged.get('cors_preset', CORSPreset.MIXED_ACCESS), CORSPreset.MIXED_ACCESS),
                       methods=_coerce_methods(merged.get('methods', sorted(READ_METHODS))),
                       origins=_coerce_origins(merged.get('origins', ORIGINS_READ_PUBLIC_WRITE_ADMIN)),
                       immutable=bool(merged.get('immutable', False)),
                       custom_cache=str(merged.get('custom_cache') or ''),
                       custom_cors=str(merged.get('custom_cors') or ''),
                       redirect_code=_coerce_uint16(merged.get('redirect_code', 0)),
                       redirect_location=str(merged.get('redirect_location') or ''))


PUBLIC_HEADER: Final[HeaderInfo] = make_header(CachePreset.DEFAULT, CORSPreset.PUBLIC, ALL_METHODS_BITMASK, ORIGINS_PUBLIC)
ADMIN_ONLY_HEADER: Final[HeaderInfo] = make_header(CachePreset.NONE, CORSPreset.PRIVATE, ALL_METHODS_BITMASK, ORIGINS_ADMIN_ONLY)
READ_ONLY_PUBLIC_HEADER: Final[HeaderInfo] = make_header(CachePreset.SHORT, CORSPreset.MIXED_ACCESS, ALL_METHODS_BITMASK, ORIGINS_READ_PUBLIC_WRITE_ADMIN)
API_HEADER: Final[HeaderInfo] = make_header(CachePreset.NO_CACHE, CORSPreset.API, ALL_METHODS_BITMASK, ORIGINS_API_PATTERN)
# Internal communication is never cached
INTRA_SITE_HEADER: Final[HeaderInfo] = make_header(CachePreset.NO_CACHE, CORSPreset.PRIVATE, ALL_METHODS_BITMASK, ORIGINS_INTRA_SITE)
IMMUTABLE_PUBLIC_HEADER: Final[HeaderInfo] = make_header(CachePreset.PERMANENT, CORSPreset.PUBLIC, ALL_METHODS_BITMASK, ORIGINS_IMMUTABLE_CONTENT, immutable=True)
# Write methods are left out of the bitmask entirely
STRICT_READ_ONLY_HEADER: Final[HeaderInfo] = make_header(CachePreset.MEDIUM, CORSPreset.PUBLIC, READ_ONLY_METHODS_BITMASK, ORIGINS_READ_ONLY_PUBLIC)

DEFAULT_HEADERS: MappingProxyType[str, HeaderInfo] = MappingProxyType(
    {
        'PUBLIC' : PUBLIC_HEADER,
        'ADMIN_ONLY' : ADMIN_ONLY_HEADER,
        'READ_ONLY_PUBLIC' : READ_ONLY_PUBLIC_HEADER,
        'API' : API_HEADER,
        'INTRA_SITE' : INTRA_SITE_HEADER,
        'IMMUTABLE_PUBLIC' : IMMUTABLE_PUBLIC_HEADER,
        'STRICT_READ_ONLY' : STRICT_READ_ONLY_HEADER
    }
)

DEFAULT_HEADER: Final[HeaderInfo] = READ_ONLY_PUBLIC_HEADER
