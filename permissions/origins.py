'''Origins arrays: one role per method, indexed by method value'''
import logging
from types import MappingProxyType
from typing import Final, Mapping, Sequence

from models.flags import Method
from models.roles import BLACKLIST_ROLE, DEFAULT_ADMIN_ROLE, INTRA_SITE_ROLE, PUBLIC_ROLE
from models.typing import OriginsArray, RoleIdentifier
from permissions.methods import READ_METHODS, method_count

__all__ = ('create_origins_array', 'create_mixed_origins_array', 'override_origins', 'normalise_origins',
           'ORIGINS_PUBLIC', 'ORIGINS_ADMIN_ONLY', 'ORIGINS_BLACKLISTED', 'ORIGINS_INTRA_SITE',
           'ORIGINS_READ_PUBLIC_WRITE_ADMIN', 'ORIGINS_READ_PUBLIC_WRITE_INTRA', 'ORIGINS_READ_ONLY_PUBLIC',
           'ORIGINS_API_PATTERN', 'ORIGINS_IMMUTABLE_CONTENT', 'ORIGINS_PRESETS')

logger = logging.getLogger(__name__)

def create_origins_array(role: RoleIdentifier) -> OriginsArray:
    return (role,) * method_count()

def create_mixed_origins_array(read_role: RoleIdentifier, write_role: RoleIdentifier) -> OriginsArray:
    '''Assign `read_role` to HEAD, GET, OPTIONS and LOCATE, `write_role` to every other method'''
    return tuple(read_role if method in READ_METHODS else write_role for method in sorted(Method))

def override_origins(origins: OriginsArray, overrides: Mapping[Method, RoleIdentifier]) -> OriginsArray:
    return tuple(overrides.get(method, origins[method]) for method in sorted(Method))

def normalise_origins(origins: Sequence[RoleIdentifier]) -> OriginsArray:
    '''Return `origins` as a tuple if it has one role per method.
    Otherwise broadcast its first role, or the public role if it is empty'''
    if len(origins) == method_count():
        return tuple(origins)

    logger.debug('Origins array of length %d normalised to %d entries', len(origins), method_count())
    return create_origins_array(origins[0] if origins else PUBLIC_ROLE)


ORIGINS_PUBLIC: Final[OriginsArray] = create_origins_array(PUBLIC_ROLE)
ORIGINS_ADMIN_ONLY: Final[OriginsArray] = create_origins_array(DEFAULT_ADMIN_ROLE)
ORIGINS_BLACKLISTED: Final[OriginsArray] = create_origins_array(BLACKLIST_ROLE)
ORIGINS_INTRA_SITE: Final[OriginsArray] = create_origins_array(INTRA_SITE_ROLE)

ORIGINS_READ_PUBLIC_WRITE_ADMIN: Final[OriginsArray] = create_mixed_origins_array(PUBLIC_ROLE, DEFAULT_ADMIN_ROLE)
ORIGINS_READ_PUBLIC_WRITE_INTRA: Final[OriginsArray] = create_mixed_origins_array(PUBLIC_ROLE, INTRA_SITE_ROLE)
ORIGINS_READ_ONLY_PUBLIC: Final[OriginsArray] = create_mixed_origins_array(PUBLIC_ROLE, BLACKLIST_ROLE)

# Reads public, POST/PATCH for intra-site callers, PUT/DELETE/DEFINE for admins
ORIGINS_API_PATTERN: Final[OriginsArray] = override_origins(ORIGINS_READ_PUBLIC_WRITE_ADMIN,
                                                            {Method.POST : INTRA_SITE_ROLE,
                                                             Method.PATCH : INTRA_SITE_ROLE})

# Immutable content can't be patched or deleted
ORIGINS_IMMUTABLE_CONTENT: Final[OriginsArray] = override_origins(ORIGINS_READ_PUBLIC_WRITE_ADMIN,
                                                                  {Method.PATCH : BLACKLIST_ROLE,
                                                                   Method.DELETE : BLACKLIST_ROLE})

ORIGINS_PRESETS: MappingProxyType[str, OriginsArray] = MappingProxyType(
    {
        'PUBLIC' : ORIGINS_PUBLIC,
        'ADMIN_ONLY' : ORIGINS_ADMIN_ONLY,
        'BLACKLISTED' : ORIGINS_BLACKLISTED,
        'INTRA_SITE' : ORIGINS_INTRA_SITE,
        'READ_PUBLIC_WRITE_ADMIN' : ORIGINS_READ_PUBLIC_WRITE_ADMIN,
        'READ_PUBLIC_WRITE_INTRA' : ORIGINS_READ_PUBLIC_WRITE_INTRA,
        'READ_ONLY_PUBLIC' : ORIGINS_READ_ONLY_PUBLIC,
        'API_PATTERN' : ORIGINS_API_PATTERN,
        'IMMUTABLE_CONTENT' : ORIGINS_IMMUTABLE_CONTENT
    }
)
