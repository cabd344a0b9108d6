'''Role identifiers used by origins arrays.

A role is an opaque 32-byte token. Four sentinels are reserved: the all-zero
admin role, the all-ones public role and two roles derived from keccak-256
of fixed labels, matching how the contract layer derives them.
'''
from enum import Enum
from types import MappingProxyType
from typing import Final

from models.constants import CONSTANTS
from models.errors import InvalidRoleIdentifier
from models.typing import RoleIdentifier

from Crypto.Hash import keccak

__all__ = ('RoleTypes', 'ROLE_WIDTH', 'keccak_role', 'role_to_hex', 'role_from_hex',
           'DEFAULT_ADMIN_ROLE', 'BLACKLIST_ROLE', 'PUBLIC_ROLE', 'INTRA_SITE_ROLE', 'DEFAULT_ROLES')

ROLE_WIDTH: Final[int] = 32

class RoleTypes(Enum):
    ADMIN       = 'ADMIN'
    BLACKLIST   = 'BLACKLIST'
    PUBLIC      = 'PUBLIC'
    INTRA_SITE  = 'INTRA_SITE'

def keccak_role(label: str) -> RoleIdentifier:
    '''Derive a role identifier as keccak-256 of the UTF-8 encoded label'''
    return keccak.new(digest_bits=256, data=label.encode('utf-8')).digest()

def role_to_hex(role: RoleIdentifier) -> str:
    return '0x' + role.hex()

def role_from_hex(role: str) -> RoleIdentifier:
    digits: str = role[2:] if role[:2].lower() == '0x' else role
    if len(digits) != ROLE_WIDTH * 2:
        raise InvalidRoleIdentifier(role, ROLE_WIDTH)
    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise InvalidRoleIdentifier(role, ROLE_WIDTH) from e


DEFAULT_ADMIN_ROLE: Final[RoleIdentifier] = bytes(ROLE_WIDTH)
BLACKLIST_ROLE: Final[RoleIdentifier] = keccak_role(CONSTANTS.roles.blacklist_label)
PUBLIC_ROLE: Final[RoleIdentifier] = b'\xff' * ROLE_WIDTH
INTRA_SITE_ROLE: Final[RoleIdentifier] = keccak_role(CONSTANTS.roles.intra_site_label)

DEFAULT_ROLES: MappingProxyType[str, RoleIdentifier] = MappingProxyType(
    {
        RoleTypes.ADMIN.value : DEFAULT_ADMIN_ROLE,
        RoleTypes.BLACKLIST.value : BLACKLIST_ROLE,
        RoleTypes.PUBLIC.value : PUBLIC_ROLE,
        RoleTypes.INTRA_SITE.value : INTRA_SITE_ROLE
    }
)
