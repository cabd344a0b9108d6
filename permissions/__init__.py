'''Method permissions: bitmasks, origins arrays, header presets and CSP directives'''
from models.roles import DEFAULT_ROLES
from permissions.csp import load_csp_preset
from permissions.headers import DEFAULT_HEADER, DEFAULT_HEADERS, create_custom_header
from permissions.methods import (ALL_METHODS_BITMASK, READ_ONLY_METHODS_BITMASK, WRITE_METHODS_BITMASK,
                                 bitmask_to_methods, method_count, methods_to_bitmask)
from permissions.origins import ORIGINS_PRESETS, create_mixed_origins_array, create_origins_array

__all__ = ('DEFAULT_ROLES',
           'method_count', 'methods_to_bitmask', 'bitmask_to_methods',
           'ALL_METHODS_BITMASK', 'READ_ONLY_METHODS_BITMASK', 'WRITE_METHODS_BITMASK',
           'create_origins_array', 'create_mixed_origins_array', 'ORIGINS_PRESETS',
           'create_custom_header', 'DEFAULT_HEADERS', 'DEFAULT_HEADER',
           'load_csp_preset')
