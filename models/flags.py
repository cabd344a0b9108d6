'''Module containing wire-level enumerations shared by the codec and permission layers'''
from enum import Enum, IntEnum

__all__ = ('Method', 'CachePreset', 'CORSPreset', 'PropertyCategory', 'CharsetPolicy')

class Method(IntEnum):
    '''Supported WTTP methods. Values are bit positions in a method bitmask and must never be reassigned'''
    HEAD = 0        # Retrieve only resource headers and metadata
    GET = 1         # Retrieve resource content
    POST = 2        # Submit data to be processed
    PUT = 3         # Create or replace a resource
    PATCH = 4       # Update parts of a resource
    DELETE = 5      # Remove a resource
    OPTIONS = 6     # Query which methods are supported for a resource
    LOCATE = 7      # Retrieve storage locations for resource data points
    DEFINE = 8      # Update resource headers

class CachePreset(IntEnum):
    '''Cache-control presets understood by the storage layer'''
    NONE = 0
    NO_CACHE = 1
    DEFAULT = 2
    SHORT = 3
    MEDIUM = 4
    LONG = 5
    PERMANENT = 6

class CORSPreset(IntEnum):
    '''CORS presets understood by the storage layer, also used to pick a CSP directive set'''
    NONE = 0
    PUBLIC = 1
    RESTRICTED = 2
    API = 3
    MIXED_ACCESS = 4
    PRIVATE = 5

class PropertyCategory(Enum):
    '''Metadata property categories that can be packed into a 2-byte code'''
    MIME = 'mime'
    CHARSET = 'charset'
    ENCODING = 'encoding'
    LANGUAGE = 'language'

class CharsetPolicy(Enum):
    '''Fallback behaviour for unrecognised charsets'''
    STRICT = 'strict'           # Unknown charset -> 0x0000 / ""
    PERMISSIVE = 'permissive'   # Unknown charset -> utf-8
