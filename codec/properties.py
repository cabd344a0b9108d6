'''Encode/decode functions for MIME type, charset and content-encoding, plus category dispatch.

None of these functions raise on unrecognised input: encoding falls back to the
category's default code and decoding to the category's default string.
'''
import logging
import mimetypes
from os import PathLike
from types import MappingProxyType
from typing import Callable, NamedTuple, Optional, Union

from codec.codes import as_code
from codec.language import decode_language, encode_language
from codec.tables import (RESERVED_CODE,
                          MIME_TO_CODE, CODE_TO_MIME, DEFAULT_MIME_CODE, DEFAULT_MIME_TYPE,
                          CHARSET_TO_CODE, CODE_TO_CHARSET, STRICT_CODE_TO_CHARSET, DEFAULT_CHARSET_CODE, DEFAULT_CHARSET,
                          ENCODING_TO_CODE, CODE_TO_ENCODING, DEFAULT_ENCODING_CODE, DEFAULT_ENCODING)
from models.constants import CONSTANTS
from models.flags import CharsetPolicy, PropertyCategory
from models.typing import CodeLike, PropertyCode

__all__ = ('PropertyCodec',
           'encode_mime_type', 'decode_mime_type', 'mime_type_for_path', 'encode_mime_type_for_path',
           'encode_charset', 'decode_charset',
           'encode_encoding', 'decode_encoding',
           'PROPERTY_CODECS', 'encode_property', 'decode_property')

logger = logging.getLogger(__name__)

class PropertyCodec(NamedTuple):
    encode: Callable[[str], PropertyCode]
    decode: Callable[[CodeLike], str]

def _lookup_code(table: MappingProxyType[int, str], code: CodeLike, default: str) -> str:
    normalised = as_code(code)
    if normalised is None or normalised not in table:
        logger.debug('Unrecognised code %r, falling back to %r', code, default)
        return default
    return table[normalised]

def _lookup_name(table: MappingProxyType[str, int], value: str, default: PropertyCode) -> PropertyCode:
    code: Optional[int] = table.get(value)
    if code is None:
        logger.debug('Unrecognised value %r, falling back to 0x%04x', value, default)
        return default
    return code

def _resolve_policy(policy: Optional[CharsetPolicy]) -> CharsetPolicy:
    return CharsetPolicy(policy) if policy is not None else CONSTANTS.codec.charset_policy


def encode_mime_type(mime_type: str) -> PropertyCode:
    return _lookup_name(MIME_TO_CODE, mime_type, DEFAULT_MIME_CODE)

def decode_mime_type(code: CodeLike) -> str:
    return _lookup_code(CODE_TO_MIME, code, DEFAULT_MIME_TYPE)

def mime_type_for_path(path: Union[str, PathLike]) -> Optional[str]:
    '''Guess the MIME type of a file from its name, None if the extension is not registered'''
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type

def encode_mime_type_for_path(path: Union[str, PathLike]) -> PropertyCode:
    mime_type: Optional[str] = mime_type_for_path(path)
    return encode_mime_type(mime_type) if mime_type else DEFAULT_MIME_CODE


def encode_charset(charset: str, policy: Optional[CharsetPolicy] = None) -> PropertyCode:
    '''Encode a charset name.

    Under `CharsetPolicy.STRICT` an unknown charset encodes to the reserved code 0x0000,
    under `CharsetPolicy.PERMISSIVE` it encodes as utf-8. Passing no policy uses the
    configured default.
    '''
    default: int = RESERVED_CODE if _resolve_policy(policy) is CharsetPolicy.STRICT else DEFAULT_CHARSET_CODE
    return _lookup_name(CHARSET_TO_CODE, charset, default)

def decode_charset(code: CodeLike, policy: Optional[CharsetPolicy] = None) -> str:
    if _resolve_policy(policy) is CharsetPolicy.STRICT:
        return _lookup_code(STRICT_CODE_TO_CHARSET, code, '')
    return _lookup_code(CODE_TO_CHARSET, code, DEFAULT_CHARSET)


def encode_encoding(encoding: str) -> PropertyCode:
    return _lookup_name(ENCODING_TO_CODE, encoding, DEFAULT_ENCODING_CODE)

def decode_encoding(code: CodeLike) -> str:
    return _lookup_code(CODE_TO_ENCODING, code, DEFAULT_ENCODING)


PROPERTY_CODECS: MappingProxyType[PropertyCategory, PropertyCodec] = MappingProxyType(
    {
        PropertyCategory.MIME : PropertyCodec(encode_mime_type, decode_mime_type),
        PropertyCategory.CHARSET : PropertyCodec(encode_charset, decode_charset),
        PropertyCategory.ENCODING : PropertyCodec(encode_encoding, decode_encoding),
        PropertyCategory.LANGUAGE : PropertyCodec(encode_language, decode_language)
    }
)

def _resolve_category(category: Union[PropertyCategory, str]) -> Optional[PropertyCategory]:
    if isinstance(category, PropertyCategory):
        return category
    try:
        return PropertyCategory(category)
    except ValueError:
        logger.debug('Unsupported property category %r', category)
        return None

def encode_property(category: Union[PropertyCategory, str], value: str) -> PropertyCode:
    resolved = _resolve_category(category)
    if resolved is None:
        return RESERVED_CODE
    return PROPERTY_CODECS[resolved].encode(value)

def decode_property(category: Union[PropertyCategory, str], code: CodeLike) -> str:
    resolved = _resolve_category(category)
    if resolved is None:
        return ''
    return PROPERTY_CODECS[resolved].decode(code)
