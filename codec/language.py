'''Composite language-region codec.

A tag such as `en-US` packs into one 2-byte code: the high byte comes from the
language sub-code and the low byte from the region sub-code. Each half is looked
up independently and defaults to zero when absent. Only one byte of each sub-code
survives packing, so sub-codes that do not fit their half collide.
'''
import logging

from codec.codes import as_code
from codec.tables import CODE_TO_LANGUAGE, CODE_TO_REGION, LANGUAGE_TO_CODE, REGION_TO_CODE, RESERVED_CODE
from models.typing import CodeLike, PropertyCode

__all__ = ('LANGUAGE_MASK', 'REGION_MASK', 'TAG_SEPARATOR', 'encode_language', 'decode_language')

logger = logging.getLogger(__name__)

LANGUAGE_MASK: int = 0xFF00
REGION_MASK: int = 0x00FF
TAG_SEPARATOR: str = '-'

def encode_language(tag: str) -> PropertyCode:
    parts: list[str] = tag.split(TAG_SEPARATOR)
    language_code: int = LANGUAGE_TO_CODE.get(parts[0], RESERVED_CODE)
    region_code: int = REGION_TO_CODE.get(parts[1], RESERVED_CODE) if len(parts) > 1 else RESERVED_CODE

    if language_code == RESERVED_CODE:
        logger.debug('Unrecognised language in tag %r, language half left empty', tag)
    return (language_code & LANGUAGE_MASK) | (region_code & REGION_MASK)

def decode_language(code: CodeLike) -> str:
    packed = as_code(code)
    if packed is None:
        logger.debug('Malformed language code %r', code)
        return ''

    language: str = CODE_TO_LANGUAGE.get(packed & LANGUAGE_MASK, '')
    if not language:
        return ''

    region: str = CODE_TO_REGION.get(packed & REGION_MASK, '')
    return f'{language}{TAG_SEPARATOR}{region}' if region else language
