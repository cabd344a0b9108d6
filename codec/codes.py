'''Conversions between the representations a 2-byte property code can take'''
from string import hexdigits
from typing import Final, Optional

from models.typing import CodeLike, PropertyCode

__all__ = ('CODE_WIDTH', 'MAX_CODE', 'as_code', 'code_to_hex', 'code_to_bytes')

CODE_WIDTH: Final[int] = 2
MAX_CODE: Final[int] = (1 << (8 * CODE_WIDTH)) - 1

def as_code(code: CodeLike) -> Optional[PropertyCode]:
    '''Normalise an int, 2-byte buffer or 0x-prefixed hex string into an integer code.
    Returns None for anything that is not a well formed 2-byte code'''
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code if 0 <= code <= MAX_CODE else None
    if isinstance(code, (bytes, bytearray, memoryview)):
        return int.from_bytes(code, 'big') if len(code) == CODE_WIDTH else None
    if isinstance(code, str):
        if len(code) != 2 + CODE_WIDTH * 2 or code[:2].lower() != '0x':
            return None
        digits: str = code[2:]
        if not all(c in hexdigits for c in digits):
            return None
        return int(digits, 16)
    return None

def code_to_hex(code: PropertyCode) -> str:
    return f'0x{code & MAX_CODE:0{CODE_WIDTH * 2}x}'

def code_to_bytes(code: PropertyCode) -> bytes:
    return (code & MAX_CODE).to_bytes(CODE_WIDTH, 'big')
