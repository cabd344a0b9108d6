from abc import ABC
from datetime import datetime
from typing import Optional

__all__ = ('CodecException', 'InvalidConstants', 'InvalidHeaderData', 'InvalidRoleIdentifier')

class CodecException(ABC, Exception):
    '''Abstract base exception class for errors raised at the configuration and deserialization boundary.
    Encode/decode operations never raise these, they fall back to category defaults instead'''
    code: str
    description: str
    exception_iso_timestamp: str

    def __init__(self, description: Optional[str] = None):
        self.description = description or self.__class__.description
        self.exception_iso_timestamp = datetime.now().isoformat()
        super().__init__(self.description)


class InvalidConstants(CodecException):
    code: str = 'cfg'
    description: str = 'Codec constants could not be loaded'

class InvalidHeaderData(CodecException):
    code: str = 'hdr'
    description: str = 'Header data is not a valid HeaderInfo payload'

class InvalidRoleIdentifier(CodecException):
    code: str = 'role'
    description: str = 'Role identifier {role} is not a {width}-byte hex value'

    def __init__(self, role: str, width: int, description: Optional[str] = None):
        super().__init__((description or InvalidRoleIdentifier.description).format(role=role, width=width))
