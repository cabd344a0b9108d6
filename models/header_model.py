'''Module for defining the HeaderInfo record attached to stored resources'''
from typing import Annotated, Any, Union
from typing_extensions import Self

from models.errors import InvalidHeaderData, InvalidRoleIdentifier
from models.flags import CachePreset, CORSPreset, Method
from models.roles import ROLE_WIDTH, role_from_hex, role_to_hex
from models.typing import OriginsArray, RoleIdentifier

import orjson
from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

__all__ = ('CacheControl',
           'CORSPolicy',
           'Redirect',
           'HeaderInfo')

UINT16_MAX: int = 0xFFFF

def _cast_as_role(role: Union[str, bytes, bytearray, memoryview]) -> RoleIdentifier:
    if isinstance(role, str):
        try:
            return role_from_hex(role)
        except InvalidRoleIdentifier as e:
            raise ValueError(e.description) from e
    if not isinstance(role, (bytes, bytearray, memoryview)):
        raise ValueError(f'Role identifier must be bytes or a hex string, got {type(role).__name__}')
    return bytes(role)

class CacheControl(BaseModel):
    immutable_flag: bool = Field(default=False)
    preset: CachePreset = Field(default=CachePreset.DEFAULT)
    custom: str = Field(default='')

    model_config = {
        'frozen' : True
    }

class CORSPolicy(BaseModel):
    methods: int = Field(ge=0, le=UINT16_MAX)
    origins: OriginsArray
    preset: CORSPreset = Field(default=CORSPreset.NONE)
    custom: str = Field(default='')

    model_config = {
        'frozen' : True
    }

    @field_validator('origins', mode='before')
    @classmethod
    def cast_origins(cls, origins: Any) -> OriginsArray:
        if not isinstance(origins, (list, tuple)):
            raise ValueError('Origins must be a sequence of role identifiers')
        return tuple(_cast_as_role(role) for role in origins)

    @field_validator('origins', mode='after')
    @classmethod
    def validate_origins(cls, origins: OriginsArray) -> OriginsArray:
        if len(origins) != len(Method):
            raise ValueError(f'Origins array must have exactly {len(Method)} roles, got {len(origins)}')
        if any(len(role) != ROLE_WIDTH for role in origins):
            raise ValueError(f'Every role identifier must be {ROLE_WIDTH} bytes')
        return origins

    @field_serializer('origins', when_used='json')
    def serialize_origins(self, origins: OriginsArray) -> list[str]:
        return [role_to_hex(role) for role in origins]

class Redirect(BaseModel):
    code: int = Field(default=0, ge=0, le=UINT16_MAX)
    location: str = Field(default='')

    model_config = {
        'frozen' : True
    }

class HeaderInfo(BaseModel):
    cache: CacheControl
    cors: CORSPolicy
    redirect: Redirect = Field(default_factory=Redirect)

    model_config = {
        'frozen' : True
    }

    @classmethod
    def from_json(cls, data: Union[bytes, str]) -> Self:
        try:
            return cls.model_validate(orjson.loads(data))
        except (orjson.JSONDecodeError, ValidationError) as e:
            raise InvalidHeaderData(f'{InvalidHeaderData.description}: {e}') from e

    def as_struct(self) -> tuple[tuple[bool, int, str], tuple[int, list[RoleIdentifier], int, str], tuple[int, str]]:
        '''Nested tuple layout expected by an ABI encoder for the HeaderInfo struct'''
        return ((self.cache.immutable_flag, int(self.cache.preset), self.cache.custom),
                (self.cors.methods, list(self.cors.origins), int(self.cors.preset), self.cors.custom),
                (self.redirect.code, self.redirect.location))

    def as_bytes(self) -> bytes:
        return orjson.dumps(self.model_dump(mode='json'))
