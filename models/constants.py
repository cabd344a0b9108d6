import os
from pathlib import Path
from typing import Annotated, Any, Final, Optional, Union

from models.errors import InvalidConstants
from models.flags import CharsetPolicy

import pytomlpp
from pydantic import BaseModel, Field, ValidationError

__all__ = ('RoleConstants', 'ChainConstants', 'CodecConstants', 'Constants', 'CONSTANTS_ENV_VAR', 'load_constants', 'CONSTANTS', 'MASTER_CHAIN_ID')

CONSTANTS_ENV_VAR: Final[str] = 'WTTP_CODEC_CONSTANTS'
DEFAULT_CONSTANTS_PATH: Final[Path] = Path(__file__).parent.joinpath('constants.toml')

class RoleConstants(BaseModel):
    blacklist_label: Annotated[str, Field(frozen=True, min_length=1)]
    intra_site_label: Annotated[str, Field(frozen=True, min_length=1)]

class ChainConstants(BaseModel):
    master_chain_id: Annotated[int, Field(frozen=True, ge=1)]

class CodecConstants(BaseModel):
    charset_policy: Annotated[CharsetPolicy, Field(frozen=True, default=CharsetPolicy.STRICT)]

class Constants(BaseModel):
    roles: RoleConstants
    chain: ChainConstants
    codec: CodecConstants

    model_config = {
        'frozen' : True
    }

def load_constants(filepath: Optional[Union[str, Path]] = None) -> Constants:
    '''Load and validate codec constants.

    Resolution order is the explicit `filepath`, then the file named by the
    `WTTP_CODEC_CONSTANTS` environment variable, then the bundled `constants.toml`.
    '''
    path: Path = Path(filepath or os.environ.get(CONSTANTS_ENV_VAR) or DEFAULT_CONSTANTS_PATH)
    try:
        loaded_constants: dict[str, Any] = pytomlpp.load(path)
    except (OSError, pytomlpp.DecodeError) as e:
        raise InvalidConstants(f'Failed to read constants from {path}: {e}') from e

    try:
        return Constants.model_validate({'roles' : RoleConstants.model_validate(loaded_constants.get('roles', {})),
                                         'chain' : ChainConstants.model_validate(loaded_constants.get('chain', {})),
                                         'codec' : CodecConstants.model_validate(loaded_constants.get('codec', {}))})
    except ValidationError as e:
        raise InvalidConstants(f'Constants in {path} failed validation: {e.error_count()} error(s)') from e

CONSTANTS: Final[Constants] = load_constants()
MASTER_CHAIN_ID: Final[int] = CONSTANTS.chain.master_chain_id
