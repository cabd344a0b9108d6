'''Content-Security-Policy directive strings for each CORS preset. Consumed verbatim by HTTP gateways'''
from types import MappingProxyType
from typing import Any

from models.flags import CORSPreset

__all__ = ('CSP_PRESETS', 'load_csp_preset')

CSP_PRESETS: MappingProxyType[CORSPreset, str] = MappingProxyType(
    {
        CORSPreset.NONE : "default-src 'none';",
        CORSPreset.PUBLIC : ("default-src 'self';"
                             " script-src 'self' 'unsafe-inline' 'unsafe-eval';"
                             " style-src 'self' 'unsafe-inline';"
                             " img-src 'self' data:;"
                             " font-src 'self';"
                             " connect-src 'self';"
                             " object-src 'none';"
                             " frame-src 'none';"),
        CORSPreset.RESTRICTED : ("default-src 'self';"
                                 " script-src 'self';"
                                 " style-src 'self';"
                                 " img-src 'self';"
                                 " font-src 'self';"
                                 " connect-src 'self';"
                                 " object-src 'none';"
                                 " frame-src 'none';"),
        CORSPreset.API : ("default-src 'none';"
                          " connect-src 'self';"
                          " frame-ancestors 'none';"),
        CORSPreset.MIXED_ACCESS : ("default-src 'self';"
                                   " script-src 'self' https:;"
                                   " style-src 'self' https: 'unsafe-inline';"
                                   " img-src 'self' https: data:;"
                                   " font-src 'self' https:;"
                                   " connect-src 'self' https:;"
                                   " object-src 'none';"
                                   " frame-src 'self' https:;"),
        CORSPreset.PRIVATE : ("default-src 'self';"
                              " script-src 'self';"
                              " style-src 'self';"
                              " img-src 'self';"
                              " font-src 'self';"
                              " connect-src 'self';"
                              " object-src 'none';"
                              " frame-src 'none';"
                              " frame-ancestors 'none';"
                              " form-action 'self';")
    }
)

def load_csp_preset(preset: Any) -> str:
    '''CSP directive string for a CORS preset value, empty for unrecognised presets'''
    try:
        return CSP_PRESETS[CORSPreset(preset)]
    except (ValueError, TypeError):
        return ''
