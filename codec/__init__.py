'''Codec package: fixed-width property codes for resource metadata'''
from codec.codes import as_code, code_to_bytes, code_to_hex
from codec.language import decode_language, encode_language
from codec.properties import (decode_charset, decode_encoding, decode_mime_type, decode_property,
                              encode_charset, encode_encoding, encode_mime_type, encode_mime_type_for_path,
                              encode_property, mime_type_for_path)

__all__ = ('as_code', 'code_to_bytes', 'code_to_hex',
           'encode_mime_type', 'decode_mime_type', 'mime_type_for_path', 'encode_mime_type_for_path',
           'encode_charset', 'decode_charset',
           'encode_encoding', 'decode_encoding',
           'encode_language', 'decode_language',
           'encode_property', 'decode_property')
