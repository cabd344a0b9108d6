'''Forward (name -> code) and reverse (code -> name) lookup tables for every property category.

Codes are 2-byte values, mostly the ASCII of a two letter mnemonic noted beside each entry.
0x0000 is reserved for "no value" and is never assigned to a real entry, except as the
placeholder for charsets that have no code yet.
'''
from types import MappingProxyType
from typing import Final

__all__ = ('RESERVED_CODE',
           'MIME_TO_CODE', 'CODE_TO_MIME', 'DEFAULT_MIME_CODE', 'DEFAULT_MIME_TYPE',
           'CHARSET_TO_CODE', 'CODE_TO_CHARSET', 'STRICT_CODE_TO_CHARSET', 'DEFAULT_CHARSET_CODE', 'DEFAULT_CHARSET',
           'ENCODING_TO_CODE', 'CODE_TO_ENCODING', 'DEFAULT_ENCODING_CODE', 'DEFAULT_ENCODING',
           'LANGUAGE_TO_CODE', 'CODE_TO_LANGUAGE', 'REGION_TO_CODE', 'CODE_TO_REGION')

RESERVED_CODE: Final[int] = 0x0000

# MIME types
DEFAULT_MIME_CODE: Final[int] = 0x6273
DEFAULT_MIME_TYPE: Final[str] = 'application/octet-stream'

MIME_TO_CODE: MappingProxyType[str, int] = MappingProxyType(
    {
        'text/html' : 0x7468,                   # th
        'text/javascript' : 0x616a,             # aj, same as application/javascript
        'text/css' : 0x7463,                    # tc
        'text/markdown' : 0x746d,               # tm
        'text/plain' : 0x7470,                  # tp
        'application/javascript' : 0x616a,      # aj
        'application/xml' : 0x6178,             # ax
        'application/pdf' : 0x6170,             # ap
        'application/json' : 0x616f,            # ao (object)
        'image/png' : 0x6970,                   # ip
        'image/jpeg' : 0x696a,                  # ij
        'image/gif' : 0x6967,                   # ig
        'image/svg+xml' : 0x6973,               # is
        'image/webp' : 0x6977,                  # iw
        'image/x-icon' : 0x6969,                # ii
        'font/ttf' : 0x6674,                    # ft
        'font/otf' : 0x666f,                    # fo
        'font/woff' : 0x6677,                   # fw
        'font/woff2' : 0x6632,                  # f2
        'application/octet-stream' : 0x6273,    # bs (binary stream)
    }
)

CODE_TO_MIME: MappingProxyType[int, str] = MappingProxyType(
    {
        0x7468 : 'text/html',
        0x7463 : 'text/css',
        0x746d : 'text/markdown',
        0x7470 : 'text/plain',
        0x616a : 'application/javascript',
        0x6178 : 'application/xml',
        0x6170 : 'application/pdf',
        0x616f : 'application/json',
        0x6970 : 'image/png',
        0x696a : 'image/jpeg',
        0x6967 : 'image/gif',
        0x6973 : 'image/svg+xml',
        0x6977 : 'image/webp',
        0x6969 : 'image/x-icon',
        0x6674 : 'font/ttf',
        0x666f : 'font/otf',
        0x6677 : 'font/woff',
        0x6632 : 'font/woff2',
        0x6273 : 'application/octet-stream',
        RESERVED_CODE : 'application/octet-stream',
    }
)

# Charsets
DEFAULT_CHARSET_CODE: Final[int] = 0x7508
DEFAULT_CHARSET: Final[str] = 'utf-8'

CHARSET_TO_CODE: MappingProxyType[str, int] = MappingProxyType(
    {
        'utf-8' : 0x7508,           # u(8)
        'utf-16' : 0x7510,          # u(16)
        'utf-32' : 0x7520,          # u(32)
        'utf-16le' : 0x106c,        # (16)l
        'utf-16be' : 0x1062,        # (16)b
        'utf-32le' : 0x206c,        # (32)l
        'utf-32be' : 0x2062,        # (32)b
        'us-ascii' : 0x7561,        # ua
        'unicode' : 0x7563,         # uc
        'iso-8859-1' : 0x6901,      # i(1)
        'iso-8859-2' : 0x6902,
        'iso-8859-3' : 0x6903,
        'iso-8859-4' : 0x6904,
        'iso-8859-5' : 0x6905,
        'iso-8859-6' : 0x6906,
        'iso-8859-7' : 0x6907,
        'iso-8859-8' : 0x6908,
        'iso-8859-9' : 0x6909,
        'iso-8859-10' : 0x690a,
        'iso-8859-11' : 0x690b,
        'iso-8859-13' : 0x690d,
        'iso-8859-14' : 0x690e,
        'iso-8859-15' : 0x690f,
        'iso-8859-16' : 0x6910,     # i(16)
        'windows-1250' : 0x7732,    # w(50)
        'windows-1251' : 0x7733,
        'windows-1252' : 0x7734,
        'windows-1253' : 0x7735,
        'windows-1254' : 0x7736,
        'windows-1255' : 0x7737,
        'windows-1256' : 0x7738,
        'windows-1257' : 0x7739,
        'windows-1258' : 0x773a,    # w(58)
        'big5' : 0x6205,            # b(5)
        # Unassigned, these encode to the reserved code
        'shift_jis' : RESERVED_CODE,
        'euc-jp' : RESERVED_CODE,
        'euc-kr' : RESERVED_CODE,
        'gbk' : RESERVED_CODE,
        'gb18030' : RESERVED_CODE,
        'gb2312' : RESERVED_CODE,
        'gb2312-80' : RESERVED_CODE,
        'gb2312-90' : RESERVED_CODE,
        'gb2312-95' : RESERVED_CODE,
        'gb2312-00' : RESERVED_CODE,
    }
)

CODE_TO_CHARSET: MappingProxyType[int, str] = MappingProxyType(
    {
        0x7508 : 'utf-8',
        0x7510 : 'utf-16',
        0x7520 : 'utf-32',
        0x106c : 'utf-16le',
        0x1062 : 'utf-16be',
        0x206c : 'utf-32le',
        0x2062 : 'utf-32be',
        0x7561 : 'us-ascii',
        0x7563 : 'unicode',
        0x6901 : 'iso-8859-1',
        0x6902 : 'iso-8859-2',
        0x6903 : 'iso-8859-3',
        0x6904 : 'iso-8859-4',
        0x6905 : 'iso-8859-5',
        0x6906 : 'iso-8859-6',
        0x6907 : 'iso-8859-7',
        0x6908 : 'iso-8859-8',
        0x6909 : 'iso-8859-9',
        0x690a : 'iso-8859-10',
        0x690b : 'iso-8859-11',
        0x690d : 'iso-8859-13',
        0x690e : 'iso-8859-14',
        0x690f : 'iso-8859-15',
        0x6910 : 'iso-8859-16',
        0x7732 : 'windows-1250',
        0x7733 : 'windows-1251',
        0x7734 : 'windows-1252',
        0x7735 : 'windows-1253',
        0x7736 : 'windows-1254',
        0x7737 : 'windows-1255',
        0x7738 : 'windows-1256',
        0x7739 : 'windows-1257',
        0x773a : 'windows-1258',
        0x6205 : 'big5',
    }
)

# Strict reverse table additionally pins the reserved code to "no charset"
STRICT_CODE_TO_CHARSET: MappingProxyType[int, str] = MappingProxyType({**CODE_TO_CHARSET, RESERVED_CODE : ''})

# Content encodings
DEFAULT_ENCODING_CODE: Final[int] = 0x6964
DEFAULT_ENCODING: Final[str] = 'identity'

ENCODING_TO_CODE: MappingProxyType[str, int] = MappingProxyType(
    {
        'gzip' : 0x677a,        # gz
        'identity' : 0x6964,    # id
        'zstd' : 0x7a73,        # zs
        'zlib' : 0x7a6c,        # zl
        'brotli' : 0x6272,      # br
        'lz4' : 0x6c34,         # l4
        'snappy' : 0x736e,      # sn
        'lzma' : 0x6c6d,        # lm
    }
)

CODE_TO_ENCODING: MappingProxyType[int, str] = MappingProxyType(
    {
        0x677a : 'gzip',
        0x6964 : 'identity',
        0x7a73 : 'zstd',
        0x7a6c : 'zlib',
        0x6272 : 'brotli',
        0x6c34 : 'lz4',
        0x736e : 'snappy',
        0x6c6d : 'lzma',
        RESERVED_CODE : 'identity',
    }
)

# Languages occupy the high byte, regions the low byte
LANGUAGE_TO_CODE: MappingProxyType[str, int] = MappingProxyType(
    {
        'en' : 0x6500,  # e
        'fr' : 0x6600,  # f
        'de' : 0x6400,  # d
        'es' : 0x7300,  # s
        'it' : 0x6900,  # i
        'ja' : 0x6a00,  # j
        'ko' : 0x6b00,  # k
        'ru' : 0x7200,  # r
    }
)

CODE_TO_LANGUAGE: MappingProxyType[int, str] = MappingProxyType(
    {
        0x6500 : 'en',
        0x6600 : 'fr',
        0x6400 : 'de',
        0x7300 : 'es',
        0x6900 : 'it',
        0x6a00 : 'ja',
        0x6b00 : 'ko',
        0x7200 : 'ru',
        RESERVED_CODE : '',
    }
)

REGION_TO_CODE: MappingProxyType[str, int] = MappingProxyType(
    {
        'US' : 0x0075,  # u
        'GB' : 0x0067,  # g
        'CA' : 0x0063,  # c
        'AU' : 0x0061,  # a
        'NZ' : 0x006e,  # n
    }
)

CODE_TO_REGION: MappingProxyType[int, str] = MappingProxyType(
    {
        0x0075 : 'US',
        0x0067 : 'GB',
        0x0063 : 'CA',
        0x0061 : 'AU',
        0x006e : 'NZ',
        RESERVED_CODE : '',
    }
)
