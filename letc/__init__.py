"""
LETC - transport-safe text encoding with optional password encryption

Text goes through an optional AES-256-GCM envelope, then one of four output
styles: z-base-32, dictionary words, or z-base-32 disguised as Persian
script.
"""

from .main import *
from .errors import *
from .wordlist import Wordlist
from .api_strings import (
    decode_mode,
    decode_mode_bytes,
    decrypt,
    encode_mode,
    encrypt,
    persiandecode,
    persianencode,
    wordsdecode,
    wordsencode,
    zb32decode,
    zb32encode,
)
from .version import __version__
