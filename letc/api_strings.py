"""String/byte codec convenience wrappers."""

from .main import letc


def zb32encode(data):
    return letc.encode_with_length(data)


def zb32decode(text: str):
    return letc.decode_with_length(text)


def wordsencode(data):
    return letc.encode_words(data)


def wordsdecode(text: str):
    return letc.decode_words(text)


def persianencode(data):
    return letc.to_disguise(letc.encode_with_length(data))


def persiandecode(text: str):
    return letc.decode_with_length(letc.from_disguise(text))


def encrypt(plaintext, password):
    return letc.encrypt(plaintext, password)


def decrypt(envelope: bytes, password):
    return letc.decrypt(envelope, password)


def encode_mode(mode, data, encryption_enabled: bool = False, password=None):
    """
    Encode text or bytes in one of the output styles.

    Args:
        mode: "zb32", "wordlist", "persian" or "simplepersian" (or a Mode)
        data: Plain text (UTF-8) or raw bytes
        encryption_enabled: Seal the payload in a password envelope first
        password: Required and non-empty when encryption_enabled is True

    Returns:
        The encoded string
    """
    return letc.encode_mode(mode, data, encryption_enabled, password)


def decode_mode(mode, text: str, encryption_enabled: bool = False, password=None):
    """
    Reverse encode_mode().

    Raises:
        FormatError: Malformed input (bad character, unknown word, truncation)
        AuthenticationError: Wrong password or corrupted data
    """
    return letc.decode_mode(mode, text, encryption_enabled, password)


def decode_mode_bytes(mode, text: str, encryption_enabled: bool = False, password=None):
    return letc.decode_mode_bytes(mode, text, encryption_enabled, password)


__all__ = [
    "decode_mode",
    "decode_mode_bytes",
    "decrypt",
    "encode_mode",
    "encrypt",
    "persiandecode",
    "persianencode",
    "wordsdecode",
    "wordsencode",
    "zb32decode",
    "zb32encode",
]
