"""Exception types raised by the LetC engine.

Every error derives from ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""


class LetCError(ValueError):
    pass


# ---------------------------------------------------------------------------
# Format errors: malformed input, deterministic, never retried.
# ---------------------------------------------------------------------------

class FormatError(LetCError):
    pass


class InvalidCharacterError(FormatError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f'Invalid character in base32 input: "{char}" at position {position}')


class InvalidInputError(FormatError):
    def __init__(self, message: str = "invalid input") -> None:
        super().__init__(message)


class TruncatedInputError(FormatError):
    def __init__(self, message: str = "truncated input") -> None:
        super().__init__(message)


class PayloadTooLargeError(FormatError):
    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"payload too large: {size} bytes")


class EmptyInputError(FormatError):
    def __init__(self) -> None:
        super().__init__("empty input")


class UnknownWordError(FormatError):
    def __init__(self, word: str, position: int) -> None:
        self.word = word
        self.position = position
        super().__init__(f'unknown word "{word}" at position {position}')


class CompressedPayloadError(FormatError):
    pass


# ---------------------------------------------------------------------------
# Cryptographic errors
# ---------------------------------------------------------------------------

class CryptoError(LetCError):
    pass


class UnsupportedVersionError(CryptoError):
    def __init__(self, version) -> None:
        self.version = version
        super().__init__("Unsupported version")


class AuthenticationError(CryptoError):
    """Tag verification failed. The message never says which part was wrong."""

    MESSAGE = "authentication failed: wrong password or corrupted data"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


# ---------------------------------------------------------------------------
# Configuration errors: raised while setting things up.
# ---------------------------------------------------------------------------

class ConfigurationError(LetCError):
    pass


class WordlistError(ConfigurationError):
    pass


class MissingPasswordError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("password required when encryption is enabled")


class UnknownModeError(ConfigurationError):
    def __init__(self, mode) -> None:
        self.mode = mode
        super().__init__(f"unknown mode: {mode!r}")


__all__ = [
    "AuthenticationError",
    "CompressedPayloadError",
    "ConfigurationError",
    "CryptoError",
    "EmptyInputError",
    "FormatError",
    "InvalidCharacterError",
    "InvalidInputError",
    "LetCError",
    "MissingPasswordError",
    "PayloadTooLargeError",
    "TruncatedInputError",
    "UnknownModeError",
    "UnknownWordError",
    "UnsupportedVersionError",
    "WordlistError",
]
