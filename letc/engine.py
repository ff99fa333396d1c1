# LETC TEXT ENGINE ->

import enum as _enum_module
import os as _os_module
import re as _re_module
import sys as _sys_module
import warnings as _warnings_module

from .errors import (
    AuthenticationError,
    CompressedPayloadError,
    EmptyInputError,
    InvalidCharacterError,
    InvalidInputError,
    LetCError,
    MissingPasswordError,
    PayloadTooLargeError,
    TruncatedInputError,
    UnknownModeError,
    UnknownWordError,
    UnsupportedVersionError,
)
from .wordlist import Wordlist


class Mode(_enum_module.Enum):
    """Output style of the encode chain. Values are the wire names."""

    PLAIN_BASE32 = "zb32"
    MNEMONIC = "wordlist"
    SUBSTITUTED = "persian"
    SUBSTITUTED_SIMPLE = "simplepersian"

    @property
    def alias(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def parse(cls, value: "Mode | str") -> "Mode":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.alias):
                return mode
        raise UnknownModeError(value)


class letc:
    import hashlib
    import pathlib
    import secrets
    import struct
    import typing
    from collections import namedtuple
    import numpy as np
    try:
        import zlib
    except Exception:  # pragma: no cover - interpreter built without zlib
        zlib = None
    from cryptography.exceptions import InvalidTag
    from cryptography.hazmat.primitives.ciphers.aead import AESGCM

    @staticmethod
    def _env_int(name: str) -> "letc.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "2.0.0"

    # z-base-32 ordering; position is the 5-bit value
    ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
    _REVERSE_MIN = 0x31  # '1'
    _REVERSE_MAX = 0x7A  # 'z'
    _REVERSE: typing.ClassVar[tuple[int, ...]] = (
        lambda alphabet, lo, hi: tuple(alphabet.find(chr(code)) for code in range(lo, hi + 1))
    )(ALPHABET, _REVERSE_MIN, _REVERSE_MAX)
    _ENCODE_LUT: typing.ClassVar[bytes] = ALPHABET.encode("ascii")
    # ASCII byte -> 5-bit value (255 = invalid)
    _DECODE_LUT: typing.ClassVar[bytes] = (
        lambda alphabet: bytes(alphabet.index(chr(i)) if chr(i) in alphabet else 255 for i in range(256))
    )(ALPHABET)
    FAST_THRESHOLD = _env_int("LETC_FAST_THRESHOLD") or 1024

    PERSIAN_DIGITS: typing.ClassVar[dict[str, str]] = {
        "0": "۰", "1": "۱", "2": "۲", "3": "۳", "4": "۴",
        "5": "۵", "6": "۶", "7": "۷", "8": "۸", "9": "۹",
    }
    LETTER_TO_PERSIAN: typing.ClassVar[dict[str, str]] = {
        "a": "ا", "b": "ب", "c": "چ", "d": "د", "e": "ه", "f": "ف", "g": "گ",
        "h": "ح", "i": "ص", "j": "ج", "k": "ک", "l": "ل", "m": "م", "n": "ن",
        "o": "ث", "p": "پ", "q": "ق", "r": "ر", "s": "س", "t": "ت", "u": "ع",
        "v": "ض", "w": "و", "x": "خ", "y": "ی", "z": "ز",
    }
    DISGUISE_ALPHABET = (
        lambda alphabet, letters, digits: "".join(letters.get(ch) or digits.get(ch) or ch for ch in alphabet)
    )(ALPHABET, LETTER_TO_PERSIAN, PERSIAN_DIGITS)
    _DISGUISE_FORWARD: typing.ClassVar[dict[int, int]] = str.maketrans(ALPHABET, DISGUISE_ALPHABET)
    _DISGUISE_REVERSE: typing.ClassVar[dict[int, int]] = str.maketrans(DISGUISE_ALPHABET, ALPHABET)

    LENGTH_PREFIX_LEN = 4
    MAX_PAYLOAD_LEN = 0xFFFFFFFF
    _U32 = struct.Struct(">I")

    _WORD_BREAKS = _re_module.compile(r"[\r\n\t]+")
    _WORD_PUNCTUATION = _re_module.compile(r"[-,;:.]+")
    _WORD_SPACES = _re_module.compile(r"\s+")

    ENVELOPE_VERSION_LEGACY = 1
    ENVELOPE_VERSION = 2
    SUPPORTED_VERSIONS = frozenset({ENVELOPE_VERSION_LEGACY, ENVELOPE_VERSION})
    FLAG_COMPRESSED = 0x01
    SALT_LEN = 16
    NONCE_LEN = 12
    TAG_LEN = 16
    KEY_LEN = 32
    KDF_HASH = "sha256"
    KDF_ITERATIONS = 250_000
    _TEST_KDF_ITERS = _env_int("LETC_TEST_KDF_ITERS")
    if _TEST_KDF_ITERS is not None:
        KDF_ITERATIONS = _TEST_KDF_ITERS
    ENABLE_COMPRESSION = _os_module.getenv("LETC_COMPRESS", "1") == "1"
    COMPRESS_LEVEL = 9
    GZIP_WBITS = 31  # deflate inside a gzip container
    INFLATE_WBITS = 47  # auto-detect gzip or zlib header
    _WARNED_WEAK_KDF = False

    Stage = namedtuple("Stage", "name func uses_wordlist")
    Pipeline = namedtuple("Pipeline", "encode decode")
    # Stage identifiers per mode. Decode lists are the structural inverse of encode.
    PIPELINE_STAGES: typing.ClassVar[dict[Mode, tuple[tuple[str, ...], tuple[str, ...]]]] = {
        Mode.PLAIN_BASE32: (("encode_with_length",), ("decode_with_length",)),
        Mode.MNEMONIC: (("encode_words",), ("decode_words",)),
        Mode.SUBSTITUTED: (("encode_with_length", "to_disguise"), ("from_disguise", "decode_with_length")),
        Mode.SUBSTITUTED_SIMPLE: (("encode_with_length", "to_disguise"), ("from_disguise", "decode_with_length")),
    }
    _WORDLIST_STAGES = frozenset({"encode_words", "decode_words"})
    PIPELINES: typing.ClassVar[dict] = {}

    # ------------------------------------------------------------------
    # Byte-sequence primitives
    # ------------------------------------------------------------------

    @staticmethod
    def to_bytes(
        value: "letc.typing.Union[str, bytes, bytearray, memoryview, letc.typing.Sequence[int]]",
        offset: "letc.typing.Optional[int]" = None,
        length: "letc.typing.Optional[int]" = None
    ) -> bytes:
        """Build a fresh byte buffer from text (UTF-8), ints, or another buffer.

        ``offset``/``length`` select a window of a bytes-like source. Integers
        are truncated to their low 8 bits.
        """
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            view = memoryview(value).cast("B")
            if offset is None and length is None:
                return bytes(view)
            start = offset or 0
            stop = len(view) if length is None else start + length
            return bytes(view[start:stop])
        if isinstance(value, (list, tuple)):
            return bytes(int(v) & 0xFF for v in value)
        raise TypeError(f"Unsupported type for byte conversion: {type(value)!r}")

    @staticmethod
    def concat_bytes(*parts: "letc.typing.Union[bytes, bytearray, memoryview]") -> bytes:
        return b"".join(letc.to_bytes(p) for p in parts)

    @staticmethod
    def random_bytes(count: int) -> bytes:
        return letc.secrets.token_bytes(count)

    @staticmethod
    def u32be(value: int) -> bytes:
        if value < 0 or value > letc.MAX_PAYLOAD_LEN:
            raise PayloadTooLargeError(value)
        return letc._U32.pack(value)

    @staticmethod
    def read_u32be(data: bytes, offset: int = 0) -> int:
        if offset < 0 or len(data) < offset + 4:
            raise InvalidInputError()
        return letc._U32.unpack_from(data, offset)[0]

    @staticmethod
    def _decode_text(data: bytes) -> str:
        return bytes(data).decode("utf-8", errors="replace")

    @staticmethod
    def _coerce_text(value: "letc.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidInputError(f"encoded text is not valid UTF-8 (byte {exc.start})") from exc
        raise TypeError(f"Unsupported type for textual conversion: {type(value)!r}")

    @staticmethod
    def _coerce_password_bytes(
        password: "letc.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> bytes:
        if isinstance(password, str):
            return password.encode("utf-8")
        if isinstance(password, (bytes, bytearray, memoryview)):
            return bytes(password)
        raise TypeError(f"Unsupported password type: {type(password)!r}")

    # ------------------------------------------------------------------
    # Base32Variant codec
    # ------------------------------------------------------------------

    @staticmethod
    def _quintet(text: str, position: int) -> int:
        char = text[position]
        code = ord(char)
        if code < letc._REVERSE_MIN or code > letc._REVERSE_MAX:
            raise InvalidCharacterError(char, position)
        bits = letc._REVERSE[code - letc._REVERSE_MIN]
        if bits < 0:
            raise InvalidCharacterError(char, position)
        return bits

    @staticmethod
    def b32encode(data: "letc.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        """Map every 5 bits, MSB first, to one alphabet character.

        A trailing group shorter than 5 bits is padded with zero bits on the
        low end. No padding characters are emitted.
        """
        raw = letc.to_bytes(data)
        if len(raw) >= letc.FAST_THRESHOLD:
            return letc._fast_b32encode(raw)
        alphabet = letc.ALPHABET
        out = []
        acc = 0
        acc_bits = 0
        for byte in raw:
            acc = ((acc << 8) | byte) & 0xFFF
            acc_bits += 8
            while acc_bits >= 5:
                acc_bits -= 5
                out.append(alphabet[(acc >> acc_bits) & 0x1F])
        if acc_bits:
            out.append(alphabet[(acc << (5 - acc_bits)) & 0x1F])
        return "".join(out)

    @staticmethod
    def b32decode(text: str) -> bytes:
        """Inverse of :meth:`b32encode`; fewer than 8 leftover bits are dropped."""
        if len(text) >= letc.FAST_THRESHOLD and text.isascii():
            return letc._fast_b32decode(text)
        out = bytearray()
        acc = 0
        acc_bits = 0
        for position in range(len(text)):
            acc = ((acc << 5) | letc._quintet(text, position)) & 0xFFF
            acc_bits += 5
            if acc_bits >= 8:
                acc_bits -= 8
                out.append((acc >> acc_bits) & 0xFF)
        return bytes(out)

    @staticmethod
    def _fast_b32encode(data: bytes) -> str:
        """NumPy-accelerated encoding, identical output to the scalar loop."""
        np = letc.np
        arr = np.frombuffer(data, dtype=np.uint8)
        out_len = (len(arr) * 8 + 4) // 5

        # Pad to multiple of 5 bytes
        pad_len = (5 - len(arr) % 5) % 5
        if pad_len:
            arr = np.concatenate([arr, np.zeros(pad_len, dtype=np.uint8)])

        # Reshape into groups of 5 bytes (40 bits each)
        groups = arr.reshape(-1, 5)

        # Extract 8 x 5-bit values from each 40-bit group
        out = np.empty((len(groups), 8), dtype=np.uint8)
        out[:, 0] = groups[:, 0] >> 3
        out[:, 1] = ((groups[:, 0] & 0x07) << 2) | (groups[:, 1] >> 6)
        out[:, 2] = (groups[:, 1] >> 1) & 0x1F
        out[:, 3] = ((groups[:, 1] & 0x01) << 4) | (groups[:, 2] >> 4)
        out[:, 4] = ((groups[:, 2] & 0x0F) << 1) | (groups[:, 3] >> 7)
        out[:, 5] = (groups[:, 3] >> 2) & 0x1F
        out[:, 6] = ((groups[:, 3] & 0x03) << 3) | (groups[:, 4] >> 5)
        out[:, 7] = groups[:, 4] & 0x1F

        lut = np.frombuffer(letc._ENCODE_LUT, dtype=np.uint8)
        return lut[out.ravel()[:out_len]].tobytes().decode("ascii")

    @staticmethod
    def _fast_b32decode(text: str) -> bytes:
        np = letc.np
        arr = np.frombuffer(text.encode("ascii"), dtype=np.uint8)
        lut = np.frombuffer(letc._DECODE_LUT, dtype=np.uint8)
        vals = lut[arr]
        bad = np.flatnonzero(vals == 255)
        if bad.size:
            position = int(bad[0])
            raise InvalidCharacterError(text[position], position)
        out_len = len(vals) * 5 // 8

        # Pad to multiple of 8
        pad_to_8 = (8 - len(vals) % 8) % 8
        if pad_to_8:
            vals = np.concatenate([vals, np.zeros(pad_to_8, dtype=np.uint8)])

        # Combine 8 x 5-bit values into 5 bytes
        groups = vals.reshape(-1, 8)
        out = np.empty((len(groups), 5), dtype=np.uint8)
        out[:, 0] = (groups[:, 0] << 3) | (groups[:, 1] >> 2)
        out[:, 1] = (groups[:, 1] << 6) | (groups[:, 2] << 1) | (groups[:, 3] >> 4)
        out[:, 2] = (groups[:, 3] << 4) | (groups[:, 4] >> 1)
        out[:, 3] = (groups[:, 4] << 7) | (groups[:, 5] << 2) | (groups[:, 6] >> 3)
        out[:, 4] = (groups[:, 6] << 5) | groups[:, 7]
        return out.ravel()[:out_len].tobytes()

    # ------------------------------------------------------------------
    # Length-framed envelope
    # ------------------------------------------------------------------

    @staticmethod
    def frame(data: "letc.typing.Union[bytes, bytearray, memoryview]") -> bytes:
        raw = letc.to_bytes(data)
        return letc.concat_bytes(letc.u32be(len(raw)), raw)

    @staticmethod
    def unframe(data: "letc.typing.Union[bytes, bytearray, memoryview]") -> bytes:
        """Return exactly the declared payload; trailing pad bytes are discarded."""
        buf = bytes(data)
        if len(buf) < letc.LENGTH_PREFIX_LEN:
            raise InvalidInputError()
        length = letc.read_u32be(buf, 0)
        payload = buf[letc.LENGTH_PREFIX_LEN:]
        if len(payload) < length:
            raise TruncatedInputError()
        return payload[:length]

    @staticmethod
    def encode_with_length(data: "letc.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        return letc.b32encode(letc.frame(letc.to_bytes(data)))

    @staticmethod
    def decode_with_length(text: str) -> bytes:
        return letc.unframe(letc.b32decode(text))

    # ------------------------------------------------------------------
    # Substitution cipher
    # ------------------------------------------------------------------

    @staticmethod
    def substitute(text: str, forward: bool = True) -> str:
        table = letc._DISGUISE_FORWARD if forward else letc._DISGUISE_REVERSE
        return text.translate(table)

    @staticmethod
    def to_disguise(text: str) -> str:
        return letc.substitute(text, forward=True)

    @staticmethod
    def from_disguise(text: str) -> str:
        return letc.substitute(text, forward=False)

    # ------------------------------------------------------------------
    # Mnemonic word codec
    # ------------------------------------------------------------------

    @staticmethod
    def normalize_words(text: str) -> str:
        text = (text or "").lower()
        text = letc._WORD_BREAKS.sub(" ", text)
        text = letc._WORD_PUNCTUATION.sub(" ", text)
        text = letc._WORD_SPACES.sub(" ", text)
        return text.strip()

    @staticmethod
    def encode_words(
        data: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        wordlist: "letc.typing.Optional[Wordlist]" = None
    ) -> str:
        """Frame ``data`` and spell it as 13-bit dictionary words."""
        words = wordlist if wordlist is not None else Wordlist.default()
        bits = Wordlist.BITS
        mask = Wordlist.MASK
        out = []
        acc = 0
        acc_bits = 0
        for byte in letc.frame(letc.to_bytes(data)):
            acc = ((acc << 8) | byte) & 0xFFFFF
            acc_bits += 8
            while acc_bits >= bits:
                acc_bits -= bits
                out.append(words[(acc >> acc_bits) & mask])
        if acc_bits:
            out.append(words[(acc << (bits - acc_bits)) & mask])
        return " ".join(out)

    @staticmethod
    def decode_words(
        text: str,
        wordlist: "letc.typing.Optional[Wordlist]" = None
    ) -> bytes:
        words = wordlist if wordlist is not None else Wordlist.default()
        normalized = letc.normalize_words(text)
        if not normalized:
            raise EmptyInputError()
        bits = Wordlist.BITS
        out = bytearray()
        acc = 0
        acc_bits = 0
        for position, word in enumerate(normalized.split(" "), start=1):
            index = words.index_of(word)
            if index is None:
                raise UnknownWordError(word, position)
            acc = ((acc << bits) | index) & 0xFFFFF
            acc_bits += bits
            while acc_bits >= 8:
                acc_bits -= 8
                out.append((acc >> acc_bits) & 0xFF)
        return letc.unframe(out)

    # ------------------------------------------------------------------
    # AEAD envelope
    # ------------------------------------------------------------------

    @staticmethod
    def _warn_weak_kdf() -> None:
        if letc._WARNED_WEAK_KDF or letc._TEST_KDF_ITERS is None:
            return
        letc._WARNED_WEAK_KDF = True
        _warnings_module.warn(
            f"LETC_TEST_KDF_ITERS={letc._TEST_KDF_ITERS} overrides PBKDF2 iterations; "
            "envelopes produced now will not decrypt elsewhere.",
            RuntimeWarning,
            stacklevel=2
        )

    @staticmethod
    def compression_available() -> bool:
        return letc.ENABLE_COMPRESSION and letc.zlib is not None

    @staticmethod
    def _derive_key(
        password: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        salt: bytes,
        iterations: "letc.typing.Optional[int]" = None
    ) -> bytes:
        return letc.hashlib.pbkdf2_hmac(
            letc.KDF_HASH,
            letc._coerce_password_bytes(password),
            salt,
            iterations or letc.KDF_ITERATIONS,
            dklen=letc.KEY_LEN
        )

    @staticmethod
    def _compress(raw: bytes) -> "letc.typing.Optional[bytes]":
        if not letc.compression_available():
            return None
        compressor = letc.zlib.compressobj(letc.COMPRESS_LEVEL, letc.zlib.DEFLATED, letc.GZIP_WBITS)
        return compressor.compress(raw) + compressor.flush()

    @staticmethod
    def _decompress(blob: bytes) -> bytes:
        if letc.zlib is None:
            raise CompressedPayloadError("payload is compressed but compression support is unavailable")
        try:
            return letc.zlib.decompress(blob, letc.INFLATE_WBITS)
        except letc.zlib.error as exc:
            raise CompressedPayloadError("corrupted compressed payload") from exc

    @staticmethod
    def encrypt(
        plaintext: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        password: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        *,
        version: "letc.typing.Optional[int]" = None
    ) -> bytes:
        """Seal ``plaintext`` into ``version | flags | salt | nonce | ct+tag``.

        Version 1 envelopes (no flags byte, never compressed) can still be
        produced for old readers. Compression is kept only when it saves more
        than the flag byte it costs.
        """
        version = letc.ENVELOPE_VERSION if version is None else version
        if version not in letc.SUPPORTED_VERSIONS:
            raise UnsupportedVersionError(version)
        raw = letc.to_bytes(plaintext)
        flags = 0
        body = raw
        if version >= 2:
            packed = letc._compress(raw)
            if packed is not None and len(packed) + 1 < len(raw):
                flags |= letc.FLAG_COMPRESSED
                body = packed
        salt = letc.random_bytes(letc.SALT_LEN)
        nonce = letc.random_bytes(letc.NONCE_LEN)
        key = letc._derive_key(password, salt)
        ct = letc.AESGCM(key).encrypt(nonce, body, None)
        header = bytes([version, flags]) if version >= 2 else bytes([version])
        return letc.concat_bytes(header, salt, nonce, ct)

    @staticmethod
    def decrypt_bytes(
        envelope: "letc.typing.Union[bytes, bytearray, memoryview]",
        password: "letc.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> bytes:
        blob = bytes(envelope)
        if not blob:
            raise InvalidInputError()
        version = blob[0]
        if version not in letc.SUPPORTED_VERSIONS:
            raise UnsupportedVersionError(version)
        offset = 1
        flags = 0
        if version >= 2:
            if len(blob) < 2:
                raise AuthenticationError()
            flags = blob[1]
            offset = 2
        if len(blob) < offset + letc.SALT_LEN + letc.NONCE_LEN + letc.TAG_LEN:
            raise AuthenticationError()
        salt = blob[offset:offset + letc.SALT_LEN]
        offset += letc.SALT_LEN
        nonce = blob[offset:offset + letc.NONCE_LEN]
        offset += letc.NONCE_LEN
        ct = blob[offset:]
        key = letc._derive_key(password, salt)
        try:
            body = letc.AESGCM(key).decrypt(nonce, ct, None)
        except letc.InvalidTag:
            raise AuthenticationError() from None
        if flags & letc.FLAG_COMPRESSED:
            return letc._decompress(body)
        return body

    @staticmethod
    def decrypt(
        envelope: "letc.typing.Union[bytes, bytearray, memoryview]",
        password: "letc.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> str:
        return letc._decode_text(letc.decrypt_bytes(envelope, password))

    # ------------------------------------------------------------------
    # Pipeline composer
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_pipelines() -> "dict[Mode, letc.Pipeline]":
        def resolve(names):
            return tuple(
                letc.Stage(name, getattr(letc, name), name in letc._WORDLIST_STAGES)
                for name in names
            )
        return {
            mode: letc.Pipeline(resolve(encode), resolve(decode))
            for mode, (encode, decode) in letc.PIPELINE_STAGES.items()
        }

    @staticmethod
    def pipeline(mode: "Mode | str") -> "letc.Pipeline":
        return letc.PIPELINES[Mode.parse(mode)]

    @staticmethod
    def _run_stages(stages, value, wordlist: "letc.typing.Optional[Wordlist]"):
        for stage in stages:
            value = stage.func(value, wordlist) if stage.uses_wordlist else stage.func(value)
        return value

    @staticmethod
    def _require_password(password) -> None:
        if password is None or not letc._coerce_password_bytes(password):
            raise MissingPasswordError()

    @staticmethod
    def encode_mode(
        mode: "Mode | str",
        data: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        encryption_enabled: bool = False,
        password: "letc.typing.Union[str, bytes, None]" = None,
        *,
        wordlist: "letc.typing.Optional[Wordlist]" = None
    ) -> str:
        """Run ``data`` through the optional envelope and the mode's encode chain."""
        selected = letc.pipeline(mode)
        payload = letc.to_bytes(data)
        if encryption_enabled:
            letc._require_password(password)
            payload = letc.encrypt(payload, password)
        return letc._run_stages(selected.encode, payload, wordlist)

    @staticmethod
    def decode_mode_bytes(
        mode: "Mode | str",
        text: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        encryption_enabled: bool = False,
        password: "letc.typing.Union[str, bytes, None]" = None,
        *,
        wordlist: "letc.typing.Optional[Wordlist]" = None
    ) -> bytes:
        selected = letc.pipeline(mode)
        if encryption_enabled:
            letc._require_password(password)
        packed = letc._run_stages(selected.decode, letc._coerce_text(text).strip(), wordlist)
        if encryption_enabled:
            return letc.decrypt_bytes(packed, password)
        return packed

    @staticmethod
    def decode_mode(
        mode: "Mode | str",
        text: "letc.typing.Union[str, bytes, bytearray, memoryview]",
        encryption_enabled: bool = False,
        password: "letc.typing.Union[str, bytes, None]" = None,
        *,
        wordlist: "letc.typing.Optional[Wordlist]" = None
    ) -> str:
        return letc._decode_text(
            letc.decode_mode_bytes(mode, text, encryption_enabled, password, wordlist=wordlist)
        )


letc.PIPELINES = letc._resolve_pipelines()

# Emit a one-time warning at import if the KDF test override is active
letc._warn_weak_kdf()


def cli(argv=None) -> int:
    import argparse
    import getpass

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("LETC_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        return not _sys_module.stdout.isatty()

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"
            self.cyan = "" if plain else "\033[36m"

        def _wrap(self, msg: str, color: str) -> str:
            if self.plain:
                return msg
            return f"{self.bold}{color}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green)

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red)

        def info(self, msg: str) -> str:
            return self._wrap(msg, self.cyan)

    theme = _CliTheme(_cli_plain_mode())
    mode_names = [mode.value for mode in Mode] + [mode.alias for mode in Mode]

    parser = argparse.ArgumentParser(prog="letc", description="LetC text encoder")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encode", "Encode text (optionally encrypted) into the selected output style"),
        ("decode", "Decode text produced by 'encode' back to the original"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("text", nargs="?", help="Input text (default: read --input or stdin)")
        sub.add_argument("-m", "--mode", default=Mode.PLAIN_BASE32.value, choices=mode_names,
                         help="Output style (default: zb32)")
        sub.add_argument("-i", "--input", help="Read input from this file")
        sub.add_argument("-o", "--output", help="Write the result to this file")
        secret = sub.add_mutually_exclusive_group()
        secret.add_argument("-p", "--password", help="Encrypt/decrypt with this password")
        secret.add_argument("--password-env", metavar="VAR",
                            help="Read the password from environment variable VAR")
        secret.add_argument("--ask-password", action="store_true",
                            help="Prompt for the password")

    subparsers.add_parser("modes", help="List the available output styles")

    args = parser.parse_args(argv)

    if args.command == "modes":
        for mode in Mode:
            print(f"{theme.info(f'{mode.value:<14}')} {mode.alias}")
        return 0

    if args.text is not None:
        source = args.text
    elif args.input:
        source = letc.pathlib.Path(args.input).read_text(encoding="utf-8")
    else:
        source = _sys_module.stdin.read()

    password = args.password
    if args.password_env:
        password = _os_module.getenv(args.password_env)
        if not password:
            print(theme.err(f"environment variable {args.password_env} is empty or unset"),
                  file=_sys_module.stderr)
            return 1
    elif args.ask_password:
        password = getpass.getpass("Password: ")
    encrypted = password is not None

    try:
        if args.command == "encode":
            result = letc.encode_mode(args.mode, source, encrypted, password)
        else:
            result = letc.decode_mode(args.mode, source, encrypted, password)
    except LetCError as exc:
        print(theme.err(f"{args.command} failed: {exc}"), file=_sys_module.stderr)
        return 1

    if args.output:
        letc.pathlib.Path(args.output).write_text(result, encoding="utf-8")
        print(theme.ok(f"wrote {args.output}"))
    else:
        print(result)
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
