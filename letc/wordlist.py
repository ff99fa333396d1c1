"""Fixed 8192-entry dictionary used by the mnemonic word codec."""

import os as _os_module
import pathlib
import threading
import typing
from importlib import resources

from .errors import WordlistError


class Wordlist:
    """Immutable word table: index <-> word, 13 bits per word.

    Built once from any iterable of at least ``RADIX`` strings. Only the
    first ``RADIX`` entries are used; they are lowercased and must be unique.
    """

    RADIX = 8192
    BITS = 13
    MASK = RADIX - 1
    ENV_PATH = "LETC_WORDLIST"

    __slots__ = ("_words", "_index")

    _DEFAULT: typing.ClassVar[typing.Optional["Wordlist"]] = None
    _DEFAULT_LOCK: typing.ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, words: typing.Iterable[str]) -> None:
        if words is None:
            raise WordlistError("wordlist missing")
        items = [str(w) for w in words]
        if len(items) < self.RADIX:
            raise WordlistError(f"wordlist must have at least {self.RADIX} words")
        table = tuple(w.lower() for w in items[:self.RADIX])
        index: dict[str, int] = {}
        for i, word in enumerate(table):
            if word in index:
                raise WordlistError(f'duplicate word in first {self.RADIX}: "{word}"')
            index[word] = i
        object.__setattr__(self, "_words", table)
        object.__setattr__(self, "_index", index)

    def __setattr__(self, name, value):
        raise AttributeError("Wordlist is immutable")

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"<Wordlist {len(self._words)} words: {self._words[0]!r}..{self._words[-1]!r}>"

    def index_of(self, word: str) -> typing.Optional[int]:
        return self._index.get(word)

    @classmethod
    def from_file(cls, path: "typing.Union[str, _os_module.PathLike]") -> "Wordlist":
        text = pathlib.Path(path).expanduser().read_text(encoding="utf-8")
        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str) -> "Wordlist":
        return cls(line.strip() for line in text.splitlines() if line.strip())

    @classmethod
    def bundled(cls) -> "Wordlist":
        text = resources.files("letc").joinpath("wordlist.txt").read_text(encoding="utf-8")
        return cls.from_text(text)

    @classmethod
    def default(cls) -> "Wordlist":
        """Process-wide dictionary, built on first use and shared read-only.

        ``LETC_WORDLIST`` points at a replacement file; otherwise the bundled
        list is used. A bad list raises every time, nothing is cached.
        """
        if cls._DEFAULT is not None:
            return cls._DEFAULT
        with cls._DEFAULT_LOCK:
            if cls._DEFAULT is None:
                override = _os_module.getenv(cls.ENV_PATH)
                wordlist = cls.from_file(override) if override else cls.bundled()
                cls._DEFAULT = wordlist
        return cls._DEFAULT

    @classmethod
    def _reset_default(cls) -> None:
        with cls._DEFAULT_LOCK:
            cls._DEFAULT = None


__all__ = ["Wordlist"]
