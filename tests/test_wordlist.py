import os
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

try:
    from letc.errors import WordlistError
    from letc.main import letc
    from letc.wordlist import Wordlist
except ModuleNotFoundError as exc:  # pragma: no cover - dependency missing
    Wordlist = None
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


def _words(count, prefix="w"):
    return [f"{prefix}{i:05d}" for i in range(count)]


@unittest.skipIf(Wordlist is None, f"dependency unavailable: {_IMPORT_ERROR}")
class WordlistTests(unittest.TestCase):
    def setUp(self) -> None:
        Wordlist._reset_default()

    def tearDown(self) -> None:
        Wordlist._reset_default()

    def test_bundled_list(self):
        bundled = Wordlist.bundled()
        self.assertEqual(len(bundled), Wordlist.RADIX)
        self.assertEqual(bundled[0], "baba")
        self.assertEqual(bundled[1], "babe")
        self.assertEqual(bundled[Wordlist.RADIX - 1], "zouzo")
        self.assertEqual(bundled.index_of("zouzo"), Wordlist.RADIX - 1)
        self.assertIsNone(bundled.index_of("zzzz"))

    def test_one_word_short(self):
        with self.assertRaises(WordlistError) as ctx:
            Wordlist(_words(Wordlist.RADIX - 1))
        self.assertEqual(str(ctx.exception), "wordlist must have at least 8192 words")

    def test_missing(self):
        with self.assertRaises(WordlistError):
            Wordlist(None)

    def test_duplicate_in_window(self):
        words = _words(Wordlist.RADIX)
        words[100] = words[5]
        with self.assertRaises(WordlistError) as ctx:
            Wordlist(words)
        self.assertIn('duplicate word in first 8192: "w00005"', str(ctx.exception))

    def test_case_duplicates_collide(self):
        words = _words(Wordlist.RADIX)
        words[7] = words[3].upper()
        with self.assertRaises(WordlistError):
            Wordlist(words)

    def test_extra_words_ignored(self):
        words = _words(Wordlist.RADIX) + ["w00000", "extra"]
        table = Wordlist(words)
        self.assertEqual(len(table), Wordlist.RADIX)
        self.assertNotIn("extra", table)

    def test_lowercased(self):
        table = Wordlist(_words(Wordlist.RADIX, prefix="W"))
        self.assertEqual(table[1], "w00001")
        self.assertEqual(table.index_of("w00001"), 1)

    def test_immutable(self):
        table = Wordlist(_words(Wordlist.RADIX))
        with self.assertRaises(AttributeError):
            table._words = ()

    def test_from_text_skips_blank_lines(self):
        text = "\n\n".join(_words(Wordlist.RADIX)) + "\n   \n"
        table = Wordlist.from_text(text)
        self.assertEqual(table[Wordlist.RADIX - 1], f"w{Wordlist.RADIX - 1:05d}")

    def test_default_is_shared(self):
        self.assertIs(Wordlist.default(), Wordlist.default())

    def test_env_override(self):
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "words.txt"
            path.write_text("\n".join(_words(Wordlist.RADIX, prefix="x")), encoding="utf-8")
            with mock.patch.dict(os.environ, {Wordlist.ENV_PATH: str(path)}):
                Wordlist._reset_default()
                self.assertEqual(Wordlist.default()[0], "x00000")
                self.assertEqual(letc.encode_words(b""), "x00000 x00000 x00000")

    def test_bad_env_override_not_cached(self):
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / "short.txt"
            path.write_text("\n".join(_words(10)), encoding="utf-8")
            with mock.patch.dict(os.environ, {Wordlist.ENV_PATH: str(path)}):
                Wordlist._reset_default()
                with self.assertRaises(WordlistError):
                    Wordlist.default()
                with self.assertRaises(WordlistError):
                    letc.decode_words("baba baba baba")
        Wordlist._reset_default()
        self.assertEqual(Wordlist.default()[0], "baba")


if __name__ == "__main__":
    unittest.main()
