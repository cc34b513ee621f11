import unittest
from typing import List

from gridcypher.core.constants import Direction
from gridcypher.core.exceptions import (CypherError, EmptyPhraseError, LetterNotFoundError,
                                        PhraseUnmatchableError)
from gridcypher.engine.trie import CypherTrie, strip_phrase

RIGHT = Direction.RIGHT


def _trie(rows: List[str]) -> CypherTrie:
    trie = CypherTrie()
    for index, row in enumerate(rows):
        trie.insert_row(RIGHT, 0, index, row)
    return trie


SHARED_CASES = [
    ("single run", ["abc"], "abc", [(0, 0, 0, 3, RIGHT)]),
    ("multi part match", ["abcdefg"], "bab", [(0, 0, 1, 1, RIGHT), (0, 0, 0, 2, RIGHT)]),
    (
        "multi row match",
        ["fghooo", "ooabco", "oodeoo"],
        "abcdefgh",
        [(0, 1, 2, 3, RIGHT), (0, 2, 2, 2, RIGHT), (0, 0, 0, 3, RIGHT)],
    ),
    ("longest at front", ["abcdea", "aaabca", "aabcda"], "abcde", [(0, 0, 0, 5, RIGHT)]),
    (
        "longest in middle",
        ["bcdefa", "ooooog", "obcode"],
        "abcdefg",
        [(0, 0, 5, 1, RIGHT), (0, 0, 0, 5, RIGHT), (0, 1, 5, 1, RIGHT)],
    ),
]


class ConstructLTRTests(unittest.TestCase):
    def test_cases(self) -> None:
        cases = SHARED_CASES + [
            (
                "longest in middle with shorter ltr match",
                ["bcdefa", "abooog", "obcode"],
                "abcdefg",
                [(0, 1, 0, 2, RIGHT), (0, 0, 1, 4, RIGHT), (0, 1, 5, 1, RIGHT)],
            ),
        ]
        for description, rows, phrase, expected in cases:
            with self.subTest(description):
                self.assertEqual(_trie(rows).construct_ltr(phrase, RIGHT), expected)

    def test_spaces_and_case_are_ignored(self) -> None:
        self.assertEqual(_trie(["abc"]).construct_ltr("A b C", RIGHT), [(0, 0, 0, 3, RIGHT)])

    def test_empty_phrase(self) -> None:
        for phrase in ["", "   "]:
            with self.subTest(phrase=phrase):
                with self.assertRaises(EmptyPhraseError):
                    _trie(["abc"]).construct_ltr(phrase, RIGHT)

    def test_missing_letter(self) -> None:
        with self.assertRaises(LetterNotFoundError) as ctx:
            _trie(["abc"]).construct_ltr("d", RIGHT)
        self.assertEqual(ctx.exception.letter, "d")

    def test_missing_letter_mid_phrase_returns_nothing(self) -> None:
        with self.assertRaises(LetterNotFoundError) as ctx:
            _trie(["abc"]).construct_ltr("abx", RIGHT)
        self.assertEqual(ctx.exception.letter, "x")
        self.assertIsInstance(ctx.exception, CypherError)

    def test_letter_in_unrequested_direction_is_missing(self) -> None:
        with self.assertRaises(LetterNotFoundError):
            _trie(["abc"]).construct_ltr("abc", Direction.LEFT)


class ConstructLongestTests(unittest.TestCase):
    def test_cases(self) -> None:
        for description, rows, phrase, expected in SHARED_CASES:
            with self.subTest(description):
                self.assertEqual(_trie(rows).construct_longest(phrase, RIGHT), expected)

    def test_empty_phrase(self) -> None:
        with self.assertRaises(EmptyPhraseError):
            _trie(["abc"]).construct_longest("", RIGHT)

    def test_missing_letter(self) -> None:
        with self.assertRaises(PhraseUnmatchableError) as ctx:
            _trie(["abc"]).construct_longest("d", RIGHT)
        self.assertEqual(ctx.exception.phrase, "d")

    def test_unmatchable_subphrase_aborts_everything(self) -> None:
        with self.assertRaises(PhraseUnmatchableError) as ctx:
            _trie(["abcdef"]).construct_longest("abcdefz", RIGHT)
        self.assertEqual(ctx.exception.phrase, "z")

    def test_first_offset_wins_ties(self) -> None:
        trie = _trie(["ab", "cd"])
        match = trie.find_longest("abcd", RIGHT)
        self.assertEqual((match.index, match.matched), (0, 2))
        self.assertEqual(
            trie.construct_longest("abcd", RIGHT), [(0, 0, 0, 2, RIGHT), (0, 1, 0, 2, RIGHT)]
        )

    def test_scan_stops_once_a_run_exceeds_half_the_phrase(self) -> None:
        # Offset 1 would give "bcdef" (5 letters) from row 1, but offset 0
        # already gives 4 > 6 // 2, so the scan never reaches it.
        trie = _trie(["abcdxx", "bcdefz"])
        match = trie.find_longest("abcdef", RIGHT)
        self.assertEqual((match.index, match.matched), (0, 4))
        self.assertEqual(
            trie.construct_longest("abcdef", RIGHT),
            [(0, 0, 0, 4, RIGHT), (0, 1, 3, 2, RIGHT)],
        )

    def test_run_of_exactly_half_does_not_stop_the_scan(self) -> None:
        trie = _trie(["abxx", "bcd"])
        match = trie.find_longest("abcd", RIGHT)
        self.assertEqual((match.index, match.matched), (1, 3))

    def test_find_longest_without_candidates(self) -> None:
        match = _trie(["abc"]).find_longest("xyz", RIGHT)
        self.assertEqual((match.index, match.matched, match.candidates), (0, 0, []))

    def test_long_phrase_does_not_hit_recursion_limit(self) -> None:
        phrase = "a" * 1100
        parts = _trie(["a"]).construct_longest(phrase, RIGHT)
        self.assertEqual(len(parts), 1100)
        self.assertTrue(all(part == (0, 0, 0, 1, RIGHT) for part in parts))


class CoverageTests(unittest.TestCase):
    def test_run_lengths_sum_to_stripped_phrase(self) -> None:
        trie = _trie(["thequickbrown", "foxjumpsover", "thelazydog"])
        for phrase in ["the fox", "Quick Dog", "zebra over", "brown jumps the lazy fox"]:
            stripped = strip_phrase(phrase)
            for construct in (trie.construct_ltr, trie.construct_longest):
                with self.subTest(phrase=phrase, mode=construct.__name__):
                    parts = construct(phrase, RIGHT)
                    self.assertEqual(sum(part.length for part in parts), len(stripped))

    def test_runs_spell_the_phrase_in_order_for_ltr(self) -> None:
        rows = ["thequickbrown", "foxjumpsover", "thelazydog"]
        trie = _trie(rows)
        phrase = "brownfoxover"
        parts = trie.construct_ltr(phrase, RIGHT)
        spelled = "".join(rows[p.row][p.col:p.col + p.length] for p in parts)
        self.assertEqual(spelled, phrase)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
