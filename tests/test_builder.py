import unittest

from gridcypher.core.constants import DIRECTION_STEPS, DiagonalMode, Direction, all_directions
from gridcypher.core.exceptions import InvalidCharacterError
from gridcypher.engine.builder import build_trie
from gridcypher.engine.grid import CorpusGrid
from gridcypher.engine.selection import RandomSelection

RIGHT = Direction.RIGHT
LEFT = Direction.LEFT

SQUARE = CorpusGrid.from_pages([["abc", "def", "ghi"]])


class BuildTrieTests(unittest.TestCase):
    def test_right_only(self) -> None:
        trie = build_trie(CorpusGrid.from_pages([["abc", "def"]]), RIGHT)
        self.assertEqual(trie.search("bc", RIGHT), (2, [(0, 0, 1, 2, RIGHT)]))
        self.assertEqual(trie.search("cd", RIGHT).matched, 1)

    def test_candidates_follow_direction_order(self) -> None:
        trie = build_trie(CorpusGrid.from_pages([["aba"]]), RIGHT | LEFT)
        self.assertEqual(
            trie.search("ab", RIGHT | LEFT).candidates,
            [(0, 0, 0, 2, RIGHT), (0, 0, 2, 2, LEFT)],
        )

    def test_vertical_directions(self) -> None:
        trie = build_trie(SQUARE, Direction.UP | Direction.DOWN)
        self.assertEqual(trie.search("adg", Direction.DOWN), (3, [(0, 0, 0, 3, Direction.DOWN)]))
        self.assertEqual(trie.search("ifc", Direction.UP), (3, [(0, 2, 2, 3, Direction.UP)]))
        self.assertEqual(trie.search("abc", Direction.DOWN).matched, 1)

    def test_pages_do_not_share_rays(self) -> None:
        grid = CorpusGrid.from_pages([["ab"], ["cd"]])
        trie = build_trie(grid, Direction.DOWN)
        self.assertEqual(trie.search("ac", Direction.DOWN).matched, 1)
        self.assertEqual(trie.search("c", Direction.DOWN).candidates, [(1, 0, 0, 1, Direction.DOWN)])

    def test_separate_diagonals(self) -> None:
        trie = build_trie(SQUARE, all_directions(DiagonalMode.SEPARATE))
        cases = [
            ("aei", Direction.RIGHT_DOWN, (0, 0, 0, 3)),
            ("iea", Direction.LEFT_UP, (0, 2, 2, 3)),
            ("ceg", Direction.LEFT_DOWN, (0, 0, 2, 3)),
            ("gec", Direction.RIGHT_UP, (0, 2, 0, 3)),
        ]
        for term, flag, location in cases:
            with self.subTest(term=term):
                self.assertEqual(
                    trie.search(term, all_directions(DiagonalMode.SEPARATE)),
                    (3, [(*location, flag)]),
                )
        self.assertEqual(trie.search("aei", RIGHT), (1, [(0, 0, 0, 1, RIGHT)]))

    def test_combined_diagonal_records_each_vector(self) -> None:
        trie = build_trie(SQUARE, Direction.DIAGONAL)
        self.assertEqual(
            trie.search("e", Direction.DIAGONAL).candidates,
            [(0, 1, 1, 1, Direction.DIAGONAL)] * 4,
        )
        self.assertEqual(trie.search("aei", Direction.DIAGONAL).matched, 3)
        self.assertEqual(trie.search("gec", Direction.DIAGONAL).matched, 3)
        self.assertEqual(trie.search("ab", Direction.DIAGONAL).matched, 1)

    def test_mixed_case_corpus(self) -> None:
        trie = build_trie(CorpusGrid.from_pages([["HeLLo"]]), RIGHT)
        self.assertEqual(trie.search("hello", RIGHT), (5, [(0, 0, 0, 5, RIGHT)]))

    def test_empty_direction_set_builds_empty_index(self) -> None:
        trie = build_trie(SQUARE, Direction(0))
        self.assertEqual(trie.node_count(), 0)
        self.assertEqual(trie.search("a", RIGHT), (0, []))

    def test_selection_is_passed_through(self) -> None:
        selection = RandomSelection(seed=3)
        self.assertIs(build_trie(SQUARE, RIGHT, selection=selection).selection, selection)

    def test_building_twice_gives_the_same_index(self) -> None:
        directions = all_directions(DiagonalMode.SEPARATE)
        first = build_trie(SQUARE, directions)
        second = build_trie(SQUARE, directions)
        self.assertEqual(first.node_count(), second.node_count())
        self.assertEqual(first.location_count(), second.location_count())
        for term in ["a", "ae", "fed", "cfi", "gdahi"]:
            with self.subTest(term=term):
                self.assertEqual(first.search(term, directions), second.search(term, directions))

    def test_every_ray_prefix_is_indexed(self) -> None:
        grid = CorpusGrid.from_pages([["abcd", "efg", "hijkl"], ["mn", "op"]])
        directions = all_directions(DiagonalMode.SEPARATE)
        trie = build_trie(grid, directions)
        for page, row, col, _ in grid.cells():
            for flag in directions.flags():
                ((step_row, step_col),) = DIRECTION_STEPS[flag]
                ray = grid.ray(page, row, col, step_row, step_col)
                for length in range(1, len(ray) + 1):
                    matched, candidates = trie.search(ray[:length], flag)
                    self.assertEqual(matched, length)
                    self.assertIn((page, row, col, length, flag), candidates)


class BuildTrieInvalidCharacterTests(unittest.TestCase):
    def test_reports_the_offending_cell_along_a_row(self) -> None:
        grid = CorpusGrid.from_pages([["ab", "c1"]])
        with self.assertRaises(InvalidCharacterError) as ctx:
            build_trie(grid, RIGHT)
        error = ctx.exception
        self.assertEqual((error.char, error.page, error.row, error.col), ("1", 0, 1, 1))
        self.assertEqual(error.offset, 0)

    def test_reports_the_offending_cell_along_a_column(self) -> None:
        grid = CorpusGrid.from_pages([["ab", "c?"]])
        with self.assertRaises(InvalidCharacterError) as ctx:
            build_trie(grid, Direction.DOWN)
        self.assertEqual((ctx.exception.row, ctx.exception.col), (1, 1))
        self.assertIn("page 0, row 1, col 1", str(ctx.exception))

    def test_logs_the_failure(self) -> None:
        grid = CorpusGrid.from_pages([["a b"]])
        with self.assertLogs("gridcypher.engine.builder", level="ERROR"):
            with self.assertRaises(InvalidCharacterError):
                build_trie(grid, RIGHT)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
