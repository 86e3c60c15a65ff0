import io
import tempfile
import unittest
from pathlib import Path

from wordladder.core.constants import NeighborStrategy, SearchMode
from wordladder.data.lexicon import Lexicon, LexiconConfig
from wordladder.engine.game import GameConfig, WordLadderGame
from wordladder.engine.search import SearchConfig
from wordladder.utils.pretty import changed_position, format_ladder, print_ladder_stats


class WordLadderGameTests(unittest.TestCase):
    def setUp(self) -> None:
        lexicon = Lexicon.from_stream(io.StringIO("cat\ncot\ncog\ndog\ndot\nCAT\n"))
        self.game = WordLadderGame(lexicon)

    def test_basic_queries(self) -> None:
        self.assertEqual(self.game.word_count(), 5)
        self.assertTrue(self.game.is_word("Cog"))
        self.assertFalse(self.game.is_word("cut"))
        self.assertEqual(self.game.get_hamming_distance("cat", "cot"), 1)
        self.assertEqual(self.game.get_hamming_distance("cat", "cats"), -1)
        self.assertEqual(self.game.get_neighbors("cot"), ["cat", "cog", "dot"])

    def test_ladders(self) -> None:
        self.assertEqual(self.game.get_min_ladder("cat", "dog"), ["cat", "cot", "cog", "dog"])
        self.assertEqual(self.game.get_ladder("cat", "dog"), ["cat", "cot", "cog", "dog"])
        self.assertEqual(self.game.get_min_ladder("cat", "dogs"), [])

    def test_is_word_ladder(self) -> None:
        self.assertTrue(self.game.is_word_ladder(["cat", "cot", "dot"]))
        self.assertFalse(self.game.is_word_ladder(["cat", "dog"]))
        self.assertFalse(self.game.is_word_ladder(["cat"]))

    def test_validate_checks_membership(self) -> None:
        self.assertTrue(self.game.validate(["cat", "cot"]).ok)
        self.assertFalse(self.game.validate(["cat", "cut"]).ok)

    def test_solve_reports_result(self) -> None:
        result = self.game.solve("cat", "dog", SearchMode.DFS)
        self.assertTrue(result.found)
        self.assertEqual(result.hops, 3)
        self.assertGreater(result.expanded, 0)
        payload = result.to_jsonable()
        self.assertEqual(payload["mode"], "dfs")
        self.assertEqual(payload["ladder"], ["cat", "cot", "cog", "dog"])

    def test_solve_accepts_mode_strings(self) -> None:
        self.assertEqual(self.game.solve("cat", "dog", "bfs").mode, SearchMode.BFS)

    def test_scan_strategy_and_exhaustive_config(self) -> None:
        lexicon = Lexicon(["aaa", "aac", "bac", "bbc", "bba"])
        greedy = WordLadderGame(lexicon, GameConfig(neighbor_strategy=NeighborStrategy.SCAN))
        exhaustive = WordLadderGame(
            lexicon,
            GameConfig(
                neighbor_strategy=NeighborStrategy.SCAN,
                search=SearchConfig(exhaustive_dfs=True),
            ),
        )
        self.assertEqual(greedy.get_ladder("aaa", "bba"), [])
        self.assertEqual(exhaustive.get_ladder("aaa", "bba"), ["aaa", "aac", "bac", "bbc", "bba"])

    def test_independent_games_share_nothing(self) -> None:
        other = WordLadderGame(Lexicon(["cat", "cut"]))
        self.assertEqual(other.get_neighbors("cat"), ["cut"])
        self.assertEqual(self.game.get_neighbors("cat"), ["cot"])

    def test_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("cat\ncot\n", encoding="utf-8")
            game = WordLadderGame.from_config(LexiconConfig(path=words))
        self.assertEqual(game.get_min_ladder("cat", "cot"), ["cat", "cot"])


class PrettyTests(unittest.TestCase):
    def test_changed_position(self) -> None:
        self.assertEqual(changed_position("cat", "cot"), 1)
        self.assertIsNone(changed_position("cat", "dog"))
        self.assertIsNone(changed_position("cat", "cats"))

    def test_format_ladder_highlights_change(self) -> None:
        rendered = format_ladder(["cat", "cot", "cog"])
        self.assertEqual(rendered.splitlines(), ["  0  cat", "  1  cOt", "  2  coG"])
        self.assertEqual(format_ladder([]), "(no ladder)")

    def test_print_ladder_stats(self) -> None:
        lexicon = Lexicon(["cat", "cot", "cats"])
        result = WordLadderGame(lexicon).solve("cat", "cot")
        stream = io.StringIO()
        print_ladder_stats(result, lexicon, stream=stream)
        output = stream.getvalue()
        self.assertIn("Hops:          1", output)
        self.assertIn("Same length:   2", output)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
