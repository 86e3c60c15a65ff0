import unittest

from wordladder.core.constants import LENGTH_MISMATCH, NeighborStrategy
from wordladder.data.lexicon import Lexicon
from wordladder.engine.distance import hamming_distance
from wordladder.engine.neighbors import find_neighbors, neighbor_function, scan_neighbors

WORDS = [
    "bag", "bat", "big", "bog", "cab", "cat", "cob", "cog", "cot",
    "dog", "dot", "hat", "hog", "hot", "cats", "dogs", "a", "i",
]


class HammingDistanceTests(unittest.TestCase):
    def test_self_distance_is_zero(self) -> None:
        for word in WORDS:
            self.assertEqual(hamming_distance(word, word), 0)

    def test_counts_differing_positions(self) -> None:
        self.assertEqual(hamming_distance("cat", "cot"), 1)
        self.assertEqual(hamming_distance("cat", "dog"), 3)
        self.assertEqual(hamming_distance("", ""), 0)

    def test_is_case_insensitive(self) -> None:
        self.assertEqual(hamming_distance("CAT", "cot"), 1)
        self.assertEqual(hamming_distance("Dog", "dOG"), 0)

    def test_unequal_lengths_yield_sentinel(self) -> None:
        self.assertEqual(hamming_distance("cat", "cats"), LENGTH_MISMATCH)
        self.assertEqual(hamming_distance("", "a"), LENGTH_MISMATCH)


class NeighborTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lexicon = Lexicon(WORDS)

    def test_neighbors_in_lexicon_order(self) -> None:
        self.assertEqual(find_neighbors("cot", self.lexicon), ["cat", "cob", "cog", "dot", "hot"])

    def test_neighbors_exclude_word_and_other_lengths(self) -> None:
        for word in self.lexicon:
            neighbors = find_neighbors(word, self.lexicon)
            self.assertNotIn(word, neighbors)
            for neighbor in neighbors:
                self.assertEqual(len(neighbor), len(word))
                self.assertEqual(hamming_distance(word, neighbor), 1)

    def test_non_member_still_gets_neighbors(self) -> None:
        self.assertFalse(self.lexicon.contains("cut"))
        self.assertEqual(find_neighbors("CUT", self.lexicon), ["cat", "cot"])

    def test_single_letter_words(self) -> None:
        self.assertEqual(find_neighbors("a", self.lexicon), ["i"])

    def test_index_matches_scan(self) -> None:
        for word in list(self.lexicon) + ["cut", "zzz", "xy"]:
            self.assertEqual(
                find_neighbors(word, self.lexicon), scan_neighbors(word, self.lexicon), word
            )

    def test_strategy_selection(self) -> None:
        self.assertIs(neighbor_function(NeighborStrategy.SCAN), scan_neighbors)
        self.assertIs(neighbor_function(NeighborStrategy.INDEX), find_neighbors)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
