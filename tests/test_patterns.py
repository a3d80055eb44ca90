import itertools
import unittest

import numpy as np

from wordscore.errors import InvalidWordError, InvalidWordLengthError
from wordscore.patterns import (
    BLANK,
    MAX_SCORE,
    compare_words,
    decode_words,
    discount_corpus,
    discount_word,
    encode_word,
    encode_words,
)


SAMPLE_WORDS = ["apple", "amble", "angle", "eerie", "crane", "cigar", "sissy", "slate", "least", "aabbb", "ababa"]


class TestEncoding(unittest.TestCase):

    def test_encode_word_letters_and_blanks(self):
        codes = encode_word("A b z")
        self.assertEqual(codes.dtype, np.uint8)
        self.assertEqual(codes.tolist(), [0, BLANK, 1, BLANK, 25])

    def test_encode_word_rejects_wrong_length(self):
        with self.assertRaises(InvalidWordLengthError):
            encode_word("toolong")
        with self.assertRaises(InvalidWordLengthError):
            encode_word("four")

    def test_encode_word_rejects_non_letters(self):
        with self.assertRaises(InvalidWordError):
            encode_word("ab1de")

    def test_encode_words_shape(self):
        codes = encode_words(["apple", "crane"])
        self.assertEqual(codes.shape, (2, 5))
        self.assertEqual(decode_words(codes), ["apple", "crane"])

    def test_encode_words_empty(self):
        self.assertEqual(encode_words([]).shape, (0, 5))


class TestCompareWords(unittest.TestCase):

    def test_word_matches_itself(self):
        for word in SAMPLE_WORDS:
            self.assertEqual(compare_words(word, word), MAX_SCORE)

    def test_disjoint_letters_score_zero(self):
        self.assertEqual(compare_words("abcde", "fghij"), 0)
        self.assertEqual(compare_words("crane", "muddy"), 0)

    def test_single_exact_match(self):
        self.assertEqual(compare_words("abcde", "afghi"), 3)

    def test_exact_and_repositioned_match(self):
        # a in place, e elsewhere
        self.assertEqual(compare_words("abcde", "aefgh"), 4)

    def test_repeated_letters_consumed_once(self):
        # exact a and b at 0 and 3, then one a and one b repositioned
        self.assertEqual(compare_words("aabbb", "ababa"), 8)
        # only one s in the answer to credit
        self.assertEqual(compare_words("sissy", "slate"), 3)
        self.assertEqual(compare_words("sassy", "essay"), 8)

    def test_exact_matches_resolved_before_repositioned(self):
        # Both e's of "eagle" go to exact matches, none left for index 1
        self.assertEqual(compare_words("eerie", "eagle"), 6)

    def test_case_insensitive(self):
        self.assertEqual(compare_words("CRANE", "crane"), MAX_SCORE)

    def test_score_is_combination_of_exact_and_repositioned_points(self):
        achievable = {
            3 * exact + moved
            for exact in range(6)
            for moved in range(6 - exact)
        }
        for original, candidate in itertools.product(SAMPLE_WORDS, repeat=2):
            score = compare_words(original, candidate)
            self.assertGreaterEqual(score, 0)
            self.assertLessEqual(score, MAX_SCORE)
            self.assertIn(score, achievable)

    def test_invalid_length_raises(self):
        with self.assertRaises(InvalidWordLengthError):
            compare_words("apples", "apple")


class TestDiscount(unittest.TestCase):

    def test_exact_then_repositioned_letters_blanked(self):
        self.assertEqual(discount_word("crane", "cigar"), " ig  ")

    def test_first_free_letter_is_blanked(self):
        self.assertEqual(discount_word("abcde", "xaaxx"), "x axx")

    def test_extra_instances_survive(self):
        self.assertEqual(discount_word("eagle", "eerie"), " eri ")
        self.assertEqual(compare_words("eagle", " eri "), 1)

    def test_no_credit_for_claimed_letters(self):
        for claimed, answer in [("crane", "cigar"), ("slate", "least"), ("amble", "apple")]:
            self.assertEqual(compare_words(claimed, discount_word(claimed, answer)), 0)
        self.assertEqual(discount_word("slate", "least"), "     ")

    def test_discount_corpus_keeps_order_and_input(self):
        answers = encode_words(["apple", "amble", "angle"])
        before = answers.copy()

        discounted = discount_corpus(answers, "amble")

        self.assertEqual(decode_words(discounted), [" pp  ", "     ", " ng  "])
        np.testing.assert_array_equal(answers, before)
        self.assertIsNot(discounted, answers)

    def test_discount_corpus_from_word_list(self):
        answers = ["apple", "angle"]
        discounted = discount_corpus(answers, "angle")
        self.assertEqual(decode_words(discounted), [" pp  ", "     "])
        self.assertEqual(answers, ["apple", "angle"])


if __name__ == "__main__":
    unittest.main()
