from random import Random
from unittest import TestCase

from gestalt.shared.bounds import length_bound, multiset_bound
from gestalt.shared.ratio import gestalt_ratio


class LengthBound(TestCase):
    def test_1(self) -> None:
        self.assertEqual(length_bound("", ""), 1.0)

    def test_2(self) -> None:
        self.assertEqual(length_bound("", "abc"), 0.0)

    def test_3(self) -> None:
        self.assertAlmostEqual(length_bound("ab", "abcd"), 2 * 2 / 6)


class MultisetBound(TestCase):
    def test_1(self) -> None:
        self.assertEqual(multiset_bound("", ""), 1.0)

    def test_2(self) -> None:
        self.assertEqual(multiset_bound("abc", "cba"), 1.0)

    def test_3(self) -> None:
        self.assertAlmostEqual(multiset_bound("aab", "abb"), 2 * 2 / 6)

    def test_4(self) -> None:
        rand = Random(9)
        for _ in range(0, 1000):
            a = "".join(rand.choice("abcd") for _ in range(rand.randint(0, 12)))
            b = "".join(rand.choice("abcd") for _ in range(rand.randint(0, 12)))
            ratio = gestalt_ratio(a, b)
            self.assertLessEqual(ratio, multiset_bound(a, b))
            self.assertLessEqual(multiset_bound(a, b), length_bound(a, b))
