from __future__ import annotations

import unittest

from cgorithm import (
    concatenate,
    concatenate_slice,
    count_if,
    filter_by,
    m_filter,
    m_reduce,
    m_transform,
    m_transform_reduce,
    reduce,
    sum_of,
    transform,
    transform_reduce,
)


class FilterTransformTests(unittest.TestCase):
    def test_filter_preserves_order(self) -> None:
        data = [5, -1, 3, -7, 0, 9]
        self.assertEqual(filter_by(data, lambda _, n: n >= 0), [5, 3, 0, 9])

    def test_filter_does_not_mutate_input(self) -> None:
        data = [1, 2, 3, 4]
        out = filter_by(data, lambda _, n: n % 2 == 0)
        self.assertEqual(out, [2, 4])
        self.assertEqual(data, [1, 2, 3, 4])
        self.assertIsNot(out, data)

    def test_filter_by_index(self) -> None:
        self.assertEqual(filter_by("abcdef", lambda i, _: i % 2 == 0), ["a", "c", "e"])

    def test_filter_size_equals_count_if(self) -> None:
        data = list(range(-5, 12))
        pred = lambda i, n: (n + i) % 3 == 0  # noqa: E731
        self.assertEqual(len(filter_by(data, pred)), count_if(data, pred))

    def test_transform_squares(self) -> None:
        self.assertEqual(
            transform([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], lambda _, x: x * x),
            [1, 4, 9, 16, 25, 36, 49, 64, 81, 100],
        )

    def test_transform_may_change_type(self) -> None:
        self.assertEqual(transform([3, 1], lambda i, x: f"{i}:{x}"), ["0:3", "1:1"])
        self.assertEqual(transform([], lambda i, x: x), [])


class ReduceTests(unittest.TestCase):
    def test_reduce_sum_and_product(self) -> None:
        add = lambda _, x, y: x + y  # noqa: E731
        mul = lambda _, x, y: x * y  # noqa: E731
        self.assertEqual(reduce([1, 2, 3, 4, 5], 0, add), 15)
        self.assertEqual(reduce([1, 2, 3, 4, 5], 1, mul), 120)
        self.assertEqual(reduce([1, 2, 3, 4, 5, 6], 1, mul), 720)
        self.assertEqual(reduce([1, 2, 3, 4, 5, 6, 7], 1, mul), 5040)

    def test_reduce_empty_returns_init(self) -> None:
        self.assertEqual(reduce([], "init", lambda *_: "other"), "init")

    def test_reduce_is_a_left_fold(self) -> None:
        self.assertEqual(reduce([1, 2, 3], 10, lambda _, acc, v: acc - v), 4)

    def test_reduce_join_with_index(self) -> None:
        def my_join(words: list[str]) -> str:
            return reduce(words, "", lambda i, acc, w: concatenate(acc, ", ", w) if i > 0 else w)

        words = ["012", "345", "678", "9ab", "cde", "fgh", "ijk", "lmn", "opq", "rst", "uvw", "xyz"]
        self.assertEqual(my_join(words), "012, 345, 678, 9ab, cde, fgh, ijk, lmn, opq, rst, uvw, xyz")

    def test_reduce_matches_sum(self) -> None:
        data = [3, -1, 4, 1, -5, 9]
        self.assertEqual(reduce(data, 7, lambda _, acc, v: acc + v), sum_of(data, 7))

    def test_transform_reduce_parses_and_sums(self) -> None:
        out = transform_reduce(["123", "456", "789"], 0, lambda _, x, y: x + y, lambda _, s: int(s))
        self.assertEqual(out, 1368)

    def test_transform_reduce_sum_of_squares(self) -> None:
        out = transform_reduce(list(range(1, 11)), 0, lambda _, x, y: x + y, lambda _, x: x * x)
        self.assertEqual(out, 385)

    def test_transform_reduce_equals_composition(self) -> None:
        data = [2, 7, 1, 8, 2, 8]
        reduce_fn = lambda i, acc, v: acc * 2 + v - i  # noqa: E731
        transform_fn = lambda i, x: x * 3 + i  # noqa: E731
        self.assertEqual(
            transform_reduce(data, 5, reduce_fn, transform_fn),
            reduce(transform(data, transform_fn), 5, reduce_fn),
        )

    def test_transform_reduce_single_pass(self) -> None:
        calls: list[str] = []

        def transform_fn(i: int, x: int) -> int:
            calls.append(f"t{i}")
            return x

        def reduce_fn(i: int, acc: int, v: int) -> int:
            calls.append(f"r{i}")
            return acc + v

        transform_reduce([1, 2], 0, reduce_fn, transform_fn)
        self.assertEqual(calls, ["t0", "r0", "t1", "r1"])


class MappingFoldTests(unittest.TestCase):
    def test_m_filter(self) -> None:
        m = {"a": 1, "b": -2, "c": 3}
        self.assertEqual(m_filter(m, lambda _k, v: v > 0), {"a": 1, "c": 3})
        self.assertEqual(m, {"a": 1, "b": -2, "c": 3})
        self.assertEqual(m_filter(m, lambda k, _v: k == "b"), {"b": -2})

    def test_m_transform_swaps_pairs(self) -> None:
        m = {"one": 1, "two": 2}
        self.assertEqual(m_transform(m, lambda k, v: (v, k.upper())), {1: "ONE", 2: "TWO"})

    def test_m_transform_collision_keeps_some_value(self) -> None:
        m = {"apple": 1, "avocado": 2, "banana": 3}
        out = m_transform(m, lambda k, v: (k[0], v * 10))
        self.assertLessEqual(len(out), len(m))
        self.assertEqual(set(out), {"a", "b"})
        self.assertIn(out["a"], {10, 20})
        self.assertEqual(out["b"], 30)

    def test_m_reduce_commutative_fold(self) -> None:
        m = {n: n * n for n in range(1, 6)}
        self.assertEqual(m_reduce(m, 0, lambda _k, acc, v: acc + v), 55)
        self.assertEqual(m_reduce(m, 0, lambda k, acc, _v: acc + k), 15)
        self.assertEqual(m_reduce({}, "init", lambda *_: "other"), "init")

    def test_m_transform_reduce(self) -> None:
        m = {"a": "12", "b": "30"}
        out = m_transform_reduce(m, 0, lambda _k, acc, v: acc + v, lambda _k, s: int(s))
        self.assertEqual(out, 42)
        self.assertEqual(m_transform_reduce(m, 0, lambda _k, acc, v: acc + v, lambda k, _s: len(k)), 2)


class SumAndConcatenateTests(unittest.TestCase):
    def test_sum_numbers(self) -> None:
        self.assertEqual(sum_of([1, 2, 3, 4, 5], 0), 15)
        self.assertAlmostEqual(sum_of([0.1, 0.2, 0.3, 0.4, 0.5], 0.0), 1.5)

    def test_sum_strings(self) -> None:
        self.assertEqual(sum_of(["abc", "def", "ghi"], ""), "abcdefghi")
        self.assertEqual(sum_of(["56", "7", "89"], "01234"), "0123456789")

    def test_sum_empty_is_init(self) -> None:
        self.assertEqual(sum_of([], 7), 7)
        self.assertEqual(sum_of([], "x"), "x")

    def test_concatenate(self) -> None:
        self.assertEqual(concatenate("a", "bc", "", "d"), "abcd")
        self.assertEqual(concatenate(), "")

    def test_concatenate_slice(self) -> None:
        self.assertEqual(concatenate_slice(["foo", "bar", "baz"]), "foobarbaz")
        self.assertEqual(concatenate_slice([]), "")
        self.assertEqual(concatenate_slice(("x", "y")), "xy")


if __name__ == "__main__":
    unittest.main()
