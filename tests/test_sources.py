#!/usr/bin/env python3
"""
Tests for the base streams: FromArray, Singleton and Infinite.
"""

import unittest

from lazyseq import EXHAUSTED, FromArray, Infinite, Singleton, Stream, StreamConfig, to_array


class TestFromArray(unittest.TestCase):
    """Test FromArray streams."""

    def tearDown(self):
        StreamConfig.reset_defaults()

    def test_round_trip(self):
        for items in ([], [1], [3, 1, 2], ['x', None, 0, '', {}], list(range(100))):
            self.assertEqual(to_array(FromArray(items)), items)

    def test_accepts_tuples_and_generators(self):
        self.assertEqual(FromArray((1, 2, 3)).to_array(), [1, 2, 3])

        stream = FromArray(i * i for i in range(4))
        # A generator is consumed once at construction; the stream stays reusable
        self.assertEqual(stream.to_array(), [0, 1, 4, 9])
        self.assertEqual(stream.to_array(), [0, 1, 4, 9])

    def test_snapshot_ignores_later_mutation(self):
        items = [1, 2, 3]
        stream = FromArray(items)
        items.append(4)
        items[0] = 100
        self.assertEqual(stream.to_array(), [1, 2, 3])

    def test_view_when_snapshot_disabled(self):
        StreamConfig.set_defaults(snapshot_arrays=False)
        items = [1, 2, 3]
        stream = FromArray(items)
        items.append(4)
        self.assertEqual(stream.to_array(), [1, 2, 3, 4])

    def test_independent_enumerators(self):
        stream = FromArray(['a', 'b', 'c'])
        first = stream.enumerate()
        second = stream.enumerate()

        self.assertEqual(first.move_next(), 'a')
        self.assertEqual(first.move_next(), 'b')
        self.assertEqual(second.move_next(), 'a')
        self.assertEqual(first.move_next(), 'c')
        self.assertEqual(second.move_next(), 'b')

    def test_enumerate_does_not_change_stream(self):
        stream = FromArray([1, 2])
        enumerator = stream.enumerate()
        list(enumerator)
        self.assertEqual(stream.to_array(), [1, 2])
        self.assertEqual(len(stream), 2)

    def test_empty(self):
        enumerator = FromArray([]).enumerate()
        self.assertIs(enumerator.move_next(), EXHAUSTED)
        self.assertIs(enumerator.move_next(), EXHAUSTED)

    def test_python_iteration(self):
        stream = FromArray([5, 6])
        self.assertEqual(list(stream), [5, 6])
        self.assertEqual([x for x in stream], [5, 6])

    def test_factory_method(self):
        self.assertEqual(Stream.from_array([1, 2]).to_array(), [1, 2])


class TestSingleton(unittest.TestCase):
    """Test Singleton streams."""

    def test_one_element(self):
        self.assertEqual(Singleton(5).to_array(), [5])

    def test_falsy_value(self):
        self.assertEqual(Singleton(0).to_array(), [0])
        self.assertEqual(Singleton(None).to_array(), [None])

    def test_same_as_from_array(self):
        self.assertEqual(Singleton('v').to_array(), FromArray(['v']).to_array())
        self.assertIsInstance(Stream.singleton(1), FromArray)


class TestInfinite(unittest.TestCase):
    """Test Infinite streams."""

    def test_first_k_elements(self):
        def generator(index):
            return index ** 2 + 1

        enumerator = Infinite(generator).enumerate()
        for k in (1, 5, 50):
            enumerator.reset()
            taken = [enumerator.move_next() for _ in range(k)]
            self.assertEqual(taken, [generator(i) for i in range(k)])

    def test_never_exhausts(self):
        enumerator = Infinite(lambda i: 0).enumerate()
        for _ in range(1000):
            self.assertIsNot(enumerator.move_next(), EXHAUSTED)

    def test_independent_enumerators(self):
        stream = Infinite(lambda i: i)
        first = stream.enumerate()
        second = stream.enumerate()
        first.move_next()
        first.move_next()
        self.assertEqual(second.move_next(), 0)
        self.assertEqual(first.move_next(), 2)

    def test_impure_generator_replays_differently(self):
        counter = iter(range(1000))
        enumerator = Infinite(lambda i: next(counter)).enumerate()
        first = [enumerator.move_next() for _ in range(3)]
        enumerator.reset()
        second = [enumerator.move_next() for _ in range(3)]
        self.assertEqual(first, [0, 1, 2])
        self.assertEqual(second, [3, 4, 5])

    def test_generator_error_propagates(self):
        def generator(index):
            if index == 2:
                raise RuntimeError("boom")
            return index

        enumerator = Infinite(generator).enumerate()
        enumerator.move_next()
        enumerator.move_next()
        with self.assertRaises(RuntimeError):
            enumerator.move_next()

    def test_requires_callable(self):
        with self.assertRaises(TypeError):
            Infinite([1, 2, 3])

    def test_factory_method(self):
        stream = Stream.infinite(lambda i: -i)
        self.assertIsInstance(stream, Infinite)
        self.assertEqual(stream.enumerate().move_next(), 0)


if __name__ == '__main__':
    unittest.main()
