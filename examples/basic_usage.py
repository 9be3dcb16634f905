#!/usr/bin/env python3
"""
Basic usage examples for lazyseq.
"""

import logging

from lazyseq import FromArray, Infinite, Singleton, StreamConfig


def example_numbers():
    """Example: Filter then transform, left to right."""
    print("\n=== Even Numbers Example ===")

    numbers = FromArray([1, 2, 3, 4, 5, 6]) \
        .where(lambda x: x % 2 == 0) \
        .map(lambda x: x * 3) \
        .to_array()

    print(f"Even numbers tripled: {numbers}")


def example_people():
    """Example: Project records onto a subset of their fields."""
    print("\n=== Record Projection Example ===")

    people = FromArray([
        {'name': 'John', 'surname': 'Doe', 'age': 27},
        {'name': 'Jane', 'surname': 'Red', 'age': 11},
        {'name': 'Jill', 'surname': 'Miller', 'age': 39},
        {'name': 'Rick', 'surname': 'Muller', 'age': 72},
        {'name': 'Ross', 'surname': 'Franken', 'age': 57},
        {'name': 'Rose', 'surname': 'Rossi', 'age': 35},
        {'name': 'Gwen', 'surname': 'Antonio', 'age': 21},
    ]).select('name', 'surname').to_array()

    for person in people:
        print(f"  {person}")


def example_infinite():
    """Example: Pull a few values from an unbounded stream."""
    print("\n=== Infinite Stream Example ===")

    # to_array() would never return here, so drive the enumerator by hand
    enumerator = Infinite(lambda i: i * i).where(lambda x: x % 2 == 1).enumerate()
    odd_squares = [enumerator.move_next() for _ in range(5)]
    print(f"First odd squares: {odd_squares}")

    enumerator.reset()
    print(f"After reset: {enumerator.move_next()}")


def example_tracing():
    """Example: Log every element a source hands out."""
    print("\n=== Tracing Example ===")

    logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')
    StreamConfig.set_defaults(trace_enumeration=True)
    print(Singleton(0).map(lambda x: x - 1).to_array())
    StreamConfig.reset_defaults()


if __name__ == "__main__":
    example_numbers()
    example_people()
    example_infinite()
    example_tracing()
