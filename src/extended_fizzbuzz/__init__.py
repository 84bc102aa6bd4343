"""可配置的 FizzBuzz 库

用法示例::

    from extended_fizzbuzz import Matcher, generate

    matchers = [Matcher(3, "Fizz"), Matcher(5, "Buzz")]
    generate(1, 15, matchers).unwrap()
"""

from .core import (
    EmptyText,
    FizzBuzzError,
    InvalidDivisor,
    InvalidRange,
    Matcher,
    RandomSource,
    generate,
    line,
    print_fizzbuzz,
)

__all__ = [
    "EmptyText",
    "FizzBuzzError",
    "InvalidDivisor",
    "InvalidRange",
    "Matcher",
    "RandomSource",
    "generate",
    "line",
    "print_fizzbuzz",
]
