"""核心模块 - 匹配器、验证和生成算法"""

from . import validators
from .errors import EmptyText, FizzBuzzError, InvalidDivisor, InvalidRange
from .generator import generate, line, print_fizzbuzz
from .matcher import Matcher, RandomSource

__all__ = [
    "validators",
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
