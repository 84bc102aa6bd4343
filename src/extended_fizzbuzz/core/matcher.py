"""匹配器 - 把能被除数整除的数字替换为文本"""

from dataclasses import dataclass
from typing import Protocol

from rusty_results.prelude import Err, Ok, Result

from .errors import EmptyText, InvalidDivisor, InvalidRange
from .validators import validate_divisor, validate_range, validate_text


class RandomSource(Protocol):
    """随机数来源（例如 random.Random 实例）"""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Matcher:
    """一条替换规则：能被 divisor 整除的数字贡献 text

    - 创建后不可变
    - 推荐通过工厂方法 Matcher.create() 创建，失败时返回 Err
    - 直接构造时若违反约束则抛出 ValueError
    """

    divisor: int
    text: str

    def __post_init__(self) -> None:
        match validate_divisor(self.divisor):
            case Err(e):
                raise ValueError(e.message)

        match validate_text(self.text):
            case Err(e):
                raise ValueError(e.message)

    def matches(self, number: int) -> bool:
        """number 是否能被除数整除（负数和 0 同样适用）"""
        return number % self.divisor == 0

    def substitute(self, number: int) -> str:
        """匹配时返回替换文本，否则返回空字符串"""
        if self.matches(number):
            return self.text
        return ""

    @classmethod
    def create(
        cls, divisor: int, text: str
    ) -> Result["Matcher", InvalidDivisor | EmptyText]:
        """创建 Matcher 的工厂方法（先验证除数，再验证文本）"""

        match validate_divisor(divisor):
            case Err(e):
                return Err(e)

        match validate_text(text):
            case Err(e):
                return Err(e)

        return Ok(cls(divisor, text))

    @classmethod
    def create_random(
        cls, bounds: tuple[int, int], text: str, rng: RandomSource
    ) -> Result["Matcher", InvalidDivisor | EmptyText | InvalidRange]:
        """在闭区间 bounds 内随机选取除数来创建 Matcher

        Args:
            bounds: (low, high)，两端都可能被选中
            text: 替换文本
            rng: 随机数来源，由调用方注入

        Returns:
            与 Matcher.create() 相同的结果；bounds 倒置时返回 InvalidRange
        """
        low, high = bounds

        match validate_range(low, high):
            case Err(e):
                return Err(e)

        return cls.create(rng.randint(low, high), text)
