"""错误类型 - 所有可失败操作在 Err 分支中返回的值"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidDivisor:
    """Matcher 的除数不是正整数"""

    divisor: int

    @property
    def message(self) -> str:
        return f"除数必须为正整数，但得到 {self.divisor}"

    @property
    def suggestion(self) -> str | None:
        return "使用大于 0 的除数"


@dataclass(frozen=True)
class EmptyText:
    """Matcher 的替换文本为空"""

    @property
    def message(self) -> str:
        return "替换文本不能为空"

    @property
    def suggestion(self) -> str | None:
        return None


@dataclass(frozen=True)
class InvalidRange:
    """起始值大于结束值，无法构成有效范围"""

    start: int
    end: int

    @property
    def message(self) -> str:
        return f"起始值 ({self.start}) 大于结束值 ({self.end})"

    @property
    def suggestion(self) -> str | None:
        return "交换起始值和结束值，或者检查范围参数的顺序"


FizzBuzzError = InvalidDivisor | EmptyText | InvalidRange


def describe(error: FizzBuzzError) -> str:
    """把错误格式化为带建议的可读文本"""
    text = error.message
    if error.suggestion:
        text += f"\n建议: {error.suggestion}"
    return text
