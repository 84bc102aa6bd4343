"""FizzBuzz 生成器 - 核心算法"""

import sys
from collections.abc import Sequence
from typing import TextIO

from rusty_results.prelude import Err, Ok, Result

from ..logger import logger
from .errors import InvalidRange
from .matcher import Matcher
from .validators import validate_range


def line(number: int, matchers: Sequence[Matcher]) -> str:
    """计算单个数字的输出

    按顺序拼接所有匹配的 Matcher 文本；没有任何匹配时返回数字本身。
    """
    out = "".join(m.substitute(number) for m in matchers)
    return out or str(number)


def generate(
    start: int, end: int, matchers: Sequence[Matcher]
) -> Result[list[str], InvalidRange]:
    """生成 [start, end] 闭区间内的 FizzBuzz 序列

    Args:
        start: 起始值（包含）
        end: 结束值（包含）
        matchers: 按顺序应用的 Matcher，可以为空

    Returns:
        长度为 end - start + 1 的字符串列表；start > end 时返回 InvalidRange
    """
    # 范围验证与 matchers 无关，最先进行
    match validate_range(start, end):
        case Err(e):
            return Err(e)

    logger.debug(f"[Generate] {start}..{end} with {len(matchers)} matchers")
    return Ok([line(i, matchers) for i in range(start, end + 1)])


def print_fizzbuzz(
    start: int,
    end: int,
    matchers: Sequence[Matcher],
    file: TextIO | None = None,
) -> Result[None, InvalidRange]:
    """把 FizzBuzz 序列逐行写入 file（默认 stdout），出错时不写入任何内容"""
    match generate(start, end, matchers):
        case Err(e):
            return Err(e)
        case Ok(lines):
            pass

    out = file if file is not None else sys.stdout
    for text in lines:
        print(text, file=out)

    return Ok(None)
