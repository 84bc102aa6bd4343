"""验证函数 - 数据验证层"""

from rusty_results.prelude import Err, Ok, Result

from ..logger import logger
from .errors import EmptyText, InvalidDivisor, InvalidRange


def validate_divisor(divisor: int) -> Result[int, InvalidDivisor]:
    """验证除数（必须大于 0）"""
    if divisor <= 0:
        logger.debug(f"[Validate:Divisor] Rejected: {divisor}")
        return Err(InvalidDivisor(divisor))

    return Ok(divisor)


def validate_text(text: str) -> Result[str, EmptyText]:
    """验证替换文本（非空）"""
    if not text:
        logger.debug("[Validate:Text] Rejected empty text")
        return Err(EmptyText())

    return Ok(text)


def validate_range(start: int, end: int) -> Result[tuple[int, int], InvalidRange]:
    """验证范围（start <= end，两端都包含在内）"""
    if start > end:
        logger.debug(f"[Validate:Range] Inverted: {start} > {end}")
        return Err(InvalidRange(start, end))

    return Ok((start, end))
