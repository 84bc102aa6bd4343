"""命令行入口 - 按给定规则打印 FizzBuzz 序列"""

import argparse
import os
import sys

from dotenv import load_dotenv
from rusty_results.prelude import Err, Ok

from .config import DEFAULT_END, DEFAULT_MATCHERS, DEFAULT_START, END_ENV, START_ENV
from .core import Matcher, print_fizzbuzz
from .core.errors import describe
from .logger import logger, setup_logger


def parse_matcher(value: str) -> tuple[int, str]:
    """解析 DIVISOR=TEXT 形式的参数"""
    divisor, sep, text = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"'{value}' 格式应为 DIVISOR=TEXT")
    try:
        return int(divisor), text
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{divisor}' 不是整数") from None


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Configurable FizzBuzz")
    # 字符串默认值同样经过 type=int 转换，环境变量格式错误时由 argparse 报错
    parser.add_argument(
        "--start",
        type=int,
        default=os.getenv(START_ENV, str(DEFAULT_START)),
        help=f"起始值，包含在内（默认：${START_ENV} 或 {DEFAULT_START}）",
    )
    parser.add_argument(
        "--end",
        type=int,
        default=os.getenv(END_ENV, str(DEFAULT_END)),
        help=f"结束值，包含在内（默认：${END_ENV} 或 {DEFAULT_END}）",
    )
    parser.add_argument(
        "--matcher",
        type=parse_matcher,
        action="append",
        dest="matchers",
        metavar="DIVISOR=TEXT",
        help="替换规则，可重复，按给出顺序拼接（默认：3=Fizz 5=Buzz）",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """命令行入口函数，返回进程退出码"""
    load_dotenv()
    setup_logger()

    args = parse_args(argv)

    matchers: list[Matcher] = []
    for divisor, text in args.matchers or DEFAULT_MATCHERS:
        match Matcher.create(divisor, text):
            case Ok(matcher):
                matchers.append(matcher)
            case Err(e):
                print(f"错误: {describe(e)}", file=sys.stderr)
                return 2

    logger.debug(f"[CLI] Running {args.start}..{args.end} with {matchers}")

    match print_fizzbuzz(args.start, args.end, matchers):
        case Err(e):
            print(f"错误: {describe(e)}", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
