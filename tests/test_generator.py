"""测试 FizzBuzz 生成算法"""

import io

import pytest
from rusty_results.prelude import Err, Ok

from extended_fizzbuzz import InvalidRange, Matcher, generate, line, print_fizzbuzz


@pytest.fixture
def fizz_buzz():
    """经典的 3=Fizz, 5=Buzz 规则"""
    return [Matcher(3, "Fizz"), Matcher(5, "Buzz")]


class TestLine:
    """测试单个数字的输出"""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (1, "1"),
            (3, "Fizz"),
            (5, "Buzz"),
            (6, "Fizz"),
            (7, "7"),
            (10, "Buzz"),
            (15, "FizzBuzz"),
            (16, "16"),
        ],
    )
    def test_fizz_buzz(self, fizz_buzz, number, expected):
        """测试经典规则"""
        assert line(number, fizz_buzz) == expected

    def test_matcher_order(self):
        """匹配文本按 matchers 的顺序拼接"""
        matchers = [Matcher(5, "Buzz"), Matcher(3, "Fizz")]
        assert line(15, matchers) == "BuzzFizz"

    def test_no_matchers(self):
        """没有 matcher 时返回数字本身"""
        assert line(42, []) == "42"
        assert line(-7, []) == "-7"

    def test_one_matches_everything(self):
        """除数为 1 的 matcher 总是生效"""
        matchers = [Matcher(1, "Fizz"), Matcher(11, "Buzz")]

        assert line(1, matchers) == "Fizz"
        assert line(11, matchers) == "FizzBuzz"
        assert line(12, matchers) == "Fizz"

    def test_same_divisor_twice(self):
        """相同除数的多个 matcher 都会生效"""
        matchers = [Matcher(2, "a"), Matcher(2, "b")]
        assert line(4, matchers) == "ab"


class TestGenerate:
    """测试序列生成"""

    def test_one_to_five(self, fizz_buzz):
        """1 到 5"""
        assert generate(1, 5, fizz_buzz) == Ok(["1", "2", "Fizz", "4", "Buzz"])

    def test_one_to_fifteen(self, fizz_buzz):
        """1 到 15，第 15 个元素两个 matcher 都生效"""
        result = generate(1, 15, fizz_buzz).unwrap()

        assert len(result) == 15
        assert result[14] == "FizzBuzz"
        assert result == [
            "1", "2", "Fizz", "4", "Buzz", "Fizz", "7", "8",
            "Fizz", "Buzz", "11", "Fizz", "13", "14", "FizzBuzz",
        ]

    def test_inverted_range(self):
        """start > end 返回 InvalidRange"""
        assert generate(5, 1, []) == Err(InvalidRange(5, 1))

    def test_range_checked_before_matchers(self, fizz_buzz):
        """范围验证与 matcher 内容无关"""
        assert generate(2, 1, fizz_buzz) == Err(InvalidRange(2, 1))

    def test_single_element(self, fizz_buzz):
        """start == end 得到单元素序列"""
        assert generate(9, 9, fizz_buzz) == Ok(["Fizz"])

    @pytest.mark.parametrize("start,end", [(1, 10), (-5, 5), (100, 120), (0, 0)])
    def test_no_matchers(self, start, end):
        """没有 matcher 时输出每个数字的十进制表示"""
        expected = [str(i) for i in range(start, end + 1)]
        assert generate(start, end, []) == Ok(expected)

    def test_negative_numbers(self):
        """负数按整除规则处理"""
        result = generate(-3, 3, [Matcher(2, "Even")])
        assert result == Ok(["-3", "Even", "-1", "Even", "1", "Even", "3"])

    def test_length(self, fizz_buzz):
        """输出长度为 end - start + 1"""
        assert len(generate(-20, 30, fizz_buzz).unwrap()) == 51

    def test_idempotent(self, fizz_buzz):
        """相同输入得到相同输出"""
        assert generate(1, 100, fizz_buzz) == generate(1, 100, fizz_buzz)

    def test_agrees_with_line(self, fizz_buzz):
        """序列的每个元素与 line 的结果一致"""
        result = generate(-15, 45, fizz_buzz).unwrap()
        for offset, text in enumerate(result):
            assert text == line(-15 + offset, fizz_buzz)

    def test_accepts_tuple(self, fizz_buzz):
        """matchers 可以是任意序列"""
        assert generate(1, 5, tuple(fizz_buzz)) == generate(1, 5, fizz_buzz)


class TestPrintFizzBuzz:
    """测试逐行输出"""

    def test_writes_lines(self, fizz_buzz):
        """每个元素单独一行"""
        out = io.StringIO()

        assert print_fizzbuzz(1, 5, fizz_buzz, file=out) == Ok(None)
        assert out.getvalue() == "1\n2\nFizz\n4\nBuzz\n"

    def test_defaults_to_stdout(self, fizz_buzz, capsys):
        """默认输出到 stdout"""
        print_fizzbuzz(14, 15, fizz_buzz)
        assert capsys.readouterr().out == "14\nFizzBuzz\n"

    def test_inverted_range_writes_nothing(self, fizz_buzz):
        """出错时不写入任何内容"""
        out = io.StringIO()

        assert print_fizzbuzz(3, 1, fizz_buzz, file=out) == Err(InvalidRange(3, 1))
        assert out.getvalue() == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
