"""配置常量和环境变量名"""

# 默认范围（闭区间），可通过环境变量覆盖
DEFAULT_START = 1
DEFAULT_END = 100
START_ENV = "FIZZBUZZ_START"
END_ENV = "FIZZBUZZ_END"

# 默认匹配规则，按顺序拼接
DEFAULT_MATCHERS: tuple[tuple[int, str], ...] = ((3, "Fizz"), (5, "Buzz"))

# 日志配置
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
