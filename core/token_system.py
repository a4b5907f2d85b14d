"""core/token_system.py"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from config.config import OPERATOR_CONFIG, TOKENIZER_CONFIG
from core.errors import LexError, UnknownOperatorError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    """词法单元；NUMBER 的 value 为 float，其余为符号字符串"""
    type: TokenType
    value: object
    position: int = 0

    @property
    def is_number(self):
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type is TokenType.OPERATOR

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    name: str
    precedence: int
    associativity: Associativity

    @property
    def is_left_associative(self):
        return self.associativity is Associativity.LEFT


class OperatorTable:
    """
    只读的操作符表：symbol -> OperatorSpec。
    进程启动时构建一次，之后可在线程间共享。
    """

    def __init__(self, config=None):
        config = OPERATOR_CONFIG if config is None else config
        specs = {}
        for symbol, entry in config.items():
            if not isinstance(entry["precedence"], int):
                raise ValueError(f"Precedence for {symbol!r} must be an integer")
            specs[symbol] = OperatorSpec(
                symbol=symbol,
                name=entry["name"],
                precedence=entry["precedence"],
                associativity=Associativity(entry["associativity"]),
            )
        self._specs = MappingProxyType(specs)

    def __contains__(self, symbol):
        return symbol in self._specs

    def __iter__(self):
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)

    def get(self, symbol):
        """查找操作符定义，缺失时抛 UnknownOperatorError"""
        try:
            return self._specs[symbol]
        except KeyError:
            raise UnknownOperatorError(symbol) from None

    @property
    def symbols(self):
        return tuple(self._specs)


DEFAULT_OPERATOR_TABLE = OperatorTable()


class Tokenizer:
    """
    将表达式文本切分为 Token 流（惰性生成）。

    Args:
        operator_table: 操作符表，决定哪些单字符被识别为操作符
        strict: True 时遇到无法识别的字符抛 LexError；False 时静默跳过
    """

    def __init__(self, operator_table=None, strict=None):
        self.operator_table = DEFAULT_OPERATOR_TABLE if operator_table is None else operator_table
        self.strict = TOKENIZER_CONFIG["strict"] if strict is None else strict
        # 空操作符表时 operator 分支永不匹配
        operators = "|".join(re.escape(s) for s in self.operator_table.symbols) or "(?!)"
        self._token_re = re.compile(
            rf"(?P<number>{TOKENIZER_CONFIG['number_pattern']})"
            rf"|(?P<operator>{operators})"
            r"|(?P<lparen>\()"
            r"|(?P<rparen>\))"
            r"|(?P<space>\s+)"
            r"|(?P<other>.)",
            re.DOTALL | re.ASCII,
        )

    def tokenize(self, text):
        for match in self._token_re.finditer(text):
            kind = match.lastgroup
            lexeme = match.group()
            position = match.start()

            if kind == "number":
                yield Token(TokenType.NUMBER, float(lexeme), position)
            elif kind == "operator":
                yield Token(TokenType.OPERATOR, lexeme, position)
            elif kind == "lparen":
                yield Token(TokenType.LEFT_PAREN, lexeme, position)
            elif kind == "rparen":
                yield Token(TokenType.RIGHT_PAREN, lexeme, position)
            elif kind == "other":
                if self.strict:
                    raise LexError(lexeme, position)
                logger.debug(f"Skipping unrecognized character {lexeme!r} at position {position}")


def tokenize(text, operator_table=None, strict=None):
    """惰性切分表达式文本；空文本产生空序列"""
    return Tokenizer(operator_table, strict).tokenize(text)
