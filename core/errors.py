"""core/errors.py"""


class ExpressionError(ValueError):
    """表达式求值失败的基类，kind 为稳定的错误种类标识"""

    kind = "expression_error"

    def __init__(self, message, **context):
        super().__init__(message)
        self.context = context


class LexError(ExpressionError):
    """严格模式下遇到无法识别的字符"""

    kind = "lex_error"

    def __init__(self, character, position):
        super().__init__(f"Unexpected character {character!r} at position {position}",
                         character=character, position=position)
        self.character = character
        self.position = position


class MismatchedParenthesesError(ExpressionError):
    kind = "mismatched_parentheses"

    def __init__(self, parenthesis, position):
        super().__init__(f"Mismatched parenthesis {parenthesis!r} at position {position}",
                         parenthesis=parenthesis, position=position)
        self.parenthesis = parenthesis
        self.position = position


class StackUnderflowError(ExpressionError):
    """操作符可用的操作数不足两个"""

    kind = "stack_underflow"

    def __init__(self, operator, position=None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Insufficient operands for {operator!r}{where}",
                         operator=operator, position=position)
        self.operator = operator
        self.position = position


class InvalidExpressionError(ExpressionError):
    """求值结束后栈中不是恰好一个值"""

    kind = "invalid_expression"

    def __init__(self, stack_size, message=None):
        super().__init__(message or f"Stack has {stack_size} elements after evaluation, expected 1",
                         stack_size=stack_size)
        self.stack_size = stack_size


class UnknownOperatorError(ExpressionError):
    kind = "unknown_operator"

    def __init__(self, symbol):
        super().__init__(f"Unknown operator: {symbol!r}", symbol=symbol)
        self.symbol = symbol
