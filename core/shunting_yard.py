"""中缀转后缀（调度场算法）"""
import logging

from core.errors import MismatchedParenthesesError
from core.token_system import TokenType, DEFAULT_OPERATOR_TABLE

logger = logging.getLogger(__name__)


class InfixConverter:
    """将中缀 Token 序列转换为后缀（逆波兰）序列"""

    def __init__(self, operator_table=None):
        self.operator_table = DEFAULT_OPERATOR_TABLE if operator_table is None else operator_table

    def _should_pop(self, top, current):
        """栈顶操作符是否应先于当前操作符输出"""
        if top.type is not TokenType.OPERATOR:
            return False  # 左括号挡住
        top_spec = self.operator_table.get(top.value)
        if top_spec.precedence > current.precedence:
            return True
        return top_spec.precedence == current.precedence and current.is_left_associative

    def convert(self, tokens):
        """
        Args:
            tokens: 中缀 Token 序列（可迭代，允许是生成器）
        Returns:
            后缀 Token 列表，只含 NUMBER 和 OPERATOR
        """
        output = []
        operator_stack = []

        for token in tokens:
            if token.type is TokenType.NUMBER:
                output.append(token)

            elif token.type is TokenType.OPERATOR:
                current = self.operator_table.get(token.value)
                while operator_stack and self._should_pop(operator_stack[-1], current):
                    output.append(operator_stack.pop())
                operator_stack.append(token)

            elif token.type is TokenType.LEFT_PAREN:
                operator_stack.append(token)

            elif token.type is TokenType.RIGHT_PAREN:
                while operator_stack and operator_stack[-1].type is not TokenType.LEFT_PAREN:
                    output.append(operator_stack.pop())
                if not operator_stack:
                    raise MismatchedParenthesesError(token.value, token.position)
                operator_stack.pop()  # 丢弃左括号

        while operator_stack:
            top = operator_stack.pop()
            if top.type is TokenType.LEFT_PAREN:
                raise MismatchedParenthesesError(top.value, top.position)
            output.append(top)

        logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
        return output


def to_postfix(tokens, operator_table=None):
    return InfixConverter(operator_table).convert(tokens)
