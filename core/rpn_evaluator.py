"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from dataclasses import dataclass, asdict
from typing import Tuple

import pandas as pd

from core.errors import InvalidExpressionError, StackUnderflowError
from core.operators import Operators
from core.token_system import TokenType, DEFAULT_OPERATOR_TABLE
from utils.formatting import format_step

logger = logging.getLogger(__name__)

STEP_COLUMNS = ['operand1', 'operator', 'operand2', 'result']


@dataclass(frozen=True)
class EvaluationStep:
    """一次操作符应用：operand1 operator operand2 = result"""
    operand1: float
    operator: str
    operand2: float
    result: float

    def as_dict(self):
        return asdict(self)

    def __str__(self):
        return format_step(self)


@dataclass(frozen=True)
class EvaluationResult:
    value: float
    steps: Tuple[EvaluationStep, ...] = ()

    def steps_frame(self):
        """步骤轨迹转为 DataFrame，行顺序即后缀应用顺序"""
        return pd.DataFrame([step.as_dict() for step in self.steps], columns=STEP_COLUMNS)


class RPNEvaluator:
    """评估后缀（RPN）Token 序列的值"""

    def __init__(self, operator_table=None):
        self.operator_table = DEFAULT_OPERATOR_TABLE if operator_table is None else operator_table

    def evaluate(self, postfix, record_steps=False):
        """
        评估RPN表达式
        Args:
            postfix: 后缀 Token 序列
            record_steps: 是否记录每次操作符应用
        Returns:
            EvaluationResult；record_steps 为 False 时 steps 为空
        """
        stack = []
        steps = []

        for token in postfix:
            if token.type is TokenType.NUMBER:
                stack.append(float(token.value))

            elif token.type is TokenType.OPERATOR:
                spec = self.operator_table.get(token.value)
                if len(stack) < 2:
                    raise StackUnderflowError(token.value, token.position)
                operand2 = stack.pop()
                operand1 = stack.pop()

                result = Operators.apply(spec, operand1, operand2)
                stack.append(result)
                if record_steps:
                    steps.append(EvaluationStep(operand1, token.value, operand2, result))

            else:
                raise InvalidExpressionError(
                    len(stack), f"Unexpected {token.type.value} token in postfix sequence")

        if len(stack) != 1:
            raise InvalidExpressionError(len(stack))

        logger.debug(f"RPN result: {stack[0]} ({len(steps)} steps recorded)")
        return EvaluationResult(stack[0], tuple(steps))
