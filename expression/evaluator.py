import logging
from dataclasses import dataclass
from typing import Optional

from core import (
    ExpressionError, EvaluationResult, Tokenizer, InfixConverter, RPNEvaluator,
    DEFAULT_OPERATOR_TABLE
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationOutcome:
    """求值结果或错误二选一，调用方可按 error_kind 分支而无需捕获异常"""
    result: Optional[EvaluationResult] = None
    error: Optional[ExpressionError] = None

    @property
    def ok(self):
        return self.error is None

    @property
    def value(self):
        return self.result.value if self.result is not None else None

    @property
    def steps(self):
        return self.result.steps if self.result is not None else ()

    @property
    def error_kind(self):
        return self.error.kind if self.error is not None else None


class ExpressionEvaluator:
    """
    表达式求值入口：文本 -> Token -> 后缀 -> 数值。
    不持有跨调用的可变状态，可在多线程间共享。
    """

    def __init__(self, operator_table=None, strict=None):
        self.operator_table = DEFAULT_OPERATOR_TABLE if operator_table is None else operator_table
        self.tokenizer = Tokenizer(self.operator_table, strict)
        self.converter = InfixConverter(self.operator_table)
        self.rpn_evaluator = RPNEvaluator(self.operator_table)

    @property
    def strict(self):
        return self.tokenizer.strict

    def _evaluate_impl(self, expression: str, record_steps: bool) -> EvaluationResult:
        if not isinstance(expression, str):
            raise TypeError(f"Expression must be a string, got {type(expression).__name__}")

        logger.debug(f"Evaluating expression: {expression!r}")
        postfix = self.converter.convert(self.tokenizer.tokenize(expression))
        return self.rpn_evaluator.evaluate(postfix, record_steps=record_steps)

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            float64 结果（可能是 inf / nan）
        Raises:
            ExpressionError 的子类，见 core.errors
        """
        return self._evaluate_impl(expression, record_steps=False).value

    def evaluate_with_steps(self, expression: str) -> EvaluationResult:
        """求值并按后缀应用顺序记录每一步"""
        return self._evaluate_impl(expression, record_steps=True)

    def try_evaluate(self, expression: str, record_steps: bool = False) -> EvaluationOutcome:
        """同 evaluate，但把 ExpressionError 作为返回值而不是异常"""
        try:
            result = self._evaluate_impl(expression, record_steps)
        except ExpressionError as e:
            logger.debug(f"Failed to evaluate {expression!r}: [{e.kind}] {e}")
            return EvaluationOutcome(error=e)
        return EvaluationOutcome(result=result)


_default_evaluator = ExpressionEvaluator()


def evaluate(expression):
    return _default_evaluator.evaluate(expression)


def evaluate_with_steps(expression):
    return _default_evaluator.evaluate_with_steps(expression)


def try_evaluate(expression, record_steps=False):
    return _default_evaluator.try_evaluate(expression, record_steps)
