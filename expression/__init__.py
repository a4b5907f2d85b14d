"""表达式求值模块"""
from .evaluator import (
    ExpressionEvaluator, EvaluationOutcome, evaluate, evaluate_with_steps, try_evaluate
)

__all__ = [
    'ExpressionEvaluator', 'EvaluationOutcome',
    'evaluate', 'evaluate_with_steps', 'try_evaluate'
]
