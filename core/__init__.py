"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .errors import (
    ExpressionError, LexError, MismatchedParenthesesError,
    StackUnderflowError, InvalidExpressionError, UnknownOperatorError
)
from .token_system import (
    TokenType, Associativity, Token, OperatorSpec, OperatorTable,
    DEFAULT_OPERATOR_TABLE, Tokenizer, tokenize
)
from .operators import Operators
from .shunting_yard import InfixConverter, to_postfix
from .rpn_evaluator import RPNEvaluator, EvaluationStep, EvaluationResult

__all__ = [
    'ExpressionError', 'LexError', 'MismatchedParenthesesError',
    'StackUnderflowError', 'InvalidExpressionError', 'UnknownOperatorError',
    'TokenType', 'Associativity', 'Token', 'OperatorSpec', 'OperatorTable',
    'DEFAULT_OPERATOR_TABLE', 'Tokenizer', 'tokenize',
    'Operators', 'InfixConverter', 'to_postfix',
    'RPNEvaluator', 'EvaluationStep', 'EvaluationResult'
]
