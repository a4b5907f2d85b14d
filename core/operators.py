"""core/operators.py"""
import numpy as np
import logging

from core.errors import UnknownOperatorError

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（IEEE-754 float64 语义）"""

    @staticmethod
    def _as_float64(operand1, operand2):
        return np.float64(operand1), np.float64(operand2)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 * operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零不报错，1/0 = inf，0/0 = nan"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(np.divide(operand1, operand2))

    @staticmethod
    def pow(operand1, operand2):
        """乘方操作符：负底数配分数指数得到 nan，溢出得到 inf"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.power(operand1, operand2))

    @staticmethod
    def apply(spec, operand1, operand2):
        """按 OperatorSpec.name 调用对应的运算"""
        op_method = getattr(Operators, spec.name, None)
        if op_method is None or spec.name.startswith('_') or spec.name == 'apply':
            logger.error(f"Unknown binary operator: {spec.symbol} ({spec.name})")
            raise UnknownOperatorError(spec.symbol)
        return op_method(operand1, operand2)
