import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import (
    Token, TokenType, RPNEvaluator, EvaluationStep, Operators, DEFAULT_OPERATOR_TABLE,
    OperatorSpec, Associativity, StackUnderflowError, InvalidExpressionError,
    UnknownOperatorError
)


def num(value):
    return Token(TokenType.NUMBER, float(value))


def op(symbol):
    return Token(TokenType.OPERATOR, symbol)


class TestOperators(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(Operators.add(2, 3), 5.0)
        self.assertEqual(Operators.sub(2, 3), -1.0)
        self.assertEqual(Operators.mul(2, 3), 6.0)
        self.assertEqual(Operators.div(3, 2), 1.5)
        self.assertEqual(Operators.pow(2, 10), 1024.0)

    def test_division_by_zero_follows_ieee(self):
        self.assertEqual(Operators.div(1, 0), math.inf)
        self.assertEqual(Operators.div(-1, 0), -math.inf)
        self.assertTrue(math.isnan(Operators.div(0, 0)))

    def test_power_edge_cases(self):
        self.assertTrue(math.isnan(Operators.pow(-8, 1 / 3)))
        self.assertEqual(Operators.pow(2, -1), 0.5)
        self.assertEqual(Operators.pow(0, -1), math.inf)
        self.assertEqual(Operators.pow(10, 400), math.inf)
        self.assertEqual(Operators.pow(4, 0.5), 2.0)

    def test_results_are_python_floats(self):
        self.assertIs(type(Operators.add(1, 2)), float)
        self.assertIs(type(Operators.pow(2, 2)), float)

    def test_apply_dispatches_by_name(self):
        self.assertEqual(Operators.apply(DEFAULT_OPERATOR_TABLE.get('-'), 7, 2), 5.0)

    def test_apply_unknown_routine(self):
        spec = OperatorSpec('%', 'mod', 2, Associativity.LEFT)
        with self.assertRaises(UnknownOperatorError):
            Operators.apply(spec, 1, 2)


class TestRPNEvaluator(unittest.TestCase):
    def setUp(self):
        self.evaluator = RPNEvaluator()

    def test_evaluate_without_steps(self):
        result = self.evaluator.evaluate([num(2), num(3), num(4), op('*'), op('+')])
        self.assertEqual(result.value, 14.0)
        self.assertEqual(result.steps, ())

    def test_steps_in_application_order(self):
        result = self.evaluator.evaluate([num(2), num(3), num(4), op('*'), op('+')],
                                         record_steps=True)
        self.assertEqual(result.steps, (
            EvaluationStep(3.0, '*', 4.0, 12.0),
            EvaluationStep(2.0, '+', 12.0, 14.0),
        ))

    def test_operand_order(self):
        result = self.evaluator.evaluate([num(10), num(4), op('-')], record_steps=True)
        self.assertEqual(result.value, 6.0)
        self.assertEqual(result.steps[0].operand1, 10.0)
        self.assertEqual(result.steps[0].operand2, 4.0)

    def test_step_string(self):
        self.assertEqual(str(EvaluationStep(3.0, '*', 4.0, 12.0)), "3 * 4 = 12")
        self.assertEqual(str(EvaluationStep(1.0, '/', 0.0, math.inf)), "1 / 0 = Infinity")

    def test_steps_frame(self):
        result = self.evaluator.evaluate([num(2), num(3), num(4), op('*'), op('+')],
                                         record_steps=True)
        frame = result.steps_frame()
        self.assertEqual(list(frame.columns), ['operand1', 'operator', 'operand2', 'result'])
        self.assertEqual(frame['result'].tolist(), [12.0, 14.0])
        self.assertEqual(frame['operator'].tolist(), ['*', '+'])

    def test_empty_steps_frame(self):
        frame = self.evaluator.evaluate([num(5)], record_steps=True).steps_frame()
        self.assertTrue(frame.empty)
        self.assertEqual(len(frame.columns), 4)

    def test_underflow(self):
        with self.assertRaises(StackUnderflowError) as ctx:
            self.evaluator.evaluate([num(1), op('+')])
        self.assertEqual(ctx.exception.operator, '+')
        with self.assertRaises(StackUnderflowError):
            self.evaluator.evaluate([op('*')])

    def test_empty_postfix(self):
        with self.assertRaises(InvalidExpressionError) as ctx:
            self.evaluator.evaluate([])
        self.assertEqual(ctx.exception.stack_size, 0)

    def test_leftover_values(self):
        with self.assertRaises(InvalidExpressionError) as ctx:
            self.evaluator.evaluate([num(2), num(3)])
        self.assertEqual(ctx.exception.stack_size, 2)

    def test_parenthesis_in_postfix(self):
        with self.assertRaises(InvalidExpressionError):
            self.evaluator.evaluate([num(1), Token(TokenType.LEFT_PAREN, '(')])

    def test_unknown_operator(self):
        with self.assertRaises(UnknownOperatorError):
            self.evaluator.evaluate([num(1), num(2), op('%')])


if __name__ == "__main__":
    unittest.main()
