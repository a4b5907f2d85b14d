"""utils/formatting.py"""
import math


def format_number(value):
    """整数值不带小数部分（12 而非 12.0），特殊值写作 Infinity / -Infinity / NaN"""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_step(step):
    return (f"{format_number(step.operand1)} {step.operator} "
            f"{format_number(step.operand2)} = {format_number(step.result)}")


def format_steps(steps):
    return [format_step(step) for step in steps]
