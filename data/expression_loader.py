"""表达式文件加载和批量评估模块"""
import logging
import math

import pandas as pd

from config.config import BATCH_CONFIG
from expression import ExpressionEvaluator

logger = logging.getLogger(__name__)


def load_expressions(file_path, encoding=None):
    """
    加载表达式文件，每行一个表达式。

    Parameters:
    - file_path: 文本文件路径
    - encoding: 文件编码, 默认取 BATCH_CONFIG['encoding']

    Returns:
    - 表达式字符串列表（已去除空行和注释行）
    """
    logger.info(f"Loading expressions from {file_path}")
    encoding = encoding or BATCH_CONFIG['encoding']
    prefix = BATCH_CONFIG['comment_prefix']

    expressions = []
    with open(file_path, 'r', encoding=encoding) as f:
        for line in f:
            expression = line.strip()
            if expression and not expression.startswith(prefix):
                expressions.append(expression)

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, evaluator=None):
    """
    逐个评估表达式，单个失败不中断整批。

    Returns:
    - DataFrame，列为 expression / value / error_kind / error
    """
    evaluator = evaluator or ExpressionEvaluator()
    rows = []
    for expression in expressions:
        outcome = evaluator.try_evaluate(expression)
        rows.append({
            'expression': expression,
            'value': outcome.value if outcome.ok else math.nan,
            'error_kind': outcome.error_kind,
            'error': str(outcome.error) if outcome.error is not None else None,
        })

    results = pd.DataFrame(rows, columns=BATCH_CONFIG['result_columns'])
    failed = int(results['error_kind'].notna().sum())
    if failed:
        logger.warning(f"{failed} of {len(results)} expressions failed to evaluate")
    return results


def evaluate_file(file_path, evaluator=None):
    return evaluate_expressions(load_expressions(file_path), evaluator)


def save_results(results, output_path=None):
    """保存批量结果为 CSV"""
    output_path = output_path or BATCH_CONFIG['default_output_path']
    results.to_csv(output_path, index=False)
    logger.info(f"Results saved to {output_path}")
    return output_path
