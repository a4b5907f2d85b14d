"""主程序入口 - 单个表达式求值或批量文件求值"""
import argparse
import logging
import sys

import pandas as pd

from config.config import LOGGING_CONFIG, CLI_CONFIG, BATCH_CONFIG, validate_config
from core import ExpressionError
from data.expression_loader import evaluate_file, save_results
from expression import ExpressionEvaluator
from utils.formatting import format_number, format_steps

# 设置日志
logging.basicConfig(
    level=LOGGING_CONFIG["level"],
    format=LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


def run_expression(evaluator, expression, show_steps=False, out=None, err=None):
    """求值单个表达式并打印结果；返回退出码"""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        if show_steps:
            result = evaluator.evaluate_with_steps(expression)
            value = result.value
        else:
            value = evaluator.evaluate(expression)
    except ExpressionError as e:
        print(f"Error ({e.kind}): {e}", file=err)
        return CLI_CONFIG["exit_error"]

    print(format_number(value), file=out)
    if show_steps:
        for line in format_steps(result.steps):
            print(line, file=out)
    return CLI_CONFIG["exit_ok"]


def run_batch(evaluator, file_path, output_path=None, out=None):
    """批量评估表达式文件；任一行失败时返回错误退出码"""
    out = out or sys.stdout
    results = evaluate_file(file_path, evaluator)

    if output_path:
        save_results(results, output_path)
    else:
        for row in results.itertuples(index=False):
            if pd.isna(row.error_kind):
                print(f"{row.expression} = {format_number(row.value)}", file=out)
            else:
                print(f"{row.expression} -> Error ({row.error_kind}): {row.error}", file=out)

    if results['error_kind'].notna().any():
        return CLI_CONFIG["exit_error"]
    return CLI_CONFIG["exit_ok"]


def main(args):
    logging.getLogger().setLevel(args.log_level.upper())
    validate_config()

    evaluator = ExpressionEvaluator(strict=not args.lenient)
    logger.info(f"Tokenizer mode: {'strict' if evaluator.strict else 'lenient'}")

    if args.file:
        return run_batch(evaluator, args.file, args.output_path)
    return run_expression(evaluator, args.expression, show_steps=args.steps)


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator (shunting-yard)")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Infix expression to evaluate, e.g. \"2 + 3 * 4\""
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print each operator application after the result"
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Silently skip unrecognized characters instead of failing"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Evaluate a text file with one expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help=f"Save batch results as CSV (e.g. {BATCH_CONFIG['default_output_path']})"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "debug", "info", "warning", "error"],
        help="Logging level"
    )
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.expression is None and args.file is None:
        parser.error("an expression or --file is required")
    if args.expression is not None and args.file is not None:
        parser.error("give either an expression or --file, not both")
    return args


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
