"""数据模块"""
from .expression_loader import load_expressions, evaluate_expressions, evaluate_file, save_results

__all__ = ['load_expressions', 'evaluate_expressions', 'evaluate_file', 'save_results']
