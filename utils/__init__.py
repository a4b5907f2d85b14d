"""工具模块"""
from .formatting import format_number, format_step, format_steps

__all__ = ['format_number', 'format_step', 'format_steps']
