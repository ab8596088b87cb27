"""工具模块"""
from .formatting import format_number, format_history_entry

__all__ = ['format_number', 'format_history_entry']
