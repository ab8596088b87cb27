"""utils/formatting.py"""
import re

import numpy as np

RE_THOUSANDS = re.compile(r'\B(?=(\d{3})+(?!\d))')


def format_number(value):
    """显示格式：去掉小数末尾的0，整数部分加千位分隔符"""
    if value is None or value == '':
        return '0'
    try:
        number = np.float64(value)
    except (TypeError, ValueError):
        return '0'
    if np.isnan(number):
        return '0'
    if np.isinf(number):
        return '-∞' if number < 0 else '∞'

    text = np.format_float_positional(number, trim='-')
    sign = ''
    if text.startswith('-'):
        sign, text = '-', text[1:]

    parts = text.split('.')
    parts[0] = RE_THOUSANDS.sub(',', parts[0])
    return sign + '.'.join(parts)


def format_history_entry(expression, result):
    return f"{expression} = {format_number(result)}"
