import math
import re
from datetime import datetime

from config import DATETIME_FORMAT

# Строгий шаблон yyyy-MM-dd HH:mm:ss (strptime сам по себе принимает и '2024-1-1 9:0:0')
_DATETIME_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}', re.ASCII)

# Число в инвариантной культуре: знак, разделитель тысяч ',', десятичная точка, экспонента
_NUMBER_PATTERN = re.compile(r'[+-]?(\d[\d,]*(\.\d*)?|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def parse_datetime_exact(text):
    """
    Разбор даты строго в формате yyyy-MM-dd HH:mm:ss

    :param text: Строка с датой
    :return: datetime или None, если строка не соответствует формату
    """
    if not isinstance(text, str) or not _DATETIME_PATTERN.fullmatch(text):
        return None

    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError:
        return None


def parse_weight(text):
    """
    Разбор веса заказа

    Допускаются пробелы по краям и разделитель тысяч. Отрицательные и
    бесконечные значения считаются некорректными.
    """
    candidate = text.strip()
    if not _NUMBER_PATTERN.fullmatch(candidate):
        return None

    weight = float(candidate.replace(',', ''))
    if weight < 0 or not math.isfinite(weight):
        return None

    return weight


def cell_text(value):
    """Текстовое представление значения ячейки Excel"""
    if value is None:
        return ''

    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)

    if isinstance(value, float) and value.is_integer():
        return str(int(value))

    return str(value)
