import logging
from datetime import datetime

import pytest
from openpyxl import Workbook

from models import Order

INPUT_HEADERS = ['OrderNumber', 'Weight', 'District', 'DeliveryTime']

SCENARIO_ROWS = [
    ('A1', '3.5', 'North', '2024-01-01 10:00:00'),
    ('A2', 'bad', 'North', '2024-01-01 10:10:00'),
    ('A3', '2.0', 'South', '2024-01-01 10:05:00'),
]


@pytest.fixture
def make_workbook(tmp_path):
    """Создать входной Excel файл с заголовком и переданными строками"""
    def _make(rows, name='data.xlsx'):
        path = tmp_path / name
        wb = Workbook()
        ws = wb.active
        ws.append(INPUT_HEADERS)
        for row in rows:
            ws.append(list(row))
        wb.save(path)
        return path
    return _make


@pytest.fixture
def test_logger():
    return logging.getLogger('tests.delivery')


def make_order(number='A1', district='North', delivery_time=datetime(2024, 1, 1, 10, 0, 0), weight=1.0):
    return Order(order_number=number, weight=weight, district=district, delivery_time=delivery_time)
