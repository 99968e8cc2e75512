from datetime import datetime, timedelta

from helpers import OrderHelpers
from conftest import make_order

START = datetime(2024, 1, 1, 10, 0, 0)


def test_window_bounds_are_inclusive():
    orders = [
        make_order('before', delivery_time=START - timedelta(seconds=1)),
        make_order('start', delivery_time=START),
        make_order('end', delivery_time=START + timedelta(minutes=30)),
        make_order('after', delivery_time=START + timedelta(minutes=30, seconds=1)),
    ]

    result = OrderHelpers.filter_orders(orders, 'North', START)

    assert [order.order_number for order in result] == ['start', 'end']


def test_district_match_ignores_case():
    orders = [make_order('A1', district='Downtown'), make_order('A2', district='Uptown')]

    result = OrderHelpers.filter_orders(orders, 'downtown', START)

    assert [order.order_number for order in result] == ['A1']


def test_filter_preserves_input_order():
    orders = [
        make_order('A3', delivery_time=START + timedelta(minutes=20)),
        make_order('A1', delivery_time=START),
        make_order('A2', delivery_time=START + timedelta(minutes=10)),
    ]

    result = OrderHelpers.filter_orders(orders, 'north', START)

    assert [order.order_number for order in result] == ['A3', 'A1', 'A2']


def test_filter_is_pure():
    orders = [make_order('A1'), make_order('A2', district='South')]
    snapshot = list(orders)

    first = OrderHelpers.filter_orders(orders, 'North', START)
    second = OrderHelpers.filter_orders(orders, 'North', START)

    assert first == second
    assert orders == snapshot
    assert first is not orders


def test_filter_empty_input():
    assert OrderHelpers.filter_orders([], 'North', START) == []


def test_delivery_window():
    assert OrderHelpers.delivery_window(START) == (START, datetime(2024, 1, 1, 10, 30, 0))


def test_district_match_is_per_character():
    orders = [make_order('A1', district='STRASSE'), make_order('A2', district='STRAßE')]

    result = OrderHelpers.filter_orders(orders, 'straße', START)

    assert [order.order_number for order in result] == ['A2']
