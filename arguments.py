"""Разбор параметров командной строки и запрос недостающих значений у пользователя"""
import sys
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from config import (
    ARG_CITY_DISTRICT,
    ARG_DATA_FILE,
    ARG_DELIVERY_LOG,
    ARG_DELIVERY_ORDER,
    ARG_FIRST_DELIVERY_DATETIME,
    DATETIME_FORMAT_HINT,
    DEFAULT_CITY_DISTRICT,
    DEFAULT_DATA_FILE,
    DEFAULT_FIRST_DATETIME,
    DEFAULT_LOG_FILE,
    DEFAULT_ORDER_FILE,
)
from utils import parse_datetime_exact

USAGE_LINES = (
    "Необходимо указать параметры _dataFile, _deliveryLog и _deliveryOrder.",
    "Пример: _dataFile=C:\\data.xlsx _deliveryLog=C:\\logs\\app.log _deliveryOrder=C:\\results\\orders.xlsx",
)


@dataclass(frozen=True)
class DeliveryArguments:
    """Параметры запуска"""
    data_file: str = ''
    log_file: str = ''
    result_file: str = ''
    city_district: str = ''
    first_delivery_time: Optional[datetime] = None

    def missing_paths(self):
        """Имена обязательных параметров, которые не заданы"""
        required = [
            ('_dataFile', self.data_file),
            ('_deliveryLog', self.log_file),
            ('_deliveryOrder', self.result_file),
        ]
        return [name for name, value in required if not value]


def environment_defaults():
    """Значения по умолчанию из переменных окружения (.env)"""
    return DeliveryArguments(
        data_file=DEFAULT_DATA_FILE,
        log_file=DEFAULT_LOG_FILE,
        result_file=DEFAULT_ORDER_FILE,
        city_district=DEFAULT_CITY_DISTRICT,
        first_delivery_time=parse_datetime_exact(DEFAULT_FIRST_DATETIME),
    )


def parse_arguments(argv, defaults=None):
    """
    Разбор аргументов вида ключ=значение

    Некорректная дата в _firstDeliveryDateTime не считается ошибкой:
    значение остается незаданным и будет запрошено у пользователя.

    :param argv: Список аргументов (без имени программы)
    :param defaults: DeliveryArguments со значениями по умолчанию
    :return: DeliveryArguments
    """
    values = {}

    for arg in argv:
        if arg.startswith(ARG_CITY_DISTRICT):
            values['city_district'] = arg[len(ARG_CITY_DISTRICT):]
        elif arg.startswith(ARG_FIRST_DELIVERY_DATETIME):
            parsed = parse_datetime_exact(arg[len(ARG_FIRST_DELIVERY_DATETIME):])
            if parsed is not None:
                values['first_delivery_time'] = parsed
        elif arg.startswith(ARG_DELIVERY_LOG):
            values['log_file'] = arg[len(ARG_DELIVERY_LOG):]
        elif arg.startswith(ARG_DELIVERY_ORDER):
            values['result_file'] = arg[len(ARG_DELIVERY_ORDER):]
        elif arg.startswith(ARG_DATA_FILE):
            values['data_file'] = arg[len(ARG_DATA_FILE):]

    return replace(defaults or DeliveryArguments(), **values)


def _read_line(input_stream):
    return input_stream.readline().rstrip('\r\n')


def resolve_interactive(arguments, input_stream=None, output=None):
    """
    Запросить район и время начала доставки, если они не заданы

    :return: DeliveryArguments или None, если введена некорректная дата
    """
    if input_stream is None:
        input_stream = sys.stdin
    if output is None:
        output = sys.stdout

    if not arguments.city_district:
        print("Введите район доставки:", file=output)
        arguments = replace(arguments, city_district=_read_line(input_stream))

    if arguments.first_delivery_time is None:
        print(f"Введите начальное время доставки (в формате {DATETIME_FORMAT_HINT}):", file=output)
        parsed = parse_datetime_exact(_read_line(input_stream))
        if parsed is None:
            print("Некорректный формат даты. Завершение работы.", file=output)
            return None
        arguments = replace(arguments, first_delivery_time=parsed)

    return arguments
