import openpyxl
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment
from openpyxl.utils import get_column_letter

from config import ORDERS_SHEET_TITLE, RESULT_HEADERS, EXCEL_DATETIME_FORMAT
from models import Order
from utils import cell_text, parse_weight, parse_datetime_exact


class Database:
    """Класс для работы с Excel файлами заказов"""

    @staticmethod
    def _format_headers(ws):
        """Форматирование заголовков листа"""
        for cell in ws[1]:
            cell.font = Font(bold=True)
            cell.alignment = Alignment(horizontal='center')

    @staticmethod
    def _autofit_columns(ws):
        """Подбор ширины колонок по содержимому"""
        for column_cells in ws.iter_cols(min_row=1, max_row=ws.max_row):
            width = max(len(cell_text(cell.value)) for cell in column_cells)
            ws.column_dimensions[get_column_letter(column_cells[0].column)].width = width + 2

    @staticmethod
    def _parse_order_row(row_number, row, logger):
        """Парсинг строки заказа; при ошибке возвращает None и пишет предупреждение"""
        order_number, weight_text, district, delivery_text = (cell_text(value) for value in row)

        if not all(text.strip() for text in (order_number, weight_text, district, delivery_text)):
            logger.warning(f"Некорректные данные в строке {row_number}: одна из ячеек пуста.")
            return None

        weight = parse_weight(weight_text)
        if weight is None:
            logger.warning(f"Некорректный формат веса в строке {row_number}: {weight_text}")
            return None

        delivery_time = parse_datetime_exact(delivery_text)
        if delivery_time is None:
            logger.warning(f"Некорректный формат даты в строке {row_number}: {delivery_text}")
            return None

        return Order(
            order_number=order_number,
            weight=weight,
            district=district,
            delivery_time=delivery_time
        )

    @staticmethod
    def load_orders(file_path, logger):
        """
        Загрузить заказы из первого листа Excel файла

        Первая строка считается заголовком. Колонки читаются по позиции:
        номер заказа, вес, район, время доставки.

        :param file_path: Путь к входному файлу
        :param logger: Логгер запуска
        :return: Список Order
        """
        wb = openpyxl.load_workbook(file_path, data_only=True)
        orders = []

        if not wb.worksheets:
            logger.error("Файл Excel не содержит листов.")
            return orders

        ws = wb.worksheets[0]

        for row_number, row in enumerate(ws.iter_rows(min_row=2, max_col=4, values_only=True), start=2):
            order = Database._parse_order_row(row_number, row, logger)
            if order:
                orders.append(order)

        logger.info(f"Загружено заказов: {len(orders)} из файла {file_path}")
        return orders

    @staticmethod
    def save_to_excel(orders, file_path, logger):
        """
        Сохранить заказы в новый Excel файл (существующий файл перезаписывается)

        :param orders: Список Order
        :param file_path: Путь к файлу результатов
        :param logger: Логгер запуска
        """
        wb = Workbook()
        ws = wb.active
        ws.title = ORDERS_SHEET_TITLE
        ws.append(RESULT_HEADERS)
        Database._format_headers(ws)

        for order in orders:
            ws.append([order.order_number, order.weight, order.district, order.delivery_time])
            ws.cell(ws.max_row, 4).number_format = EXCEL_DATETIME_FORMAT

        Database._autofit_columns(ws)

        wb.save(file_path)
        logger.info(f"Результаты сохранены в {file_path}")
