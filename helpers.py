"""Модуль вспомогательных функций для отбора заказов по району и времени"""
from datetime import timedelta
from config import DELIVERY_WINDOW_MINUTES


class OrderHelpers:
    """Вспомогательные функции для работы с заказами"""

    @staticmethod
    def delivery_window(first_delivery_time):
        """Получить границы окна доставки (обе включаются)"""
        return first_delivery_time, first_delivery_time + timedelta(minutes=DELIVERY_WINDOW_MINUTES)

    @staticmethod
    def same_district(left, right):
        """Посимвольное сравнение районов без учета регистра ('straße' не равно 'STRASSE')"""
        return len(left) == len(right) and all(
            a == b or a.upper() == b.upper() for a, b in zip(left, right)
        )

    @staticmethod
    def filter_orders(orders, district, first_delivery_time):
        """
        Отобрать заказы района, попадающие в окно доставки

        :param orders: Список Order
        :param district: Район доставки
        :param first_delivery_time: Начало окна доставки
        :return: Новый список Order в исходном порядке
        """
        start_time, end_time = OrderHelpers.delivery_window(first_delivery_time)
        return [
            order for order in orders
            if OrderHelpers.same_district(order.district, district)
            and start_time <= order.delivery_time <= end_time
        ]
