import os
from dotenv import load_dotenv

load_dotenv()

# Формат даты и времени доставки во входном файле и в аргументах
DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DATETIME_FORMAT_HINT = 'yyyy-MM-dd HH:mm:ss'

# Длина окна доставки в минутах (верхняя граница включается)
DELIVERY_WINDOW_MINUTES = 30

# Параметры командной строки
ARG_CITY_DISTRICT = '_cityDistrict='
ARG_FIRST_DELIVERY_DATETIME = '_firstDeliveryDateTime='
ARG_DELIVERY_LOG = '_deliveryLog='
ARG_DELIVERY_ORDER = '_deliveryOrder='
ARG_DATA_FILE = '_dataFile='

# Значения по умолчанию из окружения (.env)
DEFAULT_DATA_FILE = os.getenv('DELIVERY_DATA_FILE', '')
DEFAULT_LOG_FILE = os.getenv('DELIVERY_LOG_FILE', '')
DEFAULT_ORDER_FILE = os.getenv('DELIVERY_ORDER_FILE', '')
DEFAULT_CITY_DISTRICT = os.getenv('DELIVERY_CITY_DISTRICT', '')
DEFAULT_FIRST_DATETIME = os.getenv('DELIVERY_FIRST_DATETIME', '')

# Файл результатов
ORDERS_SHEET_TITLE = 'Заказы'
RESULT_HEADERS = ['Номер заказа', 'Вес', 'Район', 'Время доставки']
EXCEL_DATETIME_FORMAT = 'yyyy-mm-dd hh:mm:ss'

# Логирование
LOGGER_NAME = 'delivery_service'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
