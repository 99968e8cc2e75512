import sys

from arguments import USAGE_LINES, environment_defaults, parse_arguments, resolve_interactive
from database import Database
from helpers import OrderHelpers
from logger import configure_logger, close_logger

# Коды завершения
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def run_pipeline(arguments, logger):
    """Загрузка, отбор и сохранение заказов"""
    orders = Database.load_orders(arguments.data_file, logger)

    start_time, end_time = OrderHelpers.delivery_window(arguments.first_delivery_time)
    logger.info(f"Отбор заказов: район '{arguments.city_district}', окно {start_time} - {end_time}")
    filtered_orders = OrderHelpers.filter_orders(orders, arguments.city_district, arguments.first_delivery_time)
    logger.info(f"Отобрано заказов: {len(filtered_orders)}")

    Database.save_to_excel(filtered_orders, arguments.result_file, logger)
    return filtered_orders


def run(argv, input_stream=None, output=None):
    """
    Запуск обработки заказов

    :param argv: Аргументы командной строки (без имени программы)
    :param input_stream: Поток для ввода недостающих параметров
    :param output: Поток для сообщений пользователю
    :return: Код завершения
    """
    if output is None:
        output = sys.stdout
    arguments = parse_arguments(argv, environment_defaults())

    if arguments.missing_paths():
        for line in USAGE_LINES:
            print(line, file=output)
        return EXIT_USAGE

    logger = None
    try:
        logger = configure_logger(arguments.log_file)
        logger.info("Приложение запущено")

        arguments = resolve_interactive(arguments, input_stream, output)
        if arguments is None:
            logger.error("Некорректный формат начального времени доставки")
            return EXIT_FAILURE

        run_pipeline(arguments, logger)

        logger.info("Обработка завершена успешно")
        return EXIT_OK
    except Exception:
        if logger is None:
            raise
        logger.exception("Произошла ошибка")
        return EXIT_FAILURE
    finally:
        if logger is not None:
            close_logger(logger)


def main():
    """Точка входа консольной команды"""
    sys.exit(run(sys.argv[1:]))


if __name__ == '__main__':
    main()
