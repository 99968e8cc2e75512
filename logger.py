"""Настройка файлового логгера для одного запуска"""
import logging
import os

from config import LOG_FORMAT, LOGGER_NAME


def configure_logger(log_path, name=LOGGER_NAME):
    """
    Создать логгер, пишущий сообщения уровня INFO и выше в файл

    Файл открывается на дозапись. Повторная настройка заменяет прежний
    обработчик, так что у логгера всегда одна цель.

    :param log_path: Путь к файлу журнала
    :param name: Имя логгера
    :return: logging.Logger
    """
    logger = logging.getLogger(name)
    close_logger(logger)

    # Папка для журнала создается при необходимости
    os.makedirs(os.path.dirname(os.fspath(log_path)) or '.', exist_ok=True)

    handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def close_logger(logger):
    """Закрыть и отсоединить обработчики логгера"""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
