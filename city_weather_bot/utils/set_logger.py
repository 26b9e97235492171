import sys
from typing import Optional

from loguru import logger


def setup_logger(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """
        Настройка логов: вывод в stderr и, при необходимости, в файл с ротацией.
        :param level: уровень логирования
        :param log_file: путь к файлу логов
        :return: None
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, level=level, rotation='10 MB', retention=5, encoding='utf-8')
