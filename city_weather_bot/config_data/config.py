import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from loguru import logger


DEFAULT_COMMANDS = (
    ('start', 'Запустить бота'),
    ('help', 'Вывести справку'),
    ('history', 'Последние введённые города'),
)

UNITS = ('metric', 'imperial')


@dataclass(frozen=True)
class Config:
    """
        Настройки бота.

        bot_token: токен телеграм-бота
        weather_api_key: ключ OpenWeatherMap
        db_path: путь к файлу базы данных
        weather_lang: язык описания погоды
        weather_units: система единиц (metric или imperial)
        log_level: уровень логирования
        log_file: файл логов (не пишется, если не задан)
    """
    bot_token: str
    weather_api_key: str
    db_path: str = 'cities.db'
    weather_lang: str = 'ru'
    weather_units: str = 'metric'
    log_level: str = 'INFO'
    log_file: Optional[str] = None


def _fatal(text: str) -> None:
    logger.critical(text)
    raise SystemExit(text)


def load_config(env_file: str = '.env') -> Config:
    """
        Загрузка настроек из файла окружения.
        При отсутствии файла или обязательных переменных работа бота завершается.
        :param env_file: путь к файлу окружения
        :return: Config
    """
    if not os.path.isfile(env_file) or not load_dotenv(env_file):
        _fatal('Переменные окружения не загружены: нет файла {}'.format(env_file))

    bot_token = os.getenv('BOT_TOKEN')
    if not bot_token:
        _fatal('Переменная окружения BOT_TOKEN не задана')
    weather_api_key = os.getenv('WEATHER_API_KEY')
    if not weather_api_key:
        _fatal('Переменная окружения WEATHER_API_KEY не задана')

    units = os.getenv('WEATHER_UNITS', 'metric')
    if units not in UNITS:
        _fatal('Неизвестная система единиц WEATHER_UNITS={}'.format(units))

    return Config(
        bot_token=bot_token,
        weather_api_key=weather_api_key,
        db_path=os.getenv('DB_PATH', 'cities.db'),
        weather_lang=os.getenv('WEATHER_LANG', 'ru'),
        weather_units=units,
        log_level=os.getenv('LOG_LEVEL', 'INFO'),
        log_file=os.getenv('LOG_FILE') or None,
    )
