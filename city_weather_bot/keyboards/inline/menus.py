from typing import Iterable, Optional, Tuple

from loguru import logger
from telebot import types

from city_weather_bot.utils import texts


SHOW_LAST_CITIES = 'show_last_cities'
WEATHER = 'weather'
DETAILED_FORECAST = 'detailed_forecast'

# ограничение Telegram на callback_data
MAX_CALLBACK_DATA = 64


def encode(action: str, city: str) -> Optional[str]:
    """
        Данные кнопки вида action|city.
        :param action: действие
        :param city: город
        :return: строка данных или None, если она длиннее 64 байт
    """
    data = '{}|{}'.format(action, city)
    if len(data.encode('utf-8')) > MAX_CALLBACK_DATA:
        logger.warning('Город слишком длинный для кнопки: {}', city)
        return None
    return data


def decode(data: str) -> Tuple[str, Optional[str]]:
    """
        Разбор данных кнопки по первому символу |.
        :param data: данные кнопки
        :return: действие и город (None, если города нет)
    """
    action, sep, city = data.partition('|')
    return action, (city if sep else None)


def result_menu(city: str) -> types.InlineKeyboardMarkup:
    """
        Меню под прогнозом: последние города и подробный прогноз по городу.
        :param city: город прогноза
        :return: InlineKeyboardMarkup
    """
    markup = types.InlineKeyboardMarkup(row_width=1)
    markup.row(types.InlineKeyboardButton(text=texts.BUTTON_LAST_CITIES, callback_data=SHOW_LAST_CITIES))
    detailed = encode(DETAILED_FORECAST, city)
    if detailed is not None:
        markup.row(types.InlineKeyboardButton(text=texts.BUTTON_DETAILED, callback_data=detailed))
    return markup


def cities_menu(cities: Iterable[str]) -> types.InlineKeyboardMarkup:
    """
        Меню выбора города: по одной кнопке в строке.
        :param cities: города без повторов
        :return: InlineKeyboardMarkup
    """
    markup = types.InlineKeyboardMarkup(row_width=1)
    for city in cities:
        data = encode(WEATHER, city)
        if data is not None:
            markup.row(types.InlineKeyboardButton(text=city, callback_data=data))
    return markup
