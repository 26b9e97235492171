from loguru import logger
from telebot import TeleBot
from telebot.types import Message

from city_weather_bot.keyboards.inline.menus import result_menu
from city_weather_bot.utils import texts
from city_weather_bot.utils.context import BotContext
from city_weather_bot.utils.exceptions import StoreError, WeatherError
from city_weather_bot.utils.report_text import short_report


def is_city_text(message: Message) -> bool:
    """Текст сообщения считается городом, если это не команда."""
    return bool(message.text) and not message.text.startswith('/')


def city_weather(message: Message, bot: TeleBot, context: BotContext) -> None:
    """
        Обработка сообщения пользователя с названием города.
        Город записывается в историю, затем отправляются погода и меню.
        :param message: сообщение пользователя (город)
        :param bot: бот
        :param context: зависимости обработчиков
        :return: None
    """
    city = message.text
    user_id = message.from_user.id
    logger.info('Пользователь {} запросил погоду: {}', user_id, city)
    try:
        report = context.weather.fetch(city)
    except WeatherError:
        bot.send_message(message.chat.id, texts.WEATHER_ERROR)
        return

    try:
        context.history.record(user_id, city)
    except StoreError as exc:
        logger.error('Город не сохранён: {}', exc)

    bot.send_message(message.chat.id, short_report(city, report, context.units))
    bot.send_message(message.chat.id, texts.MENU_PROMPT, reply_markup=result_menu(city))
