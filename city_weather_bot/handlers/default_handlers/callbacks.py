from loguru import logger
from telebot import TeleBot
from telebot.apihelper import ApiTelegramException
from telebot.types import CallbackQuery

from city_weather_bot.handlers.default_handlers.history import send_last_cities
from city_weather_bot.keyboards.inline.menus import DETAILED_FORECAST, SHOW_LAST_CITIES, WEATHER, decode
from city_weather_bot.utils import texts
from city_weather_bot.utils.context import BotContext
from city_weather_bot.utils.exceptions import WeatherError
from city_weather_bot.utils.report_text import city_report, detailed_report


REPORTS = {
    WEATHER: city_report,
    DETAILED_FORECAST: detailed_report,
}


def callback_handler(call: CallbackQuery, bot: TeleBot, context: BotContext) -> None:
    """
        Нажатие кнопки. Всё, что нужно для ответа, передаётся в данных кнопки.
        :param call: нажатие кнопки
        :param bot: бот
        :param context: зависимости обработчиков
        :return: None
    """
    try:
        bot.answer_callback_query(call.id)
    except ApiTelegramException as exc:
        # устаревшая кнопка: отвечаем без подтверждения
        logger.warning('Нажатие кнопки не подтверждено: {}', exc)
    chat_id = call.message.chat.id
    user_id = call.from_user.id
    action, city = decode(call.data or '')
    logger.info('Пользователь {} нажал кнопку {}', user_id, call.data)

    if action == SHOW_LAST_CITIES:
        send_last_cities(bot, chat_id, user_id, context)
        return

    formatter = REPORTS.get(action)
    if formatter is None:
        logger.warning('Неизвестная кнопка: {}', call.data)
        return
    if not city:
        logger.warning('В данных кнопки нет города: {}', call.data)
        bot.send_message(chat_id, texts.CITY_WEATHER_ERROR)
        return

    try:
        report = context.weather.fetch(city)
    except WeatherError:
        bot.send_message(chat_id, texts.CITY_WEATHER_ERROR)
        return
    bot.send_message(chat_id, formatter(city, report, context.units))
