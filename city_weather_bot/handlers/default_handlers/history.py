from loguru import logger
from telebot import TeleBot
from telebot.types import Message

from city_weather_bot.database.req_history import dedupe
from city_weather_bot.keyboards.inline.menus import cities_menu
from city_weather_bot.utils import texts
from city_weather_bot.utils.context import BotContext
from city_weather_bot.utils.exceptions import StoreError


def send_last_cities(bot: TeleBot, chat_id: int, user_id: int, context: BotContext) -> None:
    """
        Отправка меню с последними городами пользователя (без повторов).
        :param bot: бот
        :param chat_id: id чата
        :param user_id: id пользователя
        :param context: зависимости обработчиков
        :return: None
    """
    try:
        cities = dedupe(context.history.recent_cities(user_id, limit=5))
    except StoreError as exc:
        logger.error('Не удалось получить города пользователя {}: {}', user_id, exc)
        bot.send_message(chat_id, texts.HISTORY_ERROR)
        return

    markup = cities_menu(cities)
    if not markup.keyboard:
        bot.send_message(chat_id, texts.NO_CITIES)
        return
    bot.send_message(chat_id, texts.CHOOSE_CITY, reply_markup=markup)


def history(message: Message, bot: TeleBot, context: BotContext) -> None:
    """
        Команда /history. Выводятся последние введённые города.
        :param message: сообщение пользователя (ввод команды /history)
        :return: None
    """
    send_last_cities(bot, message.chat.id, message.from_user.id, context)
