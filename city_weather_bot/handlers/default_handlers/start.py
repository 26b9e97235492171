from loguru import logger
from telebot import TeleBot
from telebot.types import Message

from city_weather_bot.utils import texts


def bot_start(message: Message, bot: TeleBot) -> None:
    """
    Команда /start. Пользователь приветствуется и получает предложение ввести город.
    :param message: сообщение пользователя (ввод команды /start)
    :param bot: бот
    :return: None
    """
    logger.info('/start от пользователя {}', message.from_user.id)
    bot.send_message(message.chat.id, texts.GREETING)


def bot_help(message: Message, bot: TeleBot) -> None:
    """
    Команда /help. Выводится справка о возможностях бота.
    :param message: сообщение пользователя (ввод команды /help)
    :param bot: бот
    :return: None
    """
    bot.send_message(message.chat.id, texts.HELP)
