from telebot import TeleBot
from telebot.types import BotCommand

from city_weather_bot.config_data.config import DEFAULT_COMMANDS


def set_default_commands(bot: TeleBot) -> None:
    """
        Регистрация меню команд бота в Telegram.
        :param bot: бот
        :return: None
    """
    bot.set_my_commands([BotCommand(*command) for command in DEFAULT_COMMANDS])
