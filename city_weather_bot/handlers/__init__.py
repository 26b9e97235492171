from functools import partial

from telebot import TeleBot

from city_weather_bot.handlers.default_handlers.callbacks import callback_handler
from city_weather_bot.handlers.default_handlers.history import history
from city_weather_bot.handlers.default_handlers.start import bot_help, bot_start
from city_weather_bot.handlers.default_handlers.weather import city_weather, is_city_text
from city_weather_bot.utils.context import BotContext


def register_handlers(bot: TeleBot, context: BotContext) -> None:
    """
        Регистрация обработчиков. Команды регистрируются раньше текста,
        поэтому срабатывают первыми.
        :param bot: бот
        :param context: зависимости обработчиков
        :return: None
    """
    bot.register_message_handler(partial(bot_start, bot=bot), commands=['start'])
    bot.register_message_handler(partial(bot_help, bot=bot), commands=['help'])
    bot.register_message_handler(partial(history, bot=bot, context=context), commands=['history'])
    bot.register_message_handler(partial(city_weather, bot=bot, context=context),
                                 content_types=['text'], func=is_city_text)
    bot.register_callback_query_handler(partial(callback_handler, bot=bot, context=context),
                                        func=lambda call: True)
