from telebot import TeleBot

from city_weather_bot.api.weather import RequestOptions, WeatherClient
from city_weather_bot.config_data.config import Config
from city_weather_bot.database.history import HistoryStore
from city_weather_bot.handlers import register_handlers
from city_weather_bot.utils.context import BotContext


def create_context(config: Config) -> BotContext:
    options = RequestOptions(locale=config.weather_lang, units=config.weather_units)
    return BotContext(
        weather=WeatherClient(config.weather_api_key, options),
        history=HistoryStore(config.db_path),
    )


def create_bot(config: Config, context: BotContext) -> TeleBot:
    """
        Создание бота и регистрация обработчиков.
        :param config: настройки
        :param context: зависимости обработчиков
        :return: TeleBot
    """
    bot = TeleBot(config.bot_token)
    register_handlers(bot, context)
    return bot
