import click
from loguru import logger

from city_weather_bot.config_data.config import load_config
from city_weather_bot.loader import create_bot, create_context
from city_weather_bot.utils.set_bot_commands import set_default_commands
from city_weather_bot.utils.set_logger import setup_logger


@click.command()
@click.option('--env-file', 'env_file', default='.env', help='Файл с переменными окружения')
@logger.catch()
def main(env_file: str) -> None:
    """
        Запуск бота: настройки, логи, зависимости, обработчики и опрос Telegram.
        :param env_file: файл с переменными окружения
        :return: None
    """
    config = load_config(env_file)
    setup_logger(config.log_level, config.log_file)
    context = create_context(config)
    bot = create_bot(config, context)
    set_default_commands(bot)
    logger.info('Бот запущен')
    try:
        bot.infinity_polling()
    finally:
        context.history.close()
        logger.info('Бот остановлен')


if __name__ == '__main__':
    main()
