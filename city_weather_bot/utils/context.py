from dataclasses import dataclass

from city_weather_bot.api.weather import WeatherClient
from city_weather_bot.database.history import HistoryStore


@dataclass
class BotContext:
    """
        Зависимости обработчиков, создаются один раз при запуске.

        weather: клиент сервиса погоды
        history: история городов
    """
    weather: WeatherClient
    history: HistoryStore

    @property
    def units(self) -> str:
        return self.weather.options.units
