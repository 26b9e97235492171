from dataclasses import dataclass
from typing import Any, Dict

import requests
from loguru import logger

from city_weather_bot.utils.exceptions import DecodeError, ProviderError


URL = 'http://api.openweathermap.org/data/2.5/weather'
TIMEOUT = 10


@dataclass(frozen=True)
class RequestOptions:
    """
        Параметры запроса погоды.

        locale: язык описания погоды
        units: система единиц, metric или imperial
    """
    locale: str = 'ru'
    units: str = 'metric'


@dataclass(frozen=True)
class WeatherReport:
    """
        Текущая погода в городе.

        temp: температура
        feels_like: ощущаемая температура
        humidity: влажность воздуха (в процентах)
        pressure: давление (в гПа)
        description: описание погоды
        wind_speed: скорость ветра
        clouds: облачность (в процентах)
    """
    temp: float
    feels_like: float
    humidity: int
    pressure: int
    description: str
    wind_speed: float
    clouds: int


def parse_report(data: Dict[str, Any]) -> WeatherReport:
    """
        Разбор ответа OpenWeatherMap.
        :param data: тело ответа
        :return: WeatherReport
    """
    try:
        main = data['main']
        conditions = data['weather']
        if not conditions:
            raise DecodeError('В ответе нет описания погоды')
        return WeatherReport(
            temp=float(main['temp']),
            feels_like=float(main['feels_like']),
            humidity=int(main['humidity']),
            pressure=int(main['pressure']),
            description=str(conditions[0]['description']),
            wind_speed=float(data['wind']['speed']),
            clouds=int(data['clouds']['all']),
        )
    except (KeyError, IndexError, TypeError, ValueError, OverflowError) as exc:
        raise DecodeError('Неожиданная структура ответа: {!r}'.format(exc)) from exc


class WeatherClient:
    """Клиент OpenWeatherMap: один запрос текущей погоды на каждый вызов fetch."""

    def __init__(self, api_key: str, options: RequestOptions = RequestOptions(), url: str = URL) -> None:
        self.api_key = api_key
        self.options = options
        self.url = url

    def params(self, place_name: str) -> Dict[str, str]:
        return {
            'q': place_name,
            'appid': self.api_key,
            'lang': self.options.locale,
            'units': self.options.units,
        }

    def fetch(self, place_name: str) -> WeatherReport:
        """
            Запрос текущей погоды в городе.
            :param place_name: название города, как его ввёл пользователь
            :return: WeatherReport
            :raises ProviderError: сетевая ошибка или код ответа не 200
            :raises DecodeError: ответ не разобран
        """
        logger.debug('Запрос погоды: {}', place_name)
        try:
            response = requests.request('GET', self.url, params=self.params(place_name), timeout=TIMEOUT)
        except requests.RequestException as exc:
            logger.warning('Сервис погоды недоступен ({}): {}', place_name, exc)
            raise ProviderError(str(exc)) from exc

        if response.status_code != requests.codes.ok:
            logger.warning('Сервис погоды вернул код {} для {}', response.status_code, place_name)
            raise ProviderError('Код ответа {}'.format(response.status_code))

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning('Ответ сервиса погоды не JSON ({}): {}', place_name, exc)
            raise DecodeError('Ответ не JSON') from exc

        try:
            return parse_report(data)
        except DecodeError as exc:
            logger.warning('Не удалось разобрать погоду для {}: {}', place_name, exc)
            raise
