from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from city_weather_bot.api.weather import RequestOptions, WeatherReport
from city_weather_bot.database.history import HistoryStore
from city_weather_bot.utils.context import BotContext
from city_weather_bot.utils.exceptions import ProviderError


REPORT = WeatherReport(
    temp=21.5,
    feels_like=20.0,
    humidity=60,
    pressure=1012,
    description='clear sky',
    wind_speed=3.2,
    clouds=10,
)

USER_ID = 42
CHAT_ID = 100


class FakeWeatherClient:
    """Returns REPORT for known cities and raises ProviderError otherwise."""

    def __init__(self, known=('Berlin', 'Oslo', 'Riga')):
        self.known = set(known)
        self.options = RequestOptions()
        self.calls = []

    def fetch(self, place_name):
        self.calls.append(place_name)
        if place_name not in self.known:
            raise ProviderError('Код ответа 404')
        return REPORT


@pytest.fixture
def store(tmp_path):
    history = HistoryStore(str(tmp_path / 'cities.db'))
    yield history
    history.close()


@pytest.fixture
def weather():
    return FakeWeatherClient()


@pytest.fixture
def context(weather, store):
    return BotContext(weather=weather, history=store)


@pytest.fixture
def bot():
    return MagicMock()


def make_message(text, user_id=USER_ID, chat_id=CHAT_ID):
    return SimpleNamespace(
        text=text,
        from_user=SimpleNamespace(id=user_id),
        chat=SimpleNamespace(id=chat_id),
    )


def make_call(data, user_id=USER_ID, chat_id=CHAT_ID):
    return SimpleNamespace(
        id='cb-1',
        data=data,
        from_user=SimpleNamespace(id=user_id),
        message=make_message(None, user_id, chat_id),
    )


def sent_texts(bot):
    return [call.args[1] for call in bot.send_message.call_args_list]
