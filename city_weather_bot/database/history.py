from typing import List

from peewee import PeeweeException

from city_weather_bot.database.create_line import create_line
from city_weather_bot.database.db_create import create_database
from city_weather_bot.database.req_history import recent_cities
from city_weather_bot.utils.exceptions import StoreError


class HistoryStore:
    """История запрошенных городов. Ошибки базы данных поднимаются как StoreError."""

    def __init__(self, path: str) -> None:
        try:
            self.db = create_database(path)
        except PeeweeException as exc:
            raise StoreError('Не удалось открыть базу {}: {}'.format(path, exc)) from exc

    def record(self, user_id: int, city_name: str) -> None:
        try:
            create_line(self.db, user_id, city_name)
        except PeeweeException as exc:
            raise StoreError('Не удалось сохранить город: {}'.format(exc)) from exc

    def recent_cities(self, user_id: int, limit: int = 5) -> List[str]:
        try:
            return recent_cities(self.db, user_id, limit)
        except PeeweeException as exc:
            raise StoreError('Не удалось получить города: {}'.format(exc)) from exc

    def close(self) -> None:
        if not self.db.is_closed():
            self.db.close()
