from typing import Iterable, List

from peewee import SqliteDatabase

from city_weather_bot.database.db_create import CityQuery


def recent_cities(db: SqliteDatabase, user_id: int, limit: int = 5) -> List[str]:
    """
        Последние города пользователя, начиная с самого свежего.
        :param db: база данных
        :param user_id: id пользователя
        :param limit: сколько записей вернуть
        :return: список городов
    """
    with db, db.bind_ctx([CityQuery]):
        query = (CityQuery
                 .select(CityQuery.city_name)
                 .where(CityQuery.user_id == user_id)
                 .order_by(CityQuery.id.desc())
                 .limit(limit))
        return [row.city_name for row in query]


def dedupe(cities: Iterable[str]) -> List[str]:
    """Первое вхождение каждого города, порядок сохраняется."""
    seen = set()
    result = []
    for city in cities:
        if city not in seen:
            seen.add(city)
            result.append(city)
    return result
