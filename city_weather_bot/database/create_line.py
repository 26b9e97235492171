from peewee import SqliteDatabase

from city_weather_bot.database.db_create import CityQuery


def create_line(db: SqliteDatabase, user_id: int, city_name: str) -> None:
    """
        Функция записи запроса города в базу данных.
        :param db: база данных
        :param user_id: id пользователя
        :param city_name: город запроса
        :return: None
    """
    with db, db.bind_ctx([CityQuery]):
        CityQuery.create(user_id=user_id, city_name=city_name)
