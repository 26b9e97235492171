from peewee import BigIntegerField, Model, SqliteDatabase, TextField
from playhouse.sqlite_ext import AutoIncrementField


class CityQuery(Model):
    """
        Класс таблицы базы данных

        id: id строки (растёт с каждой записью, по нему определяется свежесть запроса)
        user_id: id пользователя
        city_name: город запроса в том виде, как его ввёл пользователь

        Модель не привязана к базе: запросы выполняются внутри db.bind_ctx.
    """
    id = AutoIncrementField()
    user_id = BigIntegerField()
    city_name = TextField()

    class Meta:
        table_name = 'cities'


def create_database(path: str) -> SqliteDatabase:
    """
        Подключение базы данных и создание таблицы, если её ещё нет.
        :param path: путь к файлу базы данных
        :return: SqliteDatabase
    """
    db = SqliteDatabase(path)
    with db, db.bind_ctx([CityQuery]):
        db.create_tables([CityQuery], safe=True)
    return db
