from city_weather_bot.database.history import HistoryStore
from city_weather_bot.database.req_history import dedupe
