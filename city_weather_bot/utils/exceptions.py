class BotError(Exception):
    """Базовое исключение бота."""


class WeatherError(BotError):
    """
        Не удалось получить погоду для города.
        Обработчикам достаточно этого класса: подклассы различаются только для логов.
    """


class ProviderError(WeatherError):
    """Сетевая ошибка или ответ сервиса погоды с кодом, отличным от 200."""


class DecodeError(WeatherError):
    """Тело ответа сервиса погоды не совпадает с ожидаемой структурой."""


class StoreError(BotError):
    """Ошибка чтения или записи истории городов."""
