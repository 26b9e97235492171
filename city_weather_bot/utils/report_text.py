from city_weather_bot.api.weather import WeatherReport


UNIT_LABELS = {
    'metric': ('°C', 'м/с'),
    'imperial': ('°F', 'миль/ч'),
}


def short_report(city: str, report: WeatherReport, units: str = 'metric') -> str:
    temp_unit, _ = UNIT_LABELS[units]
    return ('Погода в городе {city}:'
            '\nТемпература: {temp:.1f}{temp_unit}'
            '\nСостояние: {description}\n').format(
        city=city, temp=report.temp, temp_unit=temp_unit, description=report.description)


def city_report(city: str, report: WeatherReport, units: str = 'metric') -> str:
    return short_report(city, report, units) + 'Влажность: {}%\n'.format(report.humidity)


def detailed_report(city: str, report: WeatherReport, units: str = 'metric') -> str:
    """
        Подробный прогноз для кнопки 'Узнать более подробный прогноз'.
        :param city: город
        :param report: погода
        :param units: система единиц, в которой запрошена погода
        :return: текст сообщения
    """
    temp_unit, speed_unit = UNIT_LABELS[units]
    return ('Подробный прогноз погоды в городе {city}:'
            '\nТемпература: {temp:.1f}{temp_unit}'
            '\nОщущается как: {feels_like:.1f}{temp_unit}'
            '\nСостояние: {description}'
            '\nВлажность: {humidity}%'
            '\nДавление: {pressure} гПа'
            '\nСкорость ветра: {wind_speed:.1f} {speed_unit}'
            '\nОблачность: {clouds}%\n').format(
        city=city,
        temp=report.temp,
        feels_like=report.feels_like,
        temp_unit=temp_unit,
        description=report.description,
        humidity=report.humidity,
        pressure=report.pressure,
        wind_speed=report.wind_speed,
        speed_unit=speed_unit,
        clouds=report.clouds,
    )
