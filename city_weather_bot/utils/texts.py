GREETING = 'Привет! Введи название города, чтобы получить прогноз погоды.'
HELP = ('Я бот погоды!\n'
        '\n- Отправь название города, и я пришлю текущую погоду\n'
        '- Под прогнозом есть кнопки: последние введённые города и подробный прогноз\n'
        '- Команда /history покажет последние введённые города')
MENU_PROMPT = ('Нажмите на кнопку ниже, чтобы увидеть последние введенные города '
               'или получить более подробный прогноз:')
CHOOSE_CITY = 'Выберите город, прогноз для которого хотите узнать:'
NO_CITIES = 'У вас пока нет введенных городов.'
HISTORY_ERROR = 'Произошла ошибка при получении городов'
WEATHER_ERROR = 'Не удалось получить данные о погоде. Проверьте название города.'
CITY_WEATHER_ERROR = 'Не удалось получить данные о погоде для этого города.'

BUTTON_LAST_CITIES = 'Показать последние введенные города'
BUTTON_DETAILED = 'Узнать более подробный прогноз'
