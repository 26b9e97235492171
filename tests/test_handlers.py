"""Tests for the conversation handlers."""

from unittest.mock import MagicMock, patch

import pytest
from telebot.apihelper import ApiTelegramException

from city_weather_bot.handlers import register_handlers
from city_weather_bot.handlers.default_handlers.callbacks import callback_handler
from city_weather_bot.handlers.default_handlers.history import history
from city_weather_bot.handlers.default_handlers.start import bot_help, bot_start
from city_weather_bot.handlers.default_handlers.weather import city_weather, is_city_text
from city_weather_bot.utils import texts
from city_weather_bot.utils.exceptions import StoreError

from tests.conftest import CHAT_ID, USER_ID, make_call, make_message, sent_texts


def buttons(markup):
    return [(button.text, button.callback_data) for row in markup.keyboard for button in row]


class TestStart:

    def test_greeting(self, bot):
        bot_start(make_message('/start'), bot=bot)
        bot.send_message.assert_called_once_with(CHAT_ID, texts.GREETING)

    def test_help(self, bot):
        bot_help(make_message('/help'), bot=bot)
        bot.send_message.assert_called_once_with(CHAT_ID, texts.HELP)


class TestCityWeather:

    def test_success_records_city_and_sends_menu(self, bot, context, store):
        city_weather(make_message('Berlin'), bot=bot, context=context)

        assert store.recent_cities(USER_ID) == ['Berlin']
        report, prompt = sent_texts(bot)
        assert 'Berlin' in report
        assert '21.5°C' in report
        assert 'clear sky' in report
        assert prompt == texts.MENU_PROMPT
        markup = bot.send_message.call_args.kwargs['reply_markup']
        assert buttons(markup) == [
            (texts.BUTTON_LAST_CITIES, 'show_last_cities'),
            (texts.BUTTON_DETAILED, 'detailed_forecast|Berlin'),
        ]

    def test_unknown_city(self, bot, context, store):
        city_weather(make_message('Atlantis'), bot=bot, context=context)

        bot.send_message.assert_called_once_with(CHAT_ID, texts.WEATHER_ERROR)
        assert store.recent_cities(USER_ID) == []

    def test_store_failure_does_not_stop_reply(self, bot, context, store):
        with patch.object(store, 'record', side_effect=StoreError('disk full')):
            city_weather(make_message('Berlin'), bot=bot, context=context)

        assert len(sent_texts(bot)) == 2
        assert 'Berlin' in sent_texts(bot)[0]

    def test_row_recorded_even_if_reply_fails(self, bot, context, store):
        bot.send_message.side_effect = ApiTelegramException(
            'sendMessage', MagicMock(), {'error_code': 403, 'description': 'Forbidden: bot was blocked by the user'})

        with pytest.raises(ApiTelegramException):
            city_weather(make_message('Berlin'), bot=bot, context=context)

        assert store.recent_cities(USER_ID) == ['Berlin']

    def test_city_text_filter(self):
        assert is_city_text(make_message('Berlin'))
        assert not is_city_text(make_message('/unknown'))
        assert not is_city_text(make_message(''))


class TestLastCities:

    def test_no_cities(self, bot, context):
        callback_handler(make_call('show_last_cities'), bot=bot, context=context)

        bot.answer_callback_query.assert_called_once_with('cb-1')
        bot.send_message.assert_called_once_with(CHAT_ID, texts.NO_CITIES)

    def test_unique_cities_menu(self, bot, context, store):
        for city in ['Oslo', 'Riga', 'Oslo', 'Oslo']:
            store.record(USER_ID, city)

        callback_handler(make_call('show_last_cities'), bot=bot, context=context)

        assert sent_texts(bot) == [texts.CHOOSE_CITY]
        markup = bot.send_message.call_args.kwargs['reply_markup']
        assert buttons(markup) == [('Oslo', 'weather|Oslo'), ('Riga', 'weather|Riga')]
        assert len(store.recent_cities(USER_ID)) == 4

    def test_only_five_latest(self, bot, context, store):
        for city in ['Old', 'a', 'b', 'c', 'd', 'e']:
            store.record(USER_ID, city)

        callback_handler(make_call('show_last_cities'), bot=bot, context=context)

        markup = bot.send_message.call_args.kwargs['reply_markup']
        assert [text for text, _ in buttons(markup)] == ['e', 'd', 'c', 'b', 'a']

    def test_read_failure(self, bot, context, store):
        with patch.object(store, 'recent_cities', side_effect=StoreError('locked')):
            callback_handler(make_call('show_last_cities'), bot=bot, context=context)

        bot.send_message.assert_called_once_with(CHAT_ID, texts.HISTORY_ERROR)

    def test_history_command(self, bot, context, store):
        store.record(USER_ID, 'Riga')

        history(make_message('/history'), bot=bot, context=context)

        assert sent_texts(bot) == [texts.CHOOSE_CITY]


class TestCityButtons:

    def test_city_selection(self, bot, context, store):
        callback_handler(make_call('weather|Oslo'), bot=bot, context=context)

        (reply,) = sent_texts(bot)
        assert 'Oslo' in reply
        assert 'Влажность: 60%' in reply
        assert 'Ощущается' not in reply
        assert store.recent_cities(USER_ID) == []

    def test_detailed_forecast(self, bot, context):
        callback_handler(make_call('detailed_forecast|Riga'), bot=bot, context=context)

        (reply,) = sent_texts(bot)
        for part in ['Riga', '21.5°C', 'Ощущается как: 20.0°C', 'clear sky', 'Влажность: 60%',
                     'Давление: 1012 гПа', 'Скорость ветра: 3.2 м/с', 'Облачность: 10%']:
            assert part in reply

    def test_city_with_separator(self, bot, context, weather):
        weather.known.add('A|B')

        callback_handler(make_call('weather|A|B'), bot=bot, context=context)

        assert weather.calls == ['A|B']

    def test_lookup_failure(self, bot, context):
        callback_handler(make_call('detailed_forecast|Atlantis'), bot=bot, context=context)

        bot.send_message.assert_called_once_with(CHAT_ID, texts.CITY_WEATHER_ERROR)

    def test_missing_city(self, bot, context, weather):
        callback_handler(make_call('weather'), bot=bot, context=context)

        bot.send_message.assert_called_once_with(CHAT_ID, texts.CITY_WEATHER_ERROR)
        assert weather.calls == []

    def test_reply_sent_when_acknowledgement_fails(self, bot, context):
        bot.answer_callback_query.side_effect = ApiTelegramException(
            'answerCallbackQuery', MagicMock(),
            {'error_code': 400, 'description': 'Bad Request: query is too old'})

        callback_handler(make_call('weather|Oslo'), bot=bot, context=context)

        (reply,) = sent_texts(bot)
        assert 'Oslo' in reply

    def test_unknown_action(self, bot, context):
        callback_handler(make_call('something'), bot=bot, context=context)

        bot.answer_callback_query.assert_called_once_with('cb-1')
        bot.send_message.assert_not_called()


def test_register_handlers(bot, context):
    register_handlers(bot, context)

    commands = [call.kwargs.get('commands') for call in bot.register_message_handler.call_args_list]
    assert commands == [['start'], ['help'], ['history'], None]
    bot.register_callback_query_handler.assert_called_once()
