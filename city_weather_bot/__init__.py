"""Телеграм-бот погоды с историей запрошенных городов."""

__version__ = '1.0.0'
