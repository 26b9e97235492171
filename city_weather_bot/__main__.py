from city_weather_bot.main import main


main()
