# ABOUTME: WMO weather interpretation codes used by Open-Meteo, mapped to display text.
# ABOUTME: Also renders a WeatherSnapshot into the flat summary shown by the web layer.

import math

from weather_console.models import LocationCandidate, WeatherSnapshot

UNKNOWN_CONDITION = "Unknown"

WEATHER_CODES: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def weather_code_to_text(code: int) -> str:
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)


def round_half_up(value: float) -> int:
    """Round to the nearest whole degree with .5 going up, e.g. 30.5 -> 31 and -2.5 -> -2."""
    return math.floor(value + 0.5)


def describe_weather(weather: WeatherSnapshot, place: LocationCandidate | None = None) -> dict:
    """Flatten a snapshot into the fields a weather card displays."""
    cur = weather.current
    return {
        "place": place.label if place else "",
        "condition": weather_code_to_text(cur.weather_code),
        "daytime": "Day" if cur.is_day == 1 else "Night",
        "timezone": weather.timezone,
        "temperature": f"{round_half_up(cur.temperature_2m)}°C",
        "feels_like": f"{round_half_up(cur.apparent_temperature)}°C",
        "humidity": f"{cur.relative_humidity_2m:g}%",
        "wind": f"{cur.wind_speed_10m:g} km/h",
    }
