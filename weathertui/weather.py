"""Weather report data model, wttr.in client and city list loading."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, TypeVar
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import urlopen

WEATHER_ENDPOINT = "https://wttr.in/"

_T = TypeVar("_T")


class WeatherError(Exception):
    """Raised when a weather report cannot be fetched or decoded."""


def _text(key: str) -> Any:
    return field(default="", metadata={"json": key})


def _items(key: str, item: type) -> Any:
    return field(default_factory=list, metadata={"json": key, "item": item})


def _decode(cls: type[_T], data: Any) -> _T:
    """Build a dataclass from decoded JSON, leaving missing fields at their defaults."""
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise WeatherError(
            f"cannot decode JSON {type(data).__name__} into {cls.__name__}"
        )
    folded: dict[str, Any] = {}
    for key, value in data.items():
        folded[str(key).lower()] = value

    values: dict[str, Any] = {}
    for f in fields(cls):
        key = f.metadata["json"]
        if key in data:
            value = data[key]
        elif key.lower() in folded:
            value = folded[key.lower()]
        else:
            continue
        if value is None:
            continue
        item = f.metadata.get("item")
        if item is None:
            if not isinstance(value, str):
                raise WeatherError(
                    f"field {key!r} of {cls.__name__} must be a string, "
                    f"not {type(value).__name__}"
                )
            values[f.name] = value
        else:
            if not isinstance(value, list):
                raise WeatherError(
                    f"field {key!r} of {cls.__name__} must be a list, "
                    f"not {type(value).__name__}"
                )
            values[f.name] = [_decode(item, element) for element in value]
    return cls(**values)


@dataclass
class WeatherDesc:
    """A textual weather description."""

    value: str = _text("value")


@dataclass
class WeatherIcon:
    """A link to a weather icon."""

    value: str = _text("value")


@dataclass
class CurrentCondition:
    """The weather observed right now."""

    feels_like_c: str = _text("FeelsLikeC")
    feels_like_f: str = _text("FeelsLikeF")
    cloudcover: str = _text("cloudcover")
    humidity: str = _text("humidity")
    local_obs_date_time: str = _text("localObsDateTime")
    observation_time: str = _text("observation_time")
    precip_inches: str = _text("precipInches")
    precip_mm: str = _text("precipMM")
    pressure: str = _text("pressure")
    pressure_inches: str = _text("pressureInches")
    temp_c: str = _text("temp_C")
    temp_f: str = _text("temp_F")
    uv_index: str = _text("uvIndex")
    visibility: str = _text("visibility")
    visibility_miles: str = _text("visibilityMiles")
    weather_code: str = _text("weatherCode")
    weather_desc: list[WeatherDesc] = _items("weatherDesc", WeatherDesc)
    weather_icon_url: list[WeatherIcon] = _items("weatherIconUrl", WeatherIcon)
    winddir_16_point: str = _text("winddir16Point")
    winddir_degree: str = _text("winddirDegree")
    windspeed_kmph: str = _text("windspeedKmph")
    windspeed_miles: str = _text("windspeedMiles")


@dataclass
class HourlyForecast:
    """The forecast for one time slot of a day."""

    time: str = _text("time")
    temp_c: str = _text("tempC")
    temp_f: str = _text("tempF")
    feels_like_c: str = _text("FeelsLikeC")
    feels_like_f: str = _text("FeelsLikeF")
    dew_point_c: str = _text("DewPointC")
    dew_point_f: str = _text("DewPointF")
    heat_index_c: str = _text("HeatIndexC")
    heat_index_f: str = _text("HeatIndexF")
    wind_chill_c: str = _text("WindChillC")
    wind_chill_f: str = _text("WindChillF")
    wind_gust_kmph: str = _text("WindGustKmph")
    wind_gust_miles: str = _text("WindGustMiles")
    cloudcover: str = _text("cloudcover")
    humidity: str = _text("humidity")
    precip_inches: str = _text("precipInches")
    precip_mm: str = _text("precipMM")
    pressure: str = _text("pressure")
    pressure_inches: str = _text("pressureInches")
    visibility: str = _text("visibility")
    visibility_miles: str = _text("visibilityMiles")
    weather_code: str = _text("weatherCode")
    weather_desc: list[WeatherDesc] = _items("weatherDesc", WeatherDesc)
    weather_icon_url: list[WeatherIcon] = _items("weatherIconUrl", WeatherIcon)
    winddir_16_point: str = _text("winddir16Point")
    winddir_degree: str = _text("winddirDegree")
    windspeed_kmph: str = _text("windspeedKmph")
    windspeed_miles: str = _text("windspeedMiles")
    diff_rad: str = _text("diffRad")
    short_rad: str = _text("shortRad")
    chance_of_fog: str = _text("chanceoffog")
    chance_of_frost: str = _text("chanceoffrost")
    chance_of_high_temp: str = _text("chanceofhightemp")
    chance_of_overcast: str = _text("chanceofovercast")
    chance_of_rain: str = _text("chanceofrain")
    chance_of_rem_dry: str = _text("chanceofremdry")
    chance_of_snow: str = _text("chanceofsnow")
    chance_of_sunshine: str = _text("chanceofsunshine")
    chance_of_thunder: str = _text("chanceofthunder")
    chance_of_windy: str = _text("chanceofwindy")


@dataclass
class WeatherForecast:
    """The forecast for one day."""

    date: str = _text("date")
    maxtemp_c: str = _text("maxtempC")
    maxtemp_f: str = _text("maxtempF")
    mintemp_c: str = _text("mintempC")
    mintemp_f: str = _text("mintempF")
    sun_hour: str = _text("sunHour")
    total_snow_cm: str = _text("totalSnow_cm")
    uv_index: str = _text("uvIndex")
    hourly: list[HourlyForecast] = _items("hourly", HourlyForecast)


@dataclass
class WeatherResponse:
    """A full weather report: current conditions and daily forecasts."""

    current_condition: list[CurrentCondition] = _items(
        "current_condition", CurrentCondition
    )
    weather: list[WeatherForecast] = _items("weather", WeatherForecast)

    @classmethod
    def from_json(cls, text: str | bytes) -> WeatherResponse:
        """Decode a report from JSON text; raise WeatherError if it is invalid."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise WeatherError(f"invalid weather JSON: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WeatherResponse:
        """Build a report from decoded JSON; missing fields stay empty."""
        return _decode(cls, data)


def weather_url(city: str) -> str:
    """Return the wttr.in JSON report URL for a city."""
    return WEATHER_ENDPOINT + quote(city.replace(" ", "+"), safe="+") + "?format=j1"


def fetch_weather(city: str, timeout: float = 30.0) -> WeatherResponse:
    """Download and decode the weather report for a city."""
    url = weather_url(city)
    try:
        with urlopen(url, timeout=timeout) as response:
            body = response.read()
    except HTTPError as exc:
        try:
            body = exc.read()
        except OSError as read_exc:
            raise WeatherError(str(read_exc)) from read_exc
        finally:
            exc.close()
    except (URLError, OSError) as exc:
        raise WeatherError(str(exc)) from exc
    return WeatherResponse.from_json(body)


def parse_cities(text: str) -> list[str]:
    """Split a city list into lines, each stripped of surrounding whitespace."""
    return [line.strip() for line in text.split("\n")]


def load_cities(path: str | Path) -> list[str]:
    """Read a city list, one city per line, from a file."""
    return parse_cities(Path(path).read_text(encoding="utf-8"))