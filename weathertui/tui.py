"""Interactive terminal interface: pick a city, see its current weather."""

from __future__ import annotations

import argparse
import queue
import re
import threading
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Sequence

from .constants import WEATHER_CODES, WEATHER_ASCII_SYMBOLS, WEATHER_SYMBOLS
from .fuzzy import filter_words
from .weather import WeatherError, WeatherResponse, fetch_weather, load_cities

HEADER_COLOR = 5
FILTER_COLOR = 6
CURSOR_COLOR = 3
SELECTED_COLOR = 2
HELP_COLOR = 8
TEMPERATURE_COLOR = 202
WIND_COLOR = 81
UV_INDEX_COLOR = 129

TAB = "    "

WAITING_TEXT = "Asking Zeus for weather report...\n"

_BANNER = (
    "\n"
    "\t\t\t\t\t  \\   /\n"
    "\t\t\t\t\t   .-.\n"
    "\tWeather TUI \t\u2015 (   ) \u2015\n"
    "\t\t\t\t\t   '-'\n"
    "\t\t\t\t\t  /   \\   \n"
    "\t"
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class ActionKind(Enum):
    """What the caller has to do after a key press."""

    QUIT = auto()
    FETCH_WEATHER = auto()
    FILTER = auto()


@dataclass(frozen=True)
class Action:
    """A request from the model: quit, fetch a city's weather or filter cities."""

    kind: ActionKind
    argument: str = ""


def _color_code(color: int) -> str:
    if 0 <= color <= 7:
        return str(30 + color)
    if 8 <= color <= 15:
        return str(90 + color - 8)
    return f"38;5;{color}"


def style(text: str, color: int, bold: bool = False) -> str:
    """Colour every line of the text with a terminal colour, optionally bold."""
    codes = ("1;" if bold else "") + _color_code(color)
    lines = text.replace("\t", TAB).split("\n")
    return "\n".join(f"\x1b[{codes}m{line}\x1b[0m" if line else line for line in lines)


def _visible_width(line: str) -> int:
    return len(_ANSI.sub("", line))


def pad(text: str, vertical: int, horizontal: int) -> str:
    """Surround a block of text with blank space, aligning all lines to one width."""
    lines = text.replace("\t", TAB).split("\n")
    width = max(_visible_width(line) for line in lines)
    side = " " * horizontal
    body = [
        side + line + " " * (width - _visible_width(line)) + side for line in lines
    ]
    blank = " " * (width + 2 * horizontal)
    return "\n".join([blank] * vertical + body + [blank] * vertical)


def render_weather(weather: WeatherResponse) -> str:
    """Describe the current conditions of a report: icon, art, temperature, wind, UV."""
    if not weather.current_condition:
        raise WeatherError("weather report has no current conditions")
    current = weather.current_condition[0]
    if not current.weather_desc:
        raise WeatherError("weather report has no description")

    kind = WEATHER_CODES.get(current.weather_code, "")
    icon = WEATHER_SYMBOLS.get(kind, "")
    desc = current.weather_desc[0].value + " " + icon + "\n"
    art = "".join(line + "\n" for line in WEATHER_ASCII_SYMBOLS.get(kind, ()))

    temp = (
        "Temp "
        + style(current.temp_c, TEMPERATURE_COLOR, bold=True)
        + "°C"
        + " (Feels like "
        + style(current.feels_like_c, TEMPERATURE_COLOR, bold=True)
        + "°C)\n"
    )
    wind = "Wind " + style(current.windspeed_kmph, WIND_COLOR, bold=True) + "(km/h)\n"
    uv = "UV index " + style(current.uv_index, UV_INDEX_COLOR, bold=True) + "\n"
    return desc + art + temp + "\n" + wind + uv


@dataclass
class Model:
    """State of the interface and its reaction to keys and incoming results."""

    cities: list[str] | None = field(default_factory=list)
    filtered: list[str] = field(default_factory=list)
    filter: str = ""
    filtering: bool = False
    cursor: int = 0
    selected: str = ""
    weather: WeatherResponse = field(default_factory=WeatherResponse)
    showing_weather: bool = False
    has_weather: bool = False
    error: BaseException | None = None

    def _select(self, city: str) -> Action:
        self.selected = city
        self.showing_weather = True
        return Action(ActionKind.FETCH_WEATHER, city)

    def handle_key(self, key: str) -> Action | None:
        """React to a named key press; return what the caller must do, if anything."""
        if self.showing_weather:
            if key == "q":
                return Action(ActionKind.QUIT)
            if key in ("c", "s"):
                self.selected = ""
                self.cursor = 0
                self.showing_weather = False
            return None

        if self.filtering:
            if key == "esc":
                self.filtering = False
            elif key == "enter":
                if self.filtered:
                    return self._select(self.filtered[self.cursor])
            elif key == "backspace":
                if self.filter:
                    self.filter = self.filter[:-1]
                    return Action(ActionKind.FILTER, self.filter)
            else:
                self.filter += key
                self.cursor = 0
                return Action(ActionKind.FILTER, self.filter)
            return None

        cities = self.cities or []
        if key == "/":
            self.filtering = True
            self.filter = ""
            self.filtered = []
        elif key == "q":
            return Action(ActionKind.QUIT)
        elif key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif key in ("down", "j"):
            if self.cursor < len(cities) - 1:
                self.cursor += 1
        elif key in (" ", "enter"):
            source = self.filtered if self.filtered else cities
            return self._select(source[self.cursor])
        return None

    def on_weather(self, weather: WeatherResponse) -> None:
        """Store a weather report that has arrived."""
        self.weather = weather
        self.has_weather = True

    def on_filtered(self, filtered: Sequence[str]) -> None:
        """Store the result of filtering the cities."""
        self.filtered = list(filtered)

    def on_error(self, error: BaseException) -> None:
        """Store an error; the view shows it instead of everything else."""
        self.error = error

    def _city_list(self) -> str:
        out = ""
        cities = self.cities or []
        if self.filtered or (self.filtering and self.filter):
            cities = self.filtered
        if not cities:
            out += "No such location...\n"

        first = max(self.cursor - 5, 0)
        last = min(max(self.cursor + 5, first + 10), len(cities) - 1)
        for i, city in enumerate(cities[first : last + 1], start=first):
            line = f"{i + 1}. {city}"
            if i == self.cursor:
                line = style("-> ", CURSOR_COLOR) + line
            else:
                line = "   " + line
            out += line + "\n"
        return out

    def view(self) -> str:
        """Render the whole screen as text."""
        s = style(_BANNER, HEADER_COLOR) + "\n\n"

        if self.error is not None:
            return s + f"Runtime error: {self.error}\n"

        if self.showing_weather:
            s += style(self.selected, SELECTED_COLOR, bold=True) + "\n"
            s += render_weather(self.weather) if self.has_weather else WAITING_TEXT
        else:
            if self.cities is None:
                return s + "Loading..."
            filter_line = style("/ to filter: ", FILTER_COLOR) + style(
                self.filter, FILTER_COLOR
            )
            if self.filtering:
                filter_line += style("|", FILTER_COLOR)
            s += filter_line + "\n\n"
            s += f"{len(self.filtered)}\n"
            s += self._city_list()

        if self.showing_weather:
            help_text = "q: quit • s|c: select other city"
        elif self.filtering:
            help_text = "esc|enter • stop filtering"
        else:
            help_text = "q: quit • /: filter • ↑(k)/↓(j)|: navigate • enter|space: select"
        s += "\n" + style(help_text, HELP_COLOR)

        return pad(s, 1, 2)


_SEQUENCE_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_TAB": "tab",
}


def _key_name(keystroke) -> str:
    if keystroke.is_sequence and keystroke.name:
        name = keystroke.name
        return _SEQUENCE_NAMES.get(name, name.removeprefix("KEY_").lower())
    text = str(keystroke)
    if text in ("\r", "\n"):
        return "enter"
    if text == "\t":
        return "tab"
    if text == "\x1b":
        return "esc"
    if text == "\x7f":
        return "backspace"
    if len(text) == 1 and ord(text) < 32:
        return "ctrl+" + chr(ord(text) + 96)
    return text


def run(
    model: Model,
    fetch: Callable[[str], WeatherResponse] = fetch_weather,
) -> None:
    """Drive the model in a full-screen terminal until the user quits."""
    from blessed import Terminal

    term = Terminal()
    events: queue.Queue[tuple[Callable[..., None], object]] = queue.Queue()

    def fetch_in_background(city: str) -> None:
        try:
            events.put((model.on_weather, fetch(city)))
        except WeatherError as exc:
            events.put((model.on_error, exc))

    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            dirty = True
            while True:
                while True:
                    try:
                        handler, value = events.get_nowait()
                    except queue.Empty:
                        break
                    handler(value)
                    dirty = True
                if dirty:
                    print(term.home + term.clear + model.view(), end="", flush=True)
                    dirty = False

                keystroke = term.inkey(timeout=0.1)
                if not keystroke:
                    continue
                dirty = True
                action = model.handle_key(_key_name(keystroke))
                if action is None:
                    continue
                if action.kind is ActionKind.QUIT:
                    return
                if action.kind is ActionKind.FILTER:
                    model.on_filtered(filter_words(model.cities or [], action.argument))
                elif action.kind is ActionKind.FETCH_WEATHER:
                    threading.Thread(
                        target=fetch_in_background, args=(action.argument,), daemon=True
                    ).start()
    except KeyboardInterrupt:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interface with the cities read from a file."""
    parser = argparse.ArgumentParser(
        prog="weathertui", description="Browse cities and show their current weather."
    )
    parser.add_argument(
        "--cities",
        type=Path,
        default=Path("cities.txt"),
        help="file listing one city per line",
    )
    args = parser.parse_args(argv)
    try:
        cities = load_cities(args.cities)
        run(Model(cities=cities))
    except (OSError, WeatherError) as exc:
        print(f"Can't run the program:\n{exc}")
        return 1
    return 0