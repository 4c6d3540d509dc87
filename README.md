# weathertui

A small terminal application for looking up the current weather. Pick a city
from a searchable list and see the conditions as coloured ASCII art, together
with the temperature, the temperature it feels like, the wind speed and the
UV index. Reports are fetched from wttr.in in its JSON format.

## Installation

```
pip install .
```

## Usage

```
weathertui --cities cities.txt
```

`--cities` names a text file with one city per line; it defaults to
`cities.txt` in the current directory. Every line is stripped of surrounding
whitespace. If the file cannot be read, or a weather report cannot be fetched
or decoded, the command prints `Can't run the program:` and the error, and
exits with status 1.

The application takes over the whole terminal. `ctrl+c` also leaves it.

### Choosing a city

| Key             | Action                        |
|-----------------|-------------------------------|
| `↑` / `k`       | move up                       |
| `↓` / `j`       | move down                     |
| `enter` / space | show the weather for the city |
| `/`             | start filtering the list      |
| `q`             | quit                          |

While filtering, every key you type is added to the filter text.
`backspace` removes the last character, `esc` stops filtering and `enter`
picks the highlighted city from the filtered list.

The filter first keeps every city whose name contains what you typed, ignoring
case. When nothing matches it falls back to a fuzzy match: it keeps the cities
that share at least one letter a–z with the query and are closest to it by edit
distance.

### Viewing the weather

| Key       | Action                |
|-----------|-----------------------|
| `s` / `c` | choose another city   |
| `q`       | quit                  |

## Using it as a library

The package has four modules:

- `weathertui.constants` – weather codes and their symbols and ASCII art:
  `weather_kind`, `symbol_for`, `ascii_art_for`.
- `weathertui.fuzzy` – the city filter: `filter_words`, `contains_filter`,
  `starts_with_filter`, `best_matches`, `levenshtein_distance`,
  `with_common_letters`, `letter_set` and the `FilterItem` dataclass.
- `weathertui.weather` – the report dataclasses (`WeatherResponse`,
  `CurrentCondition`, `WeatherForecast`, `HourlyForecast`, `WeatherDesc`,
  `WeatherIcon`), `weather_url`, `fetch_weather`, `parse_cities`,
  `load_cities` and `WeatherError`.
- `weathertui.tui` – the interface: `Model`, `Action`, `ActionKind`,
  `render_weather`, `style`, `pad`, `run` and `main`.

```python
from weathertui.fuzzy import filter_words, levenshtein_distance
from weathertui.weather import fetch_weather
from weathertui.tui import render_weather

filter_words(["London", "Lyon", "Paris"], "lon")   # ['London']
levenshtein_distance("kitten", "sitting")          # 3

report = fetch_weather("New York", timeout=10)
print(render_weather(report))
```

`fetch_weather` raises `weathertui.weather.WeatherError` when the request or
decoding the response fails. `WeatherResponse.from_json` and
`WeatherResponse.from_dict` decode a report you already have; fields missing
from it are left empty. `render_weather` raises `WeatherError` when the report
has no current conditions or no description.

`Model` holds the state of the interface and can be driven without a
terminal: `handle_key` takes a key name such as `"up"`, `"enter"` or `"q"` and
returns an `Action` (quit, fetch a city's weather, or filter the list) or
`None`; `on_weather`, `on_filtered` and `on_error` feed results back in; and
`view` renders the screen as text.

## What it does not do

Only the current conditions of a report are shown; the daily and hourly
forecasts are decoded but not displayed. No list of cities is included with
the package: you supply your own file.

## Running the tests

```
pip install .[test]
pytest
```