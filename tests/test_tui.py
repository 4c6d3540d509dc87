import re

import pytest

from weathertui.constants import WEATHER_ASCII_SYMBOLS, symbol_for
from weathertui.tui import (
    Action,
    ActionKind,
    Model,
    main,
    pad,
    render_weather,
    style,
)
from weathertui.weather import WeatherError, WeatherResponse

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


@pytest.fixture
def sunny():
    return WeatherResponse.from_dict(
        {
            "current_condition": [
                {
                    "weatherCode": "113",
                    "weatherDesc": [{"value": "Sunny"}],
                    "temp_C": "21",
                    "FeelsLikeC": "20",
                    "windspeedKmph": "7",
                    "uvIndex": "5",
                }
            ]
        }
    )


def test_style_keeps_text_and_adds_bold():
    styled = style("hello", 202, bold=True)
    assert _plain(styled) == "hello"
    assert styled.startswith("\x1b[1;")


def test_style_colours_each_line():
    styled = style("a\nb", 3)
    assert [_plain(line) for line in styled.split("\n")] == ["a", "b"]
    assert all(line.startswith("\x1b[") for line in styled.split("\n"))


def test_pad_aligns_lines_and_adds_margins():
    padded = pad("ab\n" + style("abcd", 2), 1, 2)
    lines = padded.split("\n")
    assert len(lines) == 4
    widths = {len(_plain(line)) for line in lines}
    assert widths == {len("abcd") + 4}
    assert _plain(lines[1]).startswith("  ab")


def test_render_weather_sunny(sunny):
    text = render_weather(sunny)
    plain = _plain(text)
    assert plain.startswith("Sunny " + symbol_for("113") + "\n")
    assert WEATHER_ASCII_SYMBOLS["Sunny"][0] in text
    assert "Temp 21°C (Feels like 20°C)" in plain
    assert "Wind 7(km/h)" in plain
    assert "UV index 5" in plain


def test_render_weather_unknown_code_has_no_art():
    report = WeatherResponse.from_dict(
        {"current_condition": [{"weatherCode": "1", "weatherDesc": [{"value": "Odd"}]}]}
    )
    plain = _plain(render_weather(report))
    assert plain.split("\n")[0] == "Odd "
    assert plain.split("\n")[1].startswith("Temp ")


def test_render_weather_empty_report_raises():
    with pytest.raises(WeatherError):
        render_weather(WeatherResponse())


def test_slash_starts_filtering():
    model = Model(cities=["Paris", "Oslo"], filter="x", filtered=["Oslo"])
    assert model.handle_key("/") is None
    assert model.filtering is True
    assert model.filter == ""
    assert model.filtered == []


def test_typing_while_filtering_requests_filter():
    model = Model(cities=["Paris", "Oslo"], filtering=True, cursor=1)
    action = model.handle_key("o")
    assert action == Action(ActionKind.FILTER, "o")
    assert model.cursor == 0
    assert model.handle_key("s") == Action(ActionKind.FILTER, "os")


def test_backspace_trims_filter():
    model = Model(cities=["Paris"], filtering=True, filter="pa")
    assert model.handle_key("backspace") == Action(ActionKind.FILTER, "p")
    assert model.handle_key("backspace") == Action(ActionKind.FILTER, "")
    assert model.handle_key("backspace") is None
    assert model.filter == ""


def test_escape_stops_filtering():
    model = Model(cities=["Paris"], filtering=True, filter="pa")
    assert model.handle_key("esc") is None
    assert model.filtering is False
    assert model.filter == "pa"


def test_enter_while_filtering_selects_filtered_city():
    model = Model(cities=["Paris", "Oslo"])
    model.handle_key("/")
    model.on_filtered(["Oslo"])
    action = model.handle_key("enter")
    assert action == Action(ActionKind.FETCH_WEATHER, "Oslo")
    assert model.selected == "Oslo"
    assert model.showing_weather is True


def test_enter_while_filtering_without_matches_does_nothing():
    model = Model(cities=["Paris"], filtering=True, filter="zz")
    assert model.handle_key("enter") is None
    assert model.showing_weather is False


def test_navigation_is_bounded():
    model = Model(cities=["a", "b"])
    for _ in range(5):
        model.handle_key("j")
    assert model.cursor == 1
    for _ in range(5):
        model.handle_key("up")
    assert model.cursor == 0


def test_select_from_full_list():
    model = Model(cities=["a", "b", "c"])
    model.handle_key("down")
    action = model.handle_key(" ")
    assert action == Action(ActionKind.FETCH_WEATHER, "b")
    assert model.selected == "b"


@pytest.mark.parametrize("showing", [True, False])
def test_q_quits(showing):
    model = Model(cities=["a"], showing_weather=showing)
    assert model.handle_key("q") == Action(ActionKind.QUIT)


@pytest.mark.parametrize("key", ["c", "s"])
def test_choose_other_city(key):
    model = Model(cities=["a", "b"], cursor=1, selected="b", showing_weather=True)
    assert model.handle_key(key) is None
    assert model.showing_weather is False
    assert model.selected == ""
    assert model.cursor == 0


def test_view_waits_then_shows_weather(sunny):
    model = Model(cities=["Paris"])
    model.handle_key("enter")
    assert "Asking Zeus for weather report..." in _plain(model.view())
    model.on_weather(sunny)
    assert model.has_weather is True
    plain = _plain(model.view())
    assert "Paris" in plain
    assert "UV index 5" in plain
    assert "q: quit • s|c: select other city" in plain


def test_view_shows_error():
    model = Model(cities=["Paris"])
    model.on_error(WeatherError("boom"))
    assert model.view().endswith("Runtime error: boom\n")


def test_view_no_such_location():
    model = Model(cities=["Paris"], filtering=True, filter="zz")
    plain = _plain(model.view())
    assert "No such location..." in plain
    assert "esc|enter • stop filtering" in plain


def test_view_list_window_follows_cursor():
    model = Model(cities=[f"c{i}" for i in range(20)])
    plain = _plain(model.view())
    assert "-> 1. c0" in plain
    assert "11. c10" in plain
    assert "12. c11" not in plain
    for _ in range(10):
        model.handle_key("j")
    plain = _plain(model.view())
    assert "-> 11. c10" in plain
    assert "6. c5" in plain
    assert "5. c4" not in plain


def test_view_loading_without_cities():
    model = Model(cities=None)
    assert model.view().endswith("Loading...")


def test_main_missing_cities_file(tmp_path, capsys):
    missing = tmp_path / "nothing.txt"
    assert main(["--cities", str(missing)]) == 1
    assert "Can't run the program:" in capsys.readouterr().out