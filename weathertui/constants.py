"""Weather condition codes, symbols and coloured ASCII art."""

from __future__ import annotations

WEATHER_CODES: dict[str, str] = {
    "113": "Sunny",
    "116": "PartlyCloudy",
    "119": "Cloudy",
    "122": "VeryCloudy",
    "143": "Fog",
    "176": "LightShowers",
    "179": "LightSleetShowers",
    "182": "LightSleet",
    "185": "LightSleet",
    "200": "ThunderyShowers",
    "227": "LightSnow",
    "230": "HeavySnow",
    "248": "Fog",
    "260": "Fog",
    "263": "LightShowers",
    "266": "LightRain",
    "281": "LightSleet",
    "284": "LightSleet",
    "293": "LightRain",
    "296": "LightRain",
    "299": "HeavyShowers",
    "302": "HeavyRain",
    "305": "HeavyShowers",
    "308": "HeavyRain",
    "311": "LightSleet",
    "314": "LightSleet",
    "317": "LightSleet",
    "320": "LightSnow",
    "323": "LightSnowShowers",
    "326": "LightSnowShowers",
    "329": "HeavySnow",
    "332": "HeavySnow",
    "335": "HeavySnowShowers",
    "338": "HeavySnow",
    "350": "LightSleet",
    "353": "LightShowers",
    "356": "HeavyShowers",
    "359": "HeavyRain",
    "362": "LightSleetShowers",
    "365": "LightSleetShowers",
    "368": "LightSnowShowers",
    "371": "HeavySnowShowers",
    "374": "LightSleetShowers",
    "377": "LightSleet",
    "386": "ThunderyShowers",
    "389": "ThunderyHeavyRain",
    "392": "ThunderySnowShowers",
    "395": "HeavySnowShowers",
}

WEATHER_SYMBOLS: dict[str, str] = {
    "Unknown": "\u2728",
    "Cloudy": "",
    "Fog": "",
    "HeavyRain": "\U0001f327",
    "HeavyShowers": "\U0001f327",
    "HeavySnow": "\U000f0f36",
    "HeavySnowShowers": "\U000f067f",
    "LightRain": "\U0001f326",
    "LightShowers": "\U0001f326",
    "LightSleet": "\U0001f327",
    "LightSleetShowers": "\U0001f327",
    "LightSnow": "\U000f0598",
    "LightSnowShowers": "",
    "PartlyCloudy": "",
    "Sunny": "",
    "ThunderyHeavyRain": "\U0001f329",
    "ThunderyShowers": "",
    "ThunderySnowShowers": "",
    "VeryCloudy": "",
}

WEATHER_ASCII_SYMBOLS: dict[str, tuple[str, ...]] = {
    "Unknown": (
        "    .-.      ",
        "     __)     ",
        "    (        ",
        "     `-’     ",
        "      •      ",
    ),
    "Sunny": (
        "\x1b[38;5;226m    \\   /    \x1b[0m",
        "\x1b[38;5;226m     .-.     \x1b[0m",
        "\x1b[38;5;226m  ― (   ) ―  \x1b[0m",
        "\x1b[38;5;226m     `-’     \x1b[0m",
        "\x1b[38;5;226m    /   \\    \x1b[0m",
    ),
    "PartlyCloudy": (
        "\x1b[38;5;226m   \\  /\x1b[0m      ",
        "\x1b[38;5;226m _ /\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m   \\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "             ",
    ),
    "Cloudy": (
        "             ",
        "\x1b[38;5;250m     .--.    \x1b[0m",
        "\x1b[38;5;250m  .-(    ).  \x1b[0m",
        "\x1b[38;5;250m (___.__)__) \x1b[0m",
        "             ",
    ),
    "VeryCloudy": (
        "             ",
        "\x1b[38;5;240;1m     .--.    \x1b[0m",
        "\x1b[38;5;240;1m  .-(    ).  \x1b[0m",
        "\x1b[38;5;240;1m (___.__)__) \x1b[0m",
        "             ",
    ),
    "LightShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "\x1b[38;5;111m     ‘ ‘ ‘ ‘ \x1b[0m",
        "\x1b[38;5;111m    ‘ ‘ ‘ ‘  \x1b[0m",
    ),
    "HeavyShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;240;1m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;240;1m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;240;1m(___(__) \x1b[0m",
        "\x1b[38;5;21;1m   ‚‘‚‘‚‘‚‘  \x1b[0m",
        "\x1b[38;5;21;1m   ‚’‚’‚’‚’  \x1b[0m",
    ),
    "LightSnowShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "\x1b[38;5;255m     *  *  * \x1b[0m",
        "\x1b[38;5;255m    *  *  *  \x1b[0m",
    ),
    "HeavySnowShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;240;1m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;240;1m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;240;1m(___(__) \x1b[0m",
        "\x1b[38;5;255;1m    * * * *  \x1b[0m",
        "\x1b[38;5;255;1m   * * * *   \x1b[0m",
    ),
    "LightSleetShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "\x1b[38;5;111m     ‘ \x1b[38;5;255m*\x1b[38;5;111m ‘ \x1b[38;5;255m* \x1b[0m",
        "\x1b[38;5;255m    *\x1b[38;5;111m ‘ \x1b[38;5;255m*\x1b[38;5;111m ‘  \x1b[0m",
    ),
    "ThunderyShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "\x1b[38;5;228;5m    ⚡\x1b[38;5;111;25m‘ ‘\x1b[38;5;228;5m⚡\x1b[38;5;111;25m‘ ‘ \x1b[0m",
        "\x1b[38;5;111m    ‘ ‘ ‘ ‘  \x1b[0m",
    ),
    "ThunderyHeavyRain": (
        "\x1b[38;5;240;1m     .-.     \x1b[0m",
        "\x1b[38;5;240;1m    (   ).   \x1b[0m",
        "\x1b[38;5;240;1m   (___(__)  \x1b[0m",
        "\x1b[38;5;21;1m  ‚‘\x1b[38;5;228;5m⚡\x1b[38;5;21;25m‘‚\x1b[38;5;228;5m⚡\x1b[38;5;21;25m‚‘ \x1b[0m",
        "\x1b[38;5;21;1m  ‚’‚’\x1b[38;5;228;5m⚡\x1b[38;5;21;25m’‚’  \x1b[0m",
    ),
    "ThunderySnowShowers": (
        "\x1b[38;5;226m _`/\"\"\x1b[38;5;250m.-.    \x1b[0m",
        "\x1b[38;5;226m  ,\\_\x1b[38;5;250m(   ).  \x1b[0m",
        "\x1b[38;5;226m   /\x1b[38;5;250m(___(__) \x1b[0m",
        "\x1b[38;5;255m     *\x1b[38;5;228;5m⚡\x1b[38;5;255;25m*\x1b[38;5;228;5m⚡\x1b[38;5;255;25m* \x1b[0m",
        "\x1b[38;5;255m    *  *  *  \x1b[0m",
    ),
    "LightRain": (
        "\x1b[38;5;250m     .-.     \x1b[0m",
        "\x1b[38;5;250m    (   ).   \x1b[0m",
        "\x1b[38;5;250m   (___(__)  \x1b[0m",
        "\x1b[38;5;111m    ‘ ‘ ‘ ‘  \x1b[0m",
        "\x1b[38;5;111m   ‘ ‘ ‘ ‘   \x1b[0m",
    ),
    "HeavyRain": (
        "\x1b[38;5;240;1m     .-.     \x1b[0m",
        "\x1b[38;5;240;1m    (   ).   \x1b[0m",
        "\x1b[38;5;240;1m   (___(__)  \x1b[0m",
        "\x1b[38;5;21;1m  ‚‘‚‘‚‘‚‘   \x1b[0m",
        "\x1b[38;5;21;1m  ‚’‚’‚’‚’   \x1b[0m",
    ),
    "LightSnow": (
        "\x1b[38;5;250m     .-.     \x1b[0m",
        "\x1b[38;5;250m    (   ).   \x1b[0m",
        "\x1b[38;5;250m   (___(__)  \x1b[0m",
        "\x1b[38;5;255m    *  *  *  \x1b[0m",
        "\x1b[38;5;255m   *  *  *   \x1b[0m",
    ),
    "HeavySnow": (
        "\x1b[38;5;240;1m     .-.     \x1b[0m",
        "\x1b[38;5;240;1m    (   ).   \x1b[0m",
        "\x1b[38;5;240;1m   (___(__)  \x1b[0m",
        "\x1b[38;5;255;1m   * * * *   \x1b[0m",
        "\x1b[38;5;255;1m  * * * *    \x1b[0m",
    ),
    "LightSleet": (
        "\x1b[38;5;250m     .-.     \x1b[0m",
        "\x1b[38;5;250m    (   ).   \x1b[0m",
        "\x1b[38;5;250m   (___(__)  \x1b[0m",
        "\x1b[38;5;111m    ‘ \x1b[38;5;255m*\x1b[38;5;111m ‘ \x1b[38;5;255m*  \x1b[0m",
        "\x1b[38;5;255m   *\x1b[38;5;111m ‘ \x1b[38;5;255m*\x1b[38;5;111m ‘   \x1b[0m",
    ),
    "Fog": (
        "             ",
        "\x1b[38;5;251m _ - _ - _ - \x1b[0m",
        "\x1b[38;5;251m  _ - _ - _  \x1b[0m",
        "\x1b[38;5;251m _ - _ - _ - \x1b[0m",
        "             ",
    ),
}


def weather_kind(code: str) -> str | None:
    """Return the condition name for a weather code, or None if it is unknown."""
    return WEATHER_CODES.get(code)


def symbol_for(code: str) -> str:
    """Return the icon for a weather code; empty for unknown codes."""
    kind = weather_kind(code)
    if kind is None:
        return ""
    return WEATHER_SYMBOLS.get(kind, "")


def ascii_art_for(code: str) -> tuple[str, ...]:
    """Return the ASCII art lines for a weather code; empty for unknown codes."""
    kind = weather_kind(code)
    if kind is None:
        return ()
    return WEATHER_ASCII_SYMBOLS.get(kind, ())