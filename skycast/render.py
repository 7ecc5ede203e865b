"""Terminal rendering of a WeatherReport."""

from rich.console import Console
from rich.markup import escape

from skycast.report import WeatherReport, round_half_away, weather_emoji

console = Console()


def _temp(value: float, unit: str) -> str:
    return f"[bright_green]{round_half_away(value)}[/bright_green]°{unit}"


def format_report(report: WeatherReport) -> list[str]:
    """
    Build the report lines as rich markup, in display order.

    Temperatures and wind speed are rounded half away from zero.
    """
    unit = report.unit
    return [
        f"🌍 Location: [bright_blue]{escape(report.location)}[/bright_blue]",
        f"{weather_emoji(report.condition)}  Weather: "
        f"[bright_yellow]{escape(report.description)}[/bright_yellow]",
        f"🌡️  Temperature: {_temp(report.temperature, unit)}",
        f"🤔 Feels like: {_temp(report.feels_like, unit)}",
        f"🌡️  Today's High/Low: {_temp(report.temp_max, unit)}/{_temp(report.temp_min, unit)}",
        f"💧 Humidity: [bright_cyan]{report.humidity}[/bright_cyan]%",
        f"🌪️  Wind: [bright_magenta]{round_half_away(report.wind_speed)}[/bright_magenta] km/h "
        f"from [bright_magenta]{report.wind_direction}[/bright_magenta]",
        f"🌅 Sunrise: [bright_yellow]{report.sunrise}[/bright_yellow]",
        f"🌇 Sunset: [bright_yellow]{report.sunset}[/bright_yellow]",
    ]


def render_report(report: WeatherReport, out: Console | None = None) -> None:
    """Print the report under a "Current Weather" header."""
    out = out or console
    out.print()
    out.print("[bold underline]Current Weather[/bold underline]", highlight=False)
    for line in format_report(report):
        out.print(line, emoji=False, highlight=False, soft_wrap=True)
    out.print()
