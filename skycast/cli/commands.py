"""CLI commands for skycast."""

import sys

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from skycast import __logo__, __version__
from skycast.config.loader import load_config
from skycast.errors import SkycastError
from skycast.providers.openweathermap import fetch_current_weather
from skycast.render import render_report
from skycast.report import WeatherReport

app = typer.Typer(
    name="skycast",
    help=f"{__logo__} skycast - current weather for a city",
    add_completion=False,
)

err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def version_callback(value: bool):
    if value:
        print(f"skycast {__version__}")
        raise typer.Exit()


@app.command()
def main(
    city: str = typer.Argument(..., help="The city to get the weather for"),
    fahrenheit: bool = typer.Option(
        False, "--fahrenheit", "-f", help="Display temperature in Fahrenheit instead of Celsius"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Show current weather conditions for CITY."""
    _setup_logging(verbose)

    try:
        config = load_config()
        data = fetch_current_weather(city, config)
        report = WeatherReport.from_response(data, fahrenheit=fahrenheit)
    except SkycastError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(e.exit_code)

    render_report(report)


if __name__ == "__main__":
    app()
