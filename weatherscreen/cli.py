import asyncio
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from weatherscreen.config import ScreenConfig, WeatherEnv, load_config
from weatherscreen.events import ScreenEvent
from weatherscreen.screen import (
    LoadingView,
    ScreenState,
    ScreenView,
    ServiceFactory,
    WeatherScreenController,
    render_screen,
)
from weatherscreen.shared.logging_mixin import configure_logging

QUIT_COMMANDS = {"q", "quit", "exit"}


def format_view(view: ScreenView) -> str:
    """Plain-text rendering of the screen for the terminal."""
    if isinstance(view, LoadingView):
        return click.style("Loading...", fg="cyan")

    lines = [
        click.style(view.title, fg="red", bold=True),
        view.description,
        view.temperature_text,
        view.location_text,
    ]
    if view.icon_url:
        lines.append(click.style(view.icon_url, dim=True))
    if view.status_text:
        lines.append(click.style(view.status_text, fg="red"))
    return "\n".join(lines)


def _show_alert(message: str) -> None:
    click.secho(f"! {message}", fg="bright_red", bold=True, err=True)


def _progress_printer():
    """STATE_CHANGED handler that prints when a search or refresh starts."""
    busy = False

    def _on_state_changed(state: ScreenState) -> None:
        nonlocal busy
        now_busy = state.is_searching or state.is_refreshing
        if now_busy and not busy:
            click.secho(
                "Searching..." if state.is_searching else "Refreshing...", dim=True
            )
        busy = now_busy

    return _on_state_changed


async def _ask_permission() -> bool:
    return await asyncio.to_thread(
        click.confirm, "Allow weatherscreen to use your location?", default=True
    )


async def _prompt_loop(controller: WeatherScreenController, icon_base_url: str):
    while True:
        text = await asyncio.to_thread(
            click.prompt,
            "City (empty to refresh, q to quit)",
            default="",
            show_default=False,
        )
        text = text.strip()

        if text.lower() in QUIT_COMMANDS:
            return

        if text:
            await controller.set_search_text(text)
            await controller.search()
        else:
            await controller.refresh()

        click.echo(format_view(render_screen(controller.state, icon_base_url)))


async def run_screen(
    env: WeatherEnv,
    config: ScreenConfig,
    city: Optional[str],
    assume_yes: bool,
    once: bool,
) -> ScreenState:
    factory = ServiceFactory(
        env=env,
        config=config,
        permission_prompt=None if assume_yes else _ask_permission,
    )
    services = factory.create_services()
    controller = services.controller
    icon_base_url = config.weather.icon_base_url

    services.event_bus.subscribe(ScreenEvent.ALERT_RAISED, _show_alert)
    services.event_bus.subscribe(ScreenEvent.STATE_CHANGED, _progress_printer())

    if city:
        await controller.set_search_text(city)
        await controller.search()
    else:
        await controller.initialize()

    click.echo(format_view(render_screen(controller.state, icon_base_url)))

    if not once:
        await _prompt_loop(controller, icon_base_url)

    return controller.state


@click.command()
@click.option("--city", "-c", help="Search this city instead of using your location")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option("--yes", "-y", is_flag=True, help="Grant location permission without asking")
@click.option("--once", is_flag=True, help="Show the screen once and exit")
@click.option("--log-level", help="Overrides WEATHERSCREEN_LOG_LEVEL")
def main(
    city: Optional[str],
    config_path: Optional[Path],
    yes: bool,
    once: bool,
    log_level: Optional[str],
):
    """Current weather for your location or any city."""
    try:
        env = WeatherEnv()
    except ValidationError as e:
        raise click.ClickException(
            "OPENWEATHER_API_KEY is not set. Put it in your environment or .env file."
        ) from e

    configure_logging(log_level or env.weatherscreen_log_level)

    try:
        config = load_config(config_path) if config_path else ScreenConfig()
    except (FileNotFoundError, RuntimeError) as e:
        raise click.ClickException(str(e)) from e

    try:
        asyncio.run(run_screen(env, config, city, yes, once))
    except (KeyboardInterrupt, click.Abort):
        click.echo()


if __name__ == "__main__":
    main()
