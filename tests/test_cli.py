import click
import pytest
from aiohttp import web
from click.testing import CliRunner

from weatherscreen import cli
from weatherscreen.config import ScreenConfig, WeatherEnv
from weatherscreen.screen import LoadingView, ScreenState, render_screen


def _config(weather_url: str, geocoder_url: str) -> ScreenConfig:
    return ScreenConfig.model_validate(
        {
            "weather": {"base_url": weather_url},
            "location": {
                "provider": "static",
                "latitude": 51.5074,
                "longitude": -0.1278,
                "geocoder_url": geocoder_url,
            },
        }
    )


@pytest.mark.asyncio
async def test_run_screen_once_with_static_location(serve, london_payload, capsys):
    async def weather(request):
        return web.json_response(london_payload)

    async def reverse(request):
        return web.json_response({"address": {"city": "London", "state": "England"}})

    weather_server = await serve(weather, "/weather")
    geocoder = await serve(reverse, "/reverse")
    config = _config(
        str(weather_server.make_url("/weather")), str(geocoder.make_url("/reverse"))
    )

    state = await cli.run_screen(
        WeatherEnv(openweather_api_key="k3y"),
        config,
        city=None,
        assume_yes=True,
        once=True,
    )

    output = click.unstyle(capsys.readouterr().out)
    assert state.report.fallback_name == "London"
    assert "Clear sky" in output
    assert "Temperature: 18.3°C" in output
    assert "Location: London, England" in output


@pytest.mark.asyncio
async def test_run_screen_city_not_found_prints_alert(serve, capsys):
    async def weather(request):
        return web.json_response({"cod": "404"}, status=404)

    weather_server = await serve(weather, "/weather")
    config = _config(str(weather_server.make_url("/weather")), "http://127.0.0.1:9/")

    state = await cli.run_screen(
        WeatherEnv(openweather_api_key="k3y"),
        config,
        city="Nowhereville",
        assume_yes=True,
        once=True,
    )

    captured = capsys.readouterr()
    assert state.report is None
    assert "City not found" in click.unstyle(captured.err)
    assert "Searching..." in click.unstyle(captured.out)
    assert "Loading..." in click.unstyle(captured.out)


def test_progress_printer_reports_each_start_once(capsys):
    on_state_changed = cli._progress_printer()

    on_state_changed(ScreenState(is_searching=True))
    on_state_changed(ScreenState(is_searching=True))
    on_state_changed(ScreenState())
    on_state_changed(ScreenState(is_refreshing=True))

    lines = click.unstyle(capsys.readouterr().out).splitlines()
    assert lines == ["Searching...", "Refreshing..."]


def test_format_view_loading():
    assert click.unstyle(cli.format_view(LoadingView())) == "Loading..."


def test_format_view_detail(london_report):
    text = click.unstyle(cli.format_view(render_screen(ScreenState(report=london_report))))

    assert text.splitlines()[:4] == [
        "Current Weather",
        "Clear sky",
        "Temperature: 18.3°C",
        "Location: London",
    ]


def test_missing_api_key_is_reported(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)

    result = CliRunner().invoke(cli.main, ["--once", "--yes"])

    assert result.exit_code != 0
    assert "OPENWEATHER_API_KEY" in result.output


def test_missing_config_file_is_reported(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "k3y")

    result = CliRunner().invoke(
        cli.main, ["--once", "--yes", "--config", str(tmp_path / "missing.yaml")]
    )

    assert result.exit_code != 0
    assert "Config file not found" in result.output
