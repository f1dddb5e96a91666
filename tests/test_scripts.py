"""Run the diagnostic scripts' main() against the SQLite test database."""

import importlib.util
import json
import logging
import sys
from pathlib import Path

import pytest
from sqlalchemy.orm import sessionmaker

from sunnomad.core.app_manifest import build_app_manifest
from sunnomad.core.config import Settings
from tests.conftest import make_engine

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def load_script(name):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_script(name, monkeypatch, engine=None, args=()):
    module = load_script(name)
    if engine is not None:
        monkeypatch.setattr(module, "SessionLocal", sessionmaker(bind=engine))
    monkeypatch.setattr(sys, "argv", [f"{name}.py", *args])
    module.main()


@pytest.fixture
def empty_engine():
    engine = make_engine(create_tables=False)
    yield engine
    engine.dispose()


@pytest.mark.parametrize(
    "name, log_message",
    [
        ("check_places", "place statistics aborted"),
        ("check_missing", "missing weather check aborted"),
        ("check_cities", "city check aborted"),
        ("verify_migration", "migration verification aborted"),
    ],
)
def test_query_failure_exits_with_status_1(name, log_message, empty_engine, monkeypatch, caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as exc_info:
            run_script(name, monkeypatch, empty_engine)

    assert exc_info.value.code == 1
    assert log_message in caplog.text
    assert "no such table" in caplog.text


def test_check_places_report(seeded, engine, monkeypatch, capsys):
    run_script("check_places", monkeypatch, engine)
    out = capsys.readouterr().out

    assert "Total places: 8" in out
    assert "Active places: 7" in out
    assert "Inactive places: 1" in out


def test_check_missing_report(seeded, engine, monkeypatch, capsys):
    run_script("check_missing", monkeypatch, engine)
    out = capsys.readouterr().out

    assert "Found 6 places without weather" in out
    assert "1. Austin (US) - ID: a1b2c3d4" in out
    assert "   US: 3 places" in out
    assert "   ??: 1 places" in out
    assert out.index("US: 3") < out.index("CA: 1") < out.index("MX: 1")
    assert "Total missing: 6 places" in out


def test_check_cities_report(seeded, engine, monkeypatch, capsys):
    run_script("check_cities", monkeypatch, engine, args=["--city", "vancouver", "--city", "lisbon"])
    out = capsys.readouterr().out

    assert "✅ Vancouver: 14.5°C, Pop: 675,218, Score: 0.82" in out
    assert "✅ North Vancouver: 13.0°C, Pop: N/A, Score: 0.4" in out
    assert "Lisbon:\n   ❌ Not found!" in out


def test_verify_migration_report(seeded, engine, monkeypatch, capsys):
    run_script("verify_migration", monkeypatch, engine)
    out = capsys.readouterr().out

    assert "Places (active):     7" in out
    assert "~98 rows (14 days per place)" in out
    assert "Weather coverage:    0.0%" in out
    assert "Latest update" not in out


def test_clear_map_cache_prints_instructions(monkeypatch, capsys):
    run_script("clear_map_cache", monkeypatch)

    assert "removeItem('mapDestinationsCache')" in capsys.readouterr().out


def test_print_app_config_masks_secrets(monkeypatch, capsys):
    module = load_script("print_app_config")
    settings = Settings(
        supabase_url="https://demo.supabase.co",
        supabase_anon_key="anon",
        openweathermap_api_key="owm",
        weatherbit_api_key="",
    )
    monkeypatch.setattr(module, "build_app_manifest", lambda: build_app_manifest(settings))
    monkeypatch.setattr(sys, "argv", ["print_app_config.py"])

    module.main()
    extra = json.loads(capsys.readouterr().out)["expo"]["extra"]

    assert extra == {
        "openWeatherApiKey": "***",
        "weatherbitApiKey": "",
        "supabaseUrl": "https://demo.supabase.co",
        "supabaseAnonKey": "***",
    }

    monkeypatch.setattr(sys, "argv", ["print_app_config.py", "--show-secrets"])
    module.main()

    assert json.loads(capsys.readouterr().out)["expo"]["extra"]["supabaseAnonKey"] == "anon"
