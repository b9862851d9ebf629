from __future__ import annotations

from pathlib import Path

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("Testing", "config.testing"),
        ("test", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_testing_app_uses_testing_settings(app):
    assert app.config["TESTING"] is True
    assert app.config["MAX_CONTENT_LENGTH"] == 1024 * 1024
    assert "/api/convert" in {rule.rule for rule in app.url_map.iter_rules()}


def test_templates_ship_inside_package(app):
    package_dir = Path(app.root_path).resolve()
    folder = (package_dir / app.template_folder).resolve()

    assert folder.is_relative_to(package_dir)
    assert (folder / "base.html").is_file()
    assert (folder / "converter" / "index.html").is_file()
