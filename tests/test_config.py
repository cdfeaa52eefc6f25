from __future__ import annotations

from pathlib import Path

from metadev.config import (
    DEFAULT_SKIP_DIRS,
    I18nSettings,
    i18n_settings,
    load_i18n_settings,
)


def test_load_i18n_settings_defaults_without_file(tmp_path: Path) -> None:
    settings = load_i18n_settings(root=tmp_path)
    assert settings == I18nSettings()
    assert settings.gitignore_entry == ".i18n/"


def test_load_i18n_settings_reads_section(tmp_path: Path) -> None:
    (tmp_path / "metadev.toml").write_text(
        "[i18n]\n"
        'source_suffixes = ["tsx", ".jsx"]\n'
        'skip_dirs = "coverage, storybook-static"\n'
        'output_dir = "locales/"\n',
        encoding="utf-8",
    )

    settings = load_i18n_settings(root=tmp_path)

    assert settings.source_suffixes == (".tsx", ".jsx")
    assert settings.skip_dirs == DEFAULT_SKIP_DIRS | {"coverage", "storybook-static"}
    assert settings.output_dir == "locales/"
    assert settings.gitignore_entry == "locales/"


def test_load_i18n_settings_ignores_invalid_toml(tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text("[i18n\nbroken", encoding="utf-8")
    assert load_i18n_settings(config_path=config) == I18nSettings()


def test_i18n_settings_ignores_wrong_types() -> None:
    settings = i18n_settings({"source_suffixes": 3, "output_dir": 7, "skip_dirs": None})
    assert settings == I18nSettings()
