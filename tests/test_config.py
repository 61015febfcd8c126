from tedit.runtime.config import HELP_MESSAGE, EditorSettings


def test_defaults() -> None:
    settings = EditorSettings()

    assert settings.help_message == HELP_MESSAGE
    assert settings.viewport_for(24, 80) == (22, 75)


def test_from_env_reads_prefixed_values() -> None:
    settings = EditorSettings.from_env(
        {
            "TEDIT_HELP": "custom",
            "TEDIT_ROWS": "40",
            "TEDIT_ESCAPE_TIMEOUT": "0.2",
            "TEDIT_COLS": "wide",
        }
    )

    assert settings.help_message == "custom"
    assert settings.fallback_rows == 40
    assert settings.fallback_cols == 80
    assert settings.escape_timeout == 0.2


def test_with_overrides_skips_none() -> None:
    settings = EditorSettings().with_overrides(escape_timeout=None, gutter_width=6)

    assert settings.escape_timeout == 0.05
    assert settings.gutter_width == 6


def test_viewport_never_collapses() -> None:
    assert EditorSettings().viewport_for(1, 3) == (1, 1)


def test_from_env_keeps_gutter_positive() -> None:
    settings = EditorSettings.from_env({"TEDIT_GUTTER": "0"})

    assert settings.gutter_width == 1
    assert EditorSettings.from_env({"TEDIT_GUTTER": "-3"}).gutter_width == 1
