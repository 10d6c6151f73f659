"""Tests for Rich Console factory and theme."""

from io import StringIO

from localeroute.output.console import LR_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[lr.locale]fr[/lr.locale]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "fr" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_theme_has_core_styles(self) -> None:
        for name in ("lr.ok", "lr.error", "lr.warning", "lr.op", "lr.locale", "lr.path"):
            assert name in LR_THEME.styles
