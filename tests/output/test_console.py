"""Tests for the Rich console factory."""

from rich.text import Text

from subjectctl.output.console import create_console, get_output, style_for_environment


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print(Text("hello", style="subj.ok"))
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestEnvironmentStyle:
    def test_known_environments(self) -> None:
        assert style_for_environment("prod") == "subj.env.prod"
        assert style_for_environment("dev") == "subj.env.dev"

    def test_unknown_environment(self) -> None:
        assert style_for_environment("qa") == ""
