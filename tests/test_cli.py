import pytest

from quickpick.argparsing import UsageError
from quickpick.cli import Options, parse_args, usage_message
from quickpick.config import Scheme


def test_defaults_without_arguments():
    options = parse_args([])
    assert options.monitor == -1
    assert options.config.lines == 7
    assert options.fast is False
    assert options.case_insensitive is False
    assert options.embed is None


def test_flag_options():
    options = parse_args(["-b", "-f", "-i"])
    assert options.config.topbar is False
    assert options.fast is True
    assert options.case_insensitive is True


def test_options_with_values():
    options = parse_args(["-l", "5", "-m", "2", "-p", "Run:", "-w", "0x1234"])
    assert options.config.lines == 5
    assert options.monitor == 2
    assert options.config.prompt == "Run:"
    assert options.embed == "0x1234"


def test_lines_use_leading_integer():
    assert parse_args(["-l", "12x"]).config.lines == 12
    assert parse_args(["-l", "abc"]).config.lines == 0


def test_font_replaces_first_font():
    options = parse_args(["-fn", "Mono:size=9"])
    assert options.config.fonts[0] == "Mono:size=9"
    assert len(options.config.fonts) == len(Options().config.fonts)


def test_color_options():
    options = parse_args(["-nb", "#111111", "-nf", "#222222", "-sb", "#333333", "-sf", "#444444"])
    config = options.config
    assert config.color(Scheme.NORM, "bg") == "#111111"
    assert config.color(Scheme.NORM, "fg") == "#222222"
    assert config.color(Scheme.SEL, "bg") == "#333333"
    assert config.color(Scheme.SEL, "fg") == "#444444"
    assert config.color(Scheme.OUT, "bg") == Options().config.color(Scheme.OUT, "bg")


def test_version_stops_parsing():
    options = parse_args(["-v", "-unknown"])
    assert options.show_version is True


def test_missing_argument_is_usage_error():
    with pytest.raises(UsageError):
        parse_args(["-l"])


def test_unknown_option_is_usage_error():
    with pytest.raises(UsageError):
        parse_args(["-x", "value"])


def test_usage_message_lists_options():
    message = usage_message()
    assert message.startswith("usage:")
    assert "[-l lines]" in message
    assert "[-w windowid]" in message


def test_options_do_not_share_config():
    first = parse_args(["-nb", "#123456"])
    second = parse_args([])
    assert second.config.color(Scheme.NORM, "bg") != first.config.color(Scheme.NORM, "bg")
    assert first.config.color(Scheme.NORM, "bg") == "#123456"