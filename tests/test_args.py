import pytest

from rmdesk.args import (
    ArgumentError,
    ProgArgs,
    default_args,
    parse_args,
    parse_delay,
    validate_args,
)


def test_defaults_match_documented_values():
    args = default_args({})
    assert args.fps == 15
    assert args.frequency == 22050
    assert args.buffsize == 4096
    assert args.v_quality == 63
    assert args.s_quality == 10
    assert args.filename == "out.ogv"
    assert args.workdir == "/tmp"
    assert args.pause_shortcut == "Control+Mod1+p"
    assert args.stop_shortcut == "Control+Mod1+s"
    assert args.display is None
    assert args.zerocompression is True
    assert args.xfixes_cursor is True
    assert args.jack_nports == 0


def test_default_display_from_environment():
    assert default_args({"DISPLAY": ":7"}).display == ":7"


def test_parse_delay_plain_seconds():
    assert parse_delay("10") == 10


def test_parse_delay_units():
    assert parse_delay("2m") == parse_delay("120")
    assert parse_delay("2M") == parse_delay("2m")
    assert parse_delay("1h") == parse_delay("3600")
    assert parse_delay("1H") == parse_delay("60m")


def test_parse_delay_truncates_fraction():
    assert parse_delay("2.9") == 2


@pytest.mark.parametrize("text", ["0", "-5", "abc", ""])
def test_parse_delay_rejects_non_positive(text):
    with pytest.raises(ArgumentError):
        parse_delay(text)


def test_validate_collects_every_problem():
    args = ProgArgs(x=-1, y=-1)
    with pytest.raises(ArgumentError) as info:
        validate_args(args)
    assert info.value.messages == [
        "-x must not be less than 0.",
        "-y must not be less than 0.",
    ]


@pytest.mark.parametrize(
    "field,value",
    [("fps", 0), ("v_quality", 64), ("v_quality", -1), ("v_bitrate", -1),
     ("frequency", 0), ("channels", 0), ("buffsize", 0), ("jack_ringbuffer_secs", 0)],
)
def test_validate_rejects_out_of_range(field, value):
    args = ProgArgs(**{field: value})
    with pytest.raises(ArgumentError):
        validate_args(args)


def test_parse_numeric_options():
    args = parse_args(["--fps", "30", "-x", "5", "-y", "7", "--width", "640"], {})
    assert args.fps == 30.0
    assert (args.x, args.y, args.width) == (5, 7, 640)


def test_parse_equals_and_attached_forms():
    args = parse_args(["--display=:1", "-x12", "--freq=44100"], {})
    assert args.display == ":1"
    assert args.x == 12
    assert args.frequency == 44100


def test_switches_adjust_flags():
    args = parse_args(
        ["--no-cursor", "--quick-subsampling", "--compress-cache", "--follow-mouse"], {}
    )
    assert args.xfixes_cursor is False
    assert args.no_quick_subsample is False
    assert args.zerocompression is False
    assert args.full_shots is True


def test_dummy_cursor_white():
    args = parse_args(["--dummy-cursor", "white"], {})
    assert args.cursor_color == 0
    assert args.have_dummy_cursor is True
    assert args.xfixes_cursor is False


def test_dummy_cursor_invalid_colour():
    with pytest.raises(ArgumentError):
        parse_args(["--dummy-cursor", "red"], {})


def test_delay_option():
    assert parse_args(["--delay", "3m"], {}).delay == parse_delay("3m")


def test_positional_filename():
    assert parse_args(["movie.ogv"], {}).filename == "movie.ogv"


def test_output_option_wins_over_positional():
    assert parse_args(["-o", "a.ogv", "b.ogv"], {}).filename == "a.ogv"


def test_use_jack_ports():
    args = parse_args(["--use-jack", "system:capture_1"], {})
    assert args.use_jack is True
    assert args.jack_port_names == ["system:capture_1"]
    assert args.jack_nports == 1


@pytest.mark.parametrize(
    "argv",
    [["--fps", "abc"], ["--fps"], ["--bogus"], ["--v_quality", "64"], ["--fps", "0"],
     ["--no-sound=1"]],
)
def test_bad_command_lines(argv):
    with pytest.raises(ArgumentError):
        parse_args(argv, {})


def test_bad_number_message():
    with pytest.raises(ArgumentError) as info:
        parse_args(["--channels", "two"], {})
    assert "Bad number" in str(info.value)


def test_missing_argument_message():
    with pytest.raises(ArgumentError) as info:
        parse_args(["--device"], {})
    assert "Missing argument" in str(info.value)


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--help"], {})
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "--fps" in out
    assert "--no-encode" not in out


def test_version_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"], {})
    assert info.value.code == 0
    assert " v" in capsys.readouterr().err


def test_print_config(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--print-config"], {})
    assert info.value.code == 0
    assert "Jack:" in capsys.readouterr().out


def test_negative_value_taken_as_argument():
    with pytest.raises(ArgumentError) as info:
        parse_args(["-x", "-3"], {})
    assert info.value.messages == ["-x must not be less than 0."]