"""Command-line options of the recorder: defaults, parsing and validation."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Mapping

PROGRAM_NAME = "rmdesk"
PROGRAM_VERSION = "0.1.0"
DEFAULT_AUDIO_DEVICE = "hw:0,0"
JACK_STATUS = "Disabled"
AUDIO_BACKEND = "ALSA"


class ArgumentError(ValueError):
    """Raised when the command line cannot be parsed or holds invalid values."""

    def __init__(self, messages: Iterable[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


@dataclass
class ProgArgs:
    """Every option the user can set, with its default value."""

    delay: int = 0
    windowid: int = 0
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    rescue_path: str | None = None
    nosound: bool = False
    full_shots: bool = False
    follow_mouse: bool = False
    enc_on_the_fly: bool = False
    nowmcheck: bool = False
    overwrite: bool = False
    use_jack: bool = False
    noshared: bool = False
    no_encode: bool = False
    noframe: bool = False
    jack_port_names: list[str] = field(default_factory=list)
    jack_ringbuffer_secs: float = 3.0
    zerocompression: bool = True
    periodic_datasync_ms: int = 100
    no_quick_subsample: bool = True
    cursor_color: int = 1
    have_dummy_cursor: bool = False
    xfixes_cursor: bool = True
    fps: float = 15.0
    channels: int = 1
    frequency: int = 22050
    buffsize: int = 4096
    v_bitrate: int = 0
    v_quality: int = 63
    s_quality: int = 10
    display: str | None = None
    device: str = DEFAULT_AUDIO_DEVICE
    workdir: str = "/tmp"
    pause_shortcut: str = "Control+Mod1+p"
    stop_shortcut: str = "Control+Mod1+s"
    filename: str = "out.ogv"

    @property
    def jack_nports(self) -> int:
        """Number of JACK ports to record from."""
        return len(self.jack_port_names)


def default_args(environ: Mapping[str, str] | None = None) -> ProgArgs:
    """Return the default options; the display comes from ``DISPLAY``."""
    env = os.environ if environ is None else environ
    return ProgArgs(display=env.get("DISPLAY"))


_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_delay(text: str) -> int:
    """Turn ``n[H|h|M|m]`` into whole seconds; ``n`` may be fractional."""
    match = _LEADING_FLOAT.match(text)
    num = float(match.group()) if match else 0.0
    if num <= 0.0:
        raise ArgumentError(
            ["Argument Usage: --delay n[H|h|M|m]", "where n is a float number"]
        )
    for char in text:
        if char in "Mm":
            num *= 60.0
            break
        if char in "Hh":
            num *= 3600.0
            break
    return int(num)


def validate_args(args: ProgArgs) -> None:
    """Check value ranges, raising ArgumentError listing every problem."""
    checks = [
        (args.x < 0, "-x must not be less than 0."),
        (args.y < 0, "-y must not be less than 0."),
        (args.width < 0, "--width must be larger than 0."),
        (args.height < 0, "--height must be larger than 0."),
        (args.fps <= 0, "--fps must be larger than 0."),
        (
            args.v_quality < 0 or args.v_quality > 63,
            "--v_quality must be within the inclusive range [0-63].",
        ),
        (
            args.v_bitrate < 0,
            "--v_bitrate must be within the inclusive range [0-2000000].",
        ),
        (args.frequency <= 0, "--frequency must be larger than 0."),
        (args.channels <= 0, "--channels must be larger than 0."),
        (args.buffsize <= 0, "--buffer-size must be larger than 0."),
        (args.jack_ringbuffer_secs <= 0, "--jack-buffer-size must be larger than 0."),
    ]
    problems = [message for failed, message in checks if failed]
    if problems:
        raise ArgumentError(problems)


class _Kind(Enum):
    FLAG = auto()
    INT = auto()
    FLOAT = auto()
    STRING = auto()
    DELAY = auto()
    DUMMY_CURSOR = auto()
    JACK = auto()
    INFO = auto()

    @property
    def takes_value(self) -> bool:
        return self not in (_Kind.FLAG, _Kind.INFO)


@dataclass(frozen=True)
class _Option:
    long: str
    kind: _Kind
    dest: str
    help: str
    argname: str | None = None
    short: str | None = None
    hidden: bool = False


_GROUPS: list[tuple[str, list[_Option]]] = [
    ("Generic Options", [
        _Option("help", _Kind.INFO, "help", "Print this help and exit.", short="h"),
        _Option("version", _Kind.INFO, "version", "Print program version and exit."),
        _Option("print-config", _Kind.INFO, "print_config",
                "Print info about options selected during compilation and exit."),
    ]),
    ("Image Options", [
        _Option("windowid", _Kind.INT, "windowid", "id of window to be recorded.", "id_of_window"),
        _Option("display", _Kind.STRING, "display", "Display to connect to.", "DISPLAY"),
        _Option("x", _Kind.INT, "x", "Offset in x direction.", "N>=0", short="x"),
        _Option("y", _Kind.INT, "y", "Offset in y direction.", "N>=0", short="y"),
        _Option("width", _Kind.INT, "width", "Width of recorded window.", "N>0"),
        _Option("height", _Kind.INT, "height", "Height of recorded window.", "N>0"),
        _Option("dummy-cursor", _Kind.DUMMY_CURSOR, "cursor_color",
                "Color of the dummy cursor [black|white].", "color"),
        _Option("no-cursor", _Kind.FLAG, "no_cursor", "Disable drawing of the cursor."),
        _Option("no-shared", _Kind.FLAG, "noshared",
                "Disable usage of MIT-shared memory extension (Not Recommended!)."),
        _Option("full-shots", _Kind.FLAG, "full_shots",
                "Take full screenshot at every frame (Not recomended!)."),
        _Option("follow-mouse", _Kind.FLAG, "follow_mouse",
                "Makes the capture area follow the mouse cursor. Autoenables --full-shots."),
        _Option("quick-subsampling", _Kind.FLAG, "quick_subsampling",
                "Do subsampling of the chroma planes by discarding, not averaging."),
        _Option("fps", _Kind.FLOAT, "fps",
                "A positive number denoting desired framerate.", "N(number>0.0)"),
    ]),
    ("Sound Options", [
        _Option("channels", _Kind.INT, "channels",
                "A positive number denoting desired sound channels in recording.", "N"),
        _Option("freq", _Kind.INT, "frequency",
                "A positive number denoting desired sound frequency.", "N"),
        _Option("buffer-size", _Kind.INT, "buffsize",
                "A positive number denoting the desired sound buffer size "
                "(in frames, when using ALSA or OSS)", "N"),
        _Option("ring-buffer-size", _Kind.FLOAT, "jack_ringbuffer_secs",
                "A float number denoting the desired ring buffer size "
                "(in seconds, when using JACK only).", "N"),
        _Option("device", _Kind.STRING, "device",
                f"Sound device (default {DEFAULT_AUDIO_DEVICE}).", "SOUND_DEVICE"),
        _Option("use-jack", _Kind.JACK, "jack_port_names",
                "Record audio from the specified list of space-separated jack ports.",
                "port1 port2... portn", hidden=True),
        _Option("no-sound", _Kind.FLAG, "nosound", "Do not record sound."),
    ]),
    ("Encoding Options", [
        _Option("on-the-fly-encoding", _Kind.FLAG, "enc_on_the_fly",
                "Encode the audio-video data, while recording."),
        _Option("v_quality", _Kind.INT, "v_quality",
                "A number from 0 to 63 for desired encoded video quality (default 63).", "n"),
        _Option("v_bitrate", _Kind.INT, "v_bitrate",
                "A number from 0 to 2000000 for desired encoded video bitrate (default 0).", "n"),
        _Option("s_quality", _Kind.INT, "s_quality", "Desired audio quality (-1 to 10).", "n"),
    ]),
    ("Misc Options", [
        _Option("rescue", _Kind.STRING, "rescue_path",
                "Encode data from a previous, crashed, session.", "path_to_data"),
        _Option("no-encode", _Kind.FLAG, "no_encode",
                "Do not encode any data after recording is complete. "
                "This is instead done manually afterwards with --rescue.", hidden=True),
        _Option("no-wm-check", _Kind.FLAG, "nowmcheck",
                "Do not try to detect the window manager (and set options according to it)."),
        _Option("no-frame", _Kind.FLAG, "noframe",
                "Do not show the frame that visualizes the recorded area."),
        _Option("pause-shortcut", _Kind.STRING, "pause_shortcut",
                "Shortcut that will be used for (un)pausing (default Control+Mod1+p).",
                "MOD+KEY"),
        _Option("stop-shortcut", _Kind.STRING, "stop_shortcut",
                "Shortcut that will be used to stop the recording (default Control+Mod1+s).",
                "MOD+KEY"),
        _Option("compress-cache", _Kind.FLAG, "compress_cache",
                "Image data are cached with light compression."),
        _Option("periodic-datasync-ms", _Kind.INT, "periodic_datasync_ms",
                "Asynchronously fdatasync() cache files every specified ms while writing, "
                "0 disables (default 100).", "N>=0"),
        _Option("workdir", _Kind.STRING, "workdir",
                "Location where a temporary directory will be created to hold project "
                "files (default $HOME).", "DIR"),
        _Option("delay", _Kind.DELAY, "delay",
                "Number of seconds (default), minutes or hours before capture starts "
                "(number can be float)", "n[H|h|M|m]"),
        _Option("overwrite", _Kind.FLAG, "overwrite",
                "If there is already a file with the same name, delete it "
                "(default is to add a number postfix to the new one)."),
        _Option("output", _Kind.STRING, "filename",
                "Name of recorded video (default out.ogv).", "filename", short="o"),
    ]),
]

_LONG = {opt.long: opt for _, opts in _GROUPS for opt in opts}
_SHORT = {opt.short: opt for _, opts in _GROUPS for opt in opts if opt.short}
_SWITCHES = ("no_cursor", "quick_subsampling", "compress_cache")


def _format_help() -> str:
    lines = [f"Usage: {PROGRAM_NAME} [OPTIONS] filename", ""]
    for title, options in _GROUPS:
        lines.append(f"{title}")
        for opt in options:
            if opt.hidden:
                continue
            names = f"--{opt.long}"
            if opt.short:
                names = f"-{opt.short}, {names}"
            if opt.argname:
                names = f"{names}={opt.argname}"
            lines.append(f"  {names:<36} {opt.help}")
        lines.append("")
    lines.append("\tIf no other options are specified, filename can be given "
                 "without the -o switch.")
    lines.append("")
    return "\n".join(lines)


def _show_info(option: _Option) -> None:
    if option.dest == "version":
        print(f"{PROGRAM_NAME} v{PROGRAM_VERSION}\n", file=sys.stderr)
    elif option.dest == "help":
        print(_format_help())
    else:
        print(
            f"\n{PROGRAM_NAME} was compiled with the following options:\n\n"
            f"Jack:\t\t\t{JACK_STATUS}\n"
            f"Default Audio Backend:\t{AUDIO_BACKEND}\n\n"
        )
    raise SystemExit(0)


def _number(option: _Option, value: str) -> int | float:
    try:
        if option.kind is _Kind.INT:
            return int(value.strip(), 0)
        return float(value)
    except ValueError:
        raise ArgumentError([f"Error when parsing `--{option.long}': Bad number"]) from None


def _apply(
    option: _Option,
    value: str | None,
    args: ProgArgs,
    switches: dict[str, bool],
    errors: list[str],
) -> None:
    kind = option.kind
    if kind is _Kind.INFO:
        _show_info(option)
    elif kind is _Kind.FLAG:
        if option.dest in switches:
            switches[option.dest] = True
        else:
            setattr(args, option.dest, True)
    elif kind in (_Kind.INT, _Kind.FLOAT):
        setattr(args, option.dest, _number(option, value))
    elif kind is _Kind.STRING:
        setattr(args, option.dest, value)
    elif kind is _Kind.DELAY:
        try:
            args.delay = parse_delay(value)
        except ArgumentError as exc:
            errors.extend(exc.messages)
    elif kind is _Kind.DUMMY_CURSOR:
        if value == "white":
            args.cursor_color = 0
        elif value == "black":
            args.cursor_color = 1
        else:
            errors.append("Argument Usage:\n --dummy-cursor [black|white]")
        args.have_dummy_cursor = True
        args.xfixes_cursor = False
    else:
        args.jack_port_names = value.split()
        if args.jack_port_names:
            args.use_jack = True
        else:
            errors.append("Argument Usage: --use-jack port1 port2... portn")
        print("Warning, will ignore --use-jack flags, no libjack support in build.",
              file=sys.stderr)


def parse_args(
    argv: Iterable[str] | None = None, environ: Mapping[str, str] | None = None
) -> ProgArgs:
    """Parse the command line (without the program name) into ProgArgs.

    ``--help``, ``--version`` and ``--print-config`` print and raise
    SystemExit(0); any other problem raises ArgumentError.
    """
    tokens = iter(sys.argv[1:] if argv is None else argv)
    args = default_args(environ)
    switches = dict.fromkeys(_SWITCHES, False)
    errors: list[str] = []
    positional: list[str] = []
    output_given = False

    for token in tokens:
        if token == "--":
            positional.extend(tokens)
            break
        if token.startswith("--"):
            name, sep, rest = token[2:].partition("=")
            option = _LONG.get(name)
            inline = rest if sep else None
        elif token.startswith("-") and len(token) > 1:
            option = _SHORT.get(token[1])
            rest = token[2:]
            inline = (rest[1:] if rest.startswith("=") else rest) or None
        else:
            positional.append(token)
            continue

        if option is None:
            raise ArgumentError([f"Error when parsing `{token}': unknown option"])
        if option.kind.takes_value:
            value = inline if inline is not None else next(tokens, None)
            if value is None:
                raise ArgumentError([f"Error when parsing `{token}': Missing argument"])
        else:
            if inline is not None:
                raise ArgumentError(
                    [f"Error when parsing `{token}': option does not take an argument"]
                )
            value = None
        if option.dest == "filename":
            output_given = True
        _apply(option, value, args, switches, errors)

    if switches["no_cursor"]:
        args.xfixes_cursor = False
    if switches["quick_subsampling"]:
        args.no_quick_subsample = False
    if switches["compress_cache"]:
        args.zerocompression = False
    if args.follow_mouse:
        args.full_shots = True
    if positional and not output_given:
        args.filename = positional[0]

    if errors:
        raise ArgumentError(errors)
    validate_args(args)
    return args