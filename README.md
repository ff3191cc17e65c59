# rmdesk

Pure-Python building blocks for a desktop recorder. The package holds the
parts of a recorder that need neither a display server nor a codec library:

- `rmdesk.rects`: a list of damaged screen rectangles kept free of
  redundant overlap. New rectangles are dropped when already covered,
  joined with a neighbour of equal width or height, or cut into pieces
  against those already stored (`Rect`, `Collision`, `collide_rects`,
  `DamageList`). `DamageList.insert` returns the net number of rectangles
  it added.
- `rmdesk.args`: the recorder's options with their defaults, command-line
  parsing and range checks (`ProgArgs`, `default_args`, `parse_delay`,
  `validate_args`, `parse_args`, `ArgumentError`). `--help`, `--version`
  and `--print-config` print their text and raise `SystemExit(0)`. Every
  other problem raises `ArgumentError`, whose `messages` attribute lists
  each complaint.
- `rmdesk.damage`: clipping of a damaged area to the recorded area
  (`clip_event_area`, which returns `None` when they are judged not to
  overlap) and widening to even offsets for the 2×2 chroma grid
  (`uv_align`).
- `rmdesk.pointer`: the 16×16 arrow cursor drawn when the real one cannot
  be captured (`make_dummy_pointer`, `DummyPointer`). The image has four
  bytes per pixel. Pixels whose bytes all equal `npxl` are see-through.
- `rmdesk.signals`: pause and stop requests driven by signals (`RunState`,
  `register_callbacks`). SIGUSR1 sets `pause_state_changed`. SIGINT,
  SIGTERM and SIGABRT clear `running`, and SIGABRT also sets `aborted`.
  `register_callbacks` returns the handlers it replaced.
- `rmdesk.mathutil`: rounding with halves going away from zero
  (`round_half_away`).

It depends on nothing outside the standard library and supports Python 3.10
and later.

## Examples

Parsing options:

```python
from rmdesk.args import parse_args, ArgumentError

try:
    args = parse_args(["--fps", "25", "--delay", "2m", "-o", "talk.ogv"], {})
    print(args.fps, args.delay, args.filename)   # 25.0 120 talk.ogv
except ArgumentError as err:
    print(err)
```

Collecting damage:

```python
from rmdesk.rects import DamageList, Rect

damage = DamageList()
damage.insert(Rect(0, 0, 64, 32))
damage.insert(Rect(32, 0, 64, 32))   # same height, so the two are joined
print(list(damage))                  # [Rect(x=0, y=0, width=96, height=32)]
damage.clear()
```

Clipping a damage report to the recorded area:

```python
from rmdesk.damage import clip_event_area, uv_align
from rmdesk.rects import Rect

area = Rect(0, 0, 800, 600)
clipped = clip_event_area(Rect(11, 7, 20, 20), area)
if clipped is not None:
    print(uv_align(area, clipped))
```

Handling signals:

```python
from rmdesk.signals import RunState, register_callbacks

state = RunState()
register_callbacks(state)
```

## What the package does not do

The package does not grab the screen or record sound. It does not encode
video or audio and does not write or read any recording files. It installs
no command. `parse_args` returns the options, and nothing in the package
starts a recording from them. `--use-jack` is accepted and its ports are
stored, but a warning says they will be ignored.

## Running the tests

The tests use pytest, which the `test` extra installs:

```
pip install -e .[test]
pytest
```