# qcc

The logic behind a set of user-interface controls, with no toolkit
attached. Each class keeps its own state and computes what a view would
show or draw. The package has no dependencies outside the standard
library.

## Modules

- `qcc.validators`
  - `DateValidator(fmt="dd.MM.yyyy hh:mm:ss")` checks date/time text
    against a format. `validate(text)` returns a `(State, text)` pair;
    when the text has the right length but a wrong separator, the
    returned text has the separators put back from the format.
    `up(text, pos)` and `down(text, pos)` step the field under `pos`
    (day, month, year, hour, minute or second) by one. `input_mask` gives
    the format with every field letter replaced by `N`, followed by `;_`.
  - `HexValidator(bottom=-1, top=-1)` checks hexadecimal text against
    optional bounds (`-1` means unbounded). Values below `bottom` are
    `INTERMEDIATE`, values above `top` are `INVALID`.
  - `State` has the members `INVALID`, `INTERMEDIATE` and `ACCEPTABLE`.
- `qcc.suggestions`
  - `SuggestionsList` keeps the entries of `model` that contain `text`
    (case-insensitive unless `case_sensitive` is set), up to
    `maximum_number_of_suggestions`. Entries exactly as long as the text
    are left out. Each match is a `Suggestion` with `model_data`,
    `suggestion` (the matched part wrapped in `<b>` tags) and `index`.
    `data(row, role)` and `role_names()` expose them by `Role`.
- `qcc.tooltips`
  - `ToolTipListModel` is a list of `Message`s that expire after
    `timeout` milliseconds when `check_list()` is called. A `ListType`
    decides whether repeats are kept (`ALL`), dropped when equal to the
    last message (`LATTER_DO_NOT_REPEAT`) or dropped altogether
    (`NO_REPEATS`). `timer_interval` says how often to call
    `check_list()` while `timer_active` is set.
- `qcc.geometry`
  - `Line.vertices()` gives the point pairs of a solid or dashed line,
    horizontal or vertical (`Orientation`).
  - `ArrowItem.vertices()` gives the shaft and the two strokes of an
    arrow or cross indicator (`IndicatorForm`).
- `qcc.animation`
  - `WaitingBar` holds the progress of an indeterminate busy bar;
    `tick()` advances it, `progress_x()` gives the gradient's left edge.
  - `VchIcon` holds the time shown by a clock icon in a `TimeSpec`;
    `tick()` moves it to the current time and `hand_angles()` returns a
    `HandAngles` tuple in degrees.
  - `out_in_sine(t)` is the easing curve; `octagon(x, y, width, height, k)`
    gives the corners of a rectangle with cut corners.
- `qcc.demo`
  - `TableModel` is a read-only table whose cells read `data <row>-<column>`.
  - `adev_samples()`, `big_data_samples(count, rng)` and
    `small_data_samples(start, count, rng)` produce sample point series.

## Install

```
pip install .
```

## Example

```python
from qcc.validators import HexValidator, State
from qcc.suggestions import SuggestionsList

hex_validator = HexValidator()
hex_validator.top = 0xFF
assert hex_validator.validate("1F") is State.ACCEPTABLE
assert hex_validator.validate("1FF") is State.INVALID

suggestions = SuggestionsList()
suggestions.model = ["apple", "pineapple", "banana"]
suggestions.text = "app"
assert [s.suggestion for s in suggestions] == ["<b>app</b>le", "pine<b>app</b>le"]
```

## What it does not do

The package draws nothing and runs no timers. There is no window, widget
or rendering code: the classes compute state, vertices and angles, and
the caller is responsible for drawing them and for calling `tick()` or
`check_list()` at the advertised intervals.

## Tests

```
pip install .[test]
pytest
```