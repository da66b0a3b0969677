# bbimager

The logic behind a board imaging utility, kept apart from any user interface.

## Modules

- `bbimager.easing`: easing curves built from line and Bézier segments. Start
  with `Easing.builder()`, add segments with `line_to`,
  `quadratic_bezier_to` and `cubic_bezier_to`, then call `build()`. This closes
  the path at (1, 1). Every point is clamped into the unit square.
  `Easing.y_at_x(x)` returns the y of the point found at fraction `x` of the
  path's length. Ready-made curves: `STANDARD`, `STANDARD_DECELERATE`,
  `STANDARD_ACCELERATE`, `EMPHASIZED`, `EMPHASIZED_DECELERATE` and
  `EMPHASIZED_ACCELERATE`.
- `bbimager.circular`: the state of a circular loading indicator. An
  `Animation` starts with `Animation.initial(now)`. It moves between the
  `AnimationPhase.EXPANDING` and `AnimationPhase.CONTRACTING` phases through
  `timed_transition(cycle_duration, rotation_duration, now)`. `Circular` holds
  the size, bar height, easing and durations, and gives the bar's start and end
  angles in radians through `arc(animation)`. Times are in seconds.
- `bbimager.linear`: a sliding-bar loading indicator. `LinearState.redraw(now)`
  records redraw times. `Linear.bar_bounds(state, x, y, width, height)` returns
  where the bar goes as `(x, y, width, height)`. The bar's width ratio is
  clamped to 0.1–0.8.
- `bbimager.settings`: the settings that persist. These are `GuiConfiguration`,
  `AppSettings`, `SdCustomization` with `SdSysconfCustomization`,
  `SdCustomizationUser` and `SdCustomizationWifi`, `BcfCustomization` and
  `Pb2Mspm0Customization`. Each one converts to and from a dict with `to_dict`
  and `from_dict`, and unset fields are left out. `from_dict` raises
  `ValueError` on missing or mistyped fields. `GuiConfiguration.save(path)`
  writes pretty-printed JSON and creates any parent directories it needs.
  `GuiConfiguration.load(path)` reads that JSON back.
- `bbimager.updater`: `parse_release_name("v1.2.3")` gives a
  `semver.Version`. `check_update(fetch_json, url, current_version)` returns
  the latest version when it is newer than the current one, and `None`
  otherwise. Bad release data raises `UpdateError`, which is an `OSError`.
- `bbimager.sizes`: `format_size` gives a byte count in binary units with two
  decimals (`format_size(1536) == "1.50 KB"`). `matches_search` is a
  case-insensitive substring test.
- `bbimager.pages`: the screens (`Home`, `BoardSelection`, `ImageSelection`,
  `DestinationSelection`, `ExtraConfiguration`, `Flashing`,
  `FlashingConfirmation`) and the state they carry. `ScreenStack` navigates
  between them with `push`, `pop`, `switch`, `replace`, `reset_home` and
  `update_progress`. It starts on the home screen.

## Example

```python
from pathlib import Path

from bbimager.settings import AppSettings, GuiConfiguration
from bbimager.sizes import format_size
from bbimager.updater import check_update

config = GuiConfiguration(app_settings=AppSettings(skip_confirmation=True))
config.save(Path("config.json"))
print(GuiConfiguration.load(Path("config.json")).app_settings)

print(format_size(1536))  # 1.50 KB

releases = {"https://example.com/latest": {"name": "v0.1.0"}}
print(check_update(releases.__getitem__, "https://example.com/latest", "0.0.16"))  # 0.1.0
```

## What it does not do

This package has no graphical interface and no command-line tool. It does not
flash or format devices. It does not list drives or ports, and it does not
download board lists, images or icons. `check_update` fetches nothing itself:
you pass in the function that fetches the release JSON. The settings do not
have a default file location, so you give the path to `load` and `save`.

## Installing

```
pip install .
pip install ".[test]"   # also installs pytest
pytest
```