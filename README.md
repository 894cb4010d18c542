# rascam

A small live viewer for camera-based spectroscopy. It shows part of a camera
frame, which you can zoom into and pan across. Above the view it draws the
intensity profile of one pixel row.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
rascam
rascam --log /tmp/rascam.log
```

The program opens the first camera that pygame finds, at 1920×1080. If there
is no camera, it stops with a `RuntimeError`. The window is 1280×856 and has
two parts:

- **Top (1280×256):** the intensity profile of the chosen row. It has one
  sample per view column, and each sample is the mean of the first three
  colour channels. Each value is drawn at that pixel height inside a red
  frame.
- **Bottom (1280×600):** the visible part of the camera frame, scaled to fill
  the view.

### Controls

| Input                      | Effect                                                    |
|----------------------------|-----------------------------------------------------------|
| Mouse wheel up / down      | Zoom in / out one step of 0.01 (zoom factor 0.1 to 1.0)   |
| Click on the view          | Choose that row for the profile and start a drag          |
| Drag                       | Pan the visible part of the camera frame                  |
| `F`                        | Switch fullscreen on or off                               |
| `Esc`                      | Leave fullscreen                                          |
| `Ctrl+C` or closing window | Quit                                                      |

Until you click, the profile is taken from the middle row of the view.

### Log file

`--log` sets the log file. The default is `/mnt/ramdisk/log.txt`. The file is
cleared at start-up and one line, `Hola`, is written to it. If the file cannot
be written, the program still starts.

## Using the pieces

The modules that do the calculations need neither a window nor a camera.

- `rascam.viewport` holds the layout sizes (for example `CAMERA_FRAME_WIDTH`
  and `SPECTRUM_AREA_HEIGHT`) and the `Viewport` class. A `Viewport` tracks
  the zoom factor and the crop rectangle inside the camera frame:
  - `scroll(ScrollDirection.UP)` zooms in and `scroll(ScrollDirection.DOWN)`
    zooms out. Both keep the view centred and inside the frame.
  - `press(x, y)`, `move(x, y)` and `release()` pan the view against the
    pointer's motion. `press` also sets `clicked_row`.
  - `crop_box()` returns `(x, y, width, height)`.
- `rascam.spectrum`:
  - `extract_view(frame, viewport, size)` crops a frame and scales it
    bilinearly to `size`. It raises `ValueError` if the crop does not fit in
    the frame.
  - `row_profile(image, row)` averages the first three channels along one row.
    It raises `IndexError` if the row is outside the image.
  - `analysis_row(image, clicked_row)` returns `clicked_row`, or the middle
    row when `clicked_row` is negative.
- `rascam.histogram`:
  - `outline_points(width, height)` gives the closed frame of the profile
    panel.
  - `profile_points(values, height)` gives the profile polyline. It starts at
    mid-height and then has one `(column, value)` point per value.
- `rascam.logger.Logger` is an append-only text log:
  - `Logger.instance()` returns the shared instance.
  - `set_path`, `clear` and `write` work on the log file. `clear` and `write`
    raise `ValueError` if no path has been set.
- `rascam.app.MainWindow` ties these together:
  - `update(frame)` takes an RGB frame of shape (height, width, 3).
  - `draw(surface)` paints a pygame surface.
  - `handle_event` and `handle_key` handle input.
  - `run()` drives the loop.
  - `frame_source` accepts any callable that returns frames, in place of the
    camera.

## What it does not do

- It cannot save frames or profiles to files.
- It cannot show still images from disk. It reads only from a camera or a
  `frame_source` callable.
- `MainWindow.toggle_analysis_area()` switches a selection mode on and off,
  and switching it on clears the chosen row. No key is bound to it, and no
  analysis area is ever applied to the profile.