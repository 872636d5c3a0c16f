# sphereview

A small desktop viewer that reads a list of 3D positions from a text file
and draws a sphere at each one. You rotate the scene with the mouse and
zoom with the wheel.

## Installing

```
pip install .
```

The window uses Tkinter, which ships with most Python installations. The
package has no other dependencies.

## Running

```
sphereview
```

This opens an 800×600 "Sphere Viewer" window. Choose
**File → Open Data File...** and pick a `.dat` or `.txt` file (or any file,
through "All Files"). If the file cannot be opened or no point can be read
from it, an "Could not parse the data file." warning is shown and the
current scene is kept.

The command takes no arguments; files are opened through the menu only.

### Controls

- **Left-drag**: rotate the scene. Vertical movement turns it around the
  X axis, horizontal movement around the Y axis, a quarter of a degree per
  pixel.
- **Mouse wheel**: zoom in or out. You cannot come closer than 0.5 units
  from the origin of the scene.
- Right-drag does not change the view.

When a file is loaded, the camera distance is set to 2.5 times the largest
absolute coordinate in the data, and never less than 2 units.

## Data file format

- The first three lines are a header and are always skipped.
- After that, each non-blank line starts with three numbers `x y z`,
  separated by spaces. Anything after the third number is ignored.
- A line with fewer than three fields, or whose first three fields are not
  numbers (or do not fit in single precision), is skipped with a logged
  warning. Values are stored at single precision.

```
Sphere positions
generated by my-simulation
x y z
0.0 0.0 0.0
1.5 -0.25 2.0
-3 4 0.5 extra columns are ignored
```

## Using it from Python

The file reader, camera and projection work without a window:

```python
from sphereview.datafile import parse_data_file, DataFileError
from sphereview.camera import Camera
from sphereview.render import project_scene

try:
    points = parse_data_file("cloud.dat")
except DataFileError as exc:
    print("cannot load:", exc)
else:
    camera = Camera()
    camera.fit_to(points)
    discs = project_scene(points, camera, 800, 600)
```

- `sphereview.datafile`: `parse_data_file(path)` and `parse_lines(lines)`
  return a list of `Point` values (`x`, `y`, `z`, iterable as a triple).
  `parse_data_file` raises `DataFileError` when the file cannot be opened or
  holds no usable point; `parse_lines` returns an empty list in that case.
- `sphereview.camera`: `Camera` holds the rotation (`x_rot`, `y_rot`), the
  `zoom` distance and the `sphere_radius` (0.1). `press`, `drag` and `wheel`
  apply mouse input (the last two return whether the view changed; `wheel`
  takes a delta in eighths of a degree), `fit_to` picks a distance for a set
  of points, and `to_eye` maps a point into camera space.
- `sphereview.render`: `project_scene(points, camera, width, height)` turns
  points into `Disc` values (`x`, `y`, `radius`, `depth`, `color`) with a
  45° field of view, dropping points nearer than 0.1 or farther than 100
  units, ordered farthest first for back-to-front drawing.
  `perspective_scale` and `shade` are the helpers it is built on.
- `sphereview.app`: `ViewerState` combines loading a file (`open_file`) with
  building a scene (`scene`); `Viewer` is the Tk window, and `main()` starts
  it.

## Limits

Drawing is done on a Tk canvas, not with a 3D graphics library: each sphere
is shown as a flat disc in one colour, lit by a single light according to
the direction from its centre. Discs are layered by depth rather than
depth-tested pixel by pixel.

## Running the tests

```
pip install ".[test]"
pytest
```