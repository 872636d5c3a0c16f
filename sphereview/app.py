"""Sphere viewer window: loads data files and shows the spheres."""

from __future__ import annotations

import logging
from pathlib import Path

from sphereview.camera import Camera
from sphereview.datafile import DataFileError, Point, parse_data_file
from sphereview.render import BACKGROUND, Disc, project_scene

log = logging.getLogger(__name__)

WINDOW_TITLE = "Sphere Viewer"
WINDOW_SIZE = (800, 600)
WHEEL_NOTCH = 120


class ViewerState:
    """Loaded points and the camera that looks at them."""

    def __init__(self) -> None:
        self.points: list[Point] = []
        self.camera = Camera()

    def open_file(self, path: str | Path) -> None:
        """Load a data file and fit the camera; keeps old data on failure."""
        points = parse_data_file(path)
        self.points = points
        self.camera.fit_to(points)

    def scene(self, width: int, height: int) -> list[Disc]:
        """Discs to draw for a viewport of the given size."""
        return project_scene(self.points, self.camera, width, height)


def _hex(color: tuple[float, float, float]) -> str:
    return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02x}" for c in color)


class Viewer:
    """Tk window with a File menu and a canvas driven by the mouse."""

    def __init__(self) -> None:
        import tkinter as tk

        self._tk = tk
        self.state = ViewerState()
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")

        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(
            label="Open Data File...", underline=0, command=self.open_dialog
        )
        menubar.add_cascade(label="File", underline=0, menu=file_menu)
        self.root.config(menu=menubar)

        self.canvas = tk.Canvas(self.root, background=_hex(BACKGROUND), highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        for button in (1, 2, 3):
            self.canvas.bind(f"<ButtonPress-{button}>", self._on_press)
        self.canvas.bind("<B1-Motion>", lambda e: self._on_drag(e, True))
        self.canvas.bind("<B3-Motion>", lambda e: self._on_drag(e, False))
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._zoom(WHEEL_NOTCH))
        self.canvas.bind("<Button-5>", lambda e: self._zoom(-WHEEL_NOTCH))
        self.canvas.bind("<Configure>", lambda e: self.redraw())

    def open_dialog(self) -> None:
        """Ask for a data file and show it, warning if it cannot be used."""
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(
            parent=self.root,
            title="Open Data File",
            filetypes=[("Data Files", "*.dat *.txt"), ("All Files", "*")],
        )
        if not path:
            return
        try:
            self.state.open_file(path)
        except DataFileError as exc:
            log.warning("%s", exc)
            messagebox.showwarning("Error", "Could not parse the data file.", parent=self.root)
            return
        self.redraw()

    def redraw(self) -> None:
        """Repaint the canvas from the current state."""
        self.canvas.delete("all")
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        for disc in self.state.scene(width, height):
            r = max(disc.radius, 0.5)
            fill = _hex(disc.color)
            self.canvas.create_oval(
                disc.x - r, disc.y - r, disc.x + r, disc.y + r, fill=fill, outline=fill
            )

    def run(self) -> None:
        """Enter the event loop until the window closes."""
        self.root.mainloop()

    def _on_press(self, event) -> None:
        self.state.camera.press(event.x, event.y)

    def _on_drag(self, event, left_button: bool) -> None:
        if self.state.camera.drag(event.x, event.y, left_button):
            self.redraw()

    def _on_wheel(self, event) -> None:
        self._zoom(event.delta)

    def _zoom(self, delta: int) -> None:
        if self.state.camera.wheel(delta):
            self.redraw()


def main(argv=None) -> int:
    """Open the viewer window and run it."""
    Viewer().run()
    return 0