import pytest

from sphereview.app import ViewerState
from sphereview.datafile import DataFileError, Point


def _write(tmp_path, name, body):
    path = tmp_path / name
    path.write_text("h1\nh2\nh3\n" + body, encoding="utf-8")
    return path


def test_open_file_loads_points_and_fits_camera(tmp_path):
    state = ViewerState()
    state.open_file(_write(tmp_path, "a.dat", "0 0 0\n0.5 0 0\n"))
    assert state.points == [Point(0.0, 0.0, 0.0), Point(0.5, 0.0, 0.0)]
    assert state.camera.zoom == -2.0


def test_failed_open_keeps_previous_data(tmp_path):
    state = ViewerState()
    state.open_file(_write(tmp_path, "a.dat", "1 1 1\n"))
    before = (list(state.points), state.camera.zoom)
    with pytest.raises(DataFileError):
        state.open_file(_write(tmp_path, "b.dat", "garbage\n"))
    assert (state.points, state.camera.zoom) == before


def test_scene_without_data_is_empty():
    assert ViewerState().scene(800, 600) == []


def test_scene_has_one_disc_per_visible_point(tmp_path):
    state = ViewerState()
    state.open_file(_write(tmp_path, "c.dat", "0 0 0\n1 0 0\n-1 0 0\n"))
    discs = state.scene(800, 600)
    assert len(discs) == 3
    assert sorted(d.x for d in discs)[1] == pytest.approx(400.0)