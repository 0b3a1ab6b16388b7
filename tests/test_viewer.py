import pytest

from glviewer.camera import CameraMode, ProjectionMode
from glviewer.geometry import Vec3
from glviewer.gldata import GLData
from glviewer.viewer import (
    AxesConfig,
    GridConfig,
    MouseButton,
    Primitive,
    Viewer,
    example_config,
)

AXES_VERTICES = 18
START = (900.0, 200.0, 100.0)


def _small_viewer():
    viewer = Viewer()
    viewer.set_grid_config(GridConfig(min_x=0, max_x=100, min_y=0, max_y=100, step=100))
    return viewer


def _example_viewer():
    viewer = _small_viewer()
    viewer.camera.set_config(example_config())
    return viewer


def test_draw_ranges_cover_all_lines():
    viewer = _small_viewer()
    calls = viewer.draw_ranges()
    tris, base, grid, axes = calls
    assert tris.primitive is Primitive.TRIANGLES
    assert tris.count == 0
    assert base.count == grid.first
    assert grid.first + grid.count == axes.first
    assert axes.first + axes.count == viewer.data.line_vertex_count()
    assert axes.count == AXES_VERTICES
    assert (grid.line_width, axes.line_width) == (0.5, 3.0)


def test_grid_config_replaces_grid_without_growing():
    viewer = _small_viewer()
    before = viewer.data.line_vertex_count()
    viewer.set_grid_config(viewer.grid_config)
    assert viewer.data.line_vertex_count() == before


def test_smaller_grid_has_fewer_vertices():
    viewer = _small_viewer()
    before = viewer.data.line_vertex_count()
    viewer.set_grid_config(GridConfig(min_x=0, max_x=0, min_y=0, max_y=0, step=100))
    assert viewer.data.line_vertex_count() < before
    assert viewer.draw_ranges()[3].count == AXES_VERTICES


def test_set_data_keeps_scene_lines_before_grid():
    viewer = _small_viewer()
    scene = GLData()
    scene.add_line(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(1, 1, 1))
    scene.add_triangle(Vec3(), Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1))
    viewer.set_data(scene)
    calls = viewer.draw_ranges()
    assert calls[0].count == 3
    assert calls[1].count == 2
    assert calls[2].first == 2
    assert viewer.data.line_data[:6] == (1, 2, 3, 1, 1, 1)
    assert scene.line_vertex_count() == 2


def test_axes_follow_config():
    viewer = _small_viewer()
    viewer.set_axes_config(AxesConfig(length=50.0))
    start = viewer.draw_ranges()[3].first * 6
    assert viewer.data.line_data[start:start + 12] == (
        -50.0, 0, 0, 1.0, 0.0, 0.0, 50.0, 0, 0, 1.0, 0.0, 0.0,
    )


def test_invalid_grid_step_raises():
    viewer = _small_viewer()
    with pytest.raises(ValueError):
        viewer.set_grid_config(GridConfig(step=0))


def test_toggle_grid_and_axes():
    viewer = _small_viewer()
    viewer.key_press("a")
    assert viewer.draw_axes is False
    assert len(viewer.draw_ranges()) == 3
    viewer.key_press("G")
    assert viewer.draw_grid is False
    assert len(viewer.draw_ranges()) == 2
    viewer.key_press("a")
    assert viewer.draw_axes is True


def test_projection_and_camera_mode_keys():
    viewer = _example_viewer()
    viewer.key_press("o")
    assert viewer.camera.projection_mode is ProjectionMode.ORTHOGRAPHIC
    viewer.key_press("p")
    assert viewer.camera.projection_mode is ProjectionMode.PERSPECTIVE
    viewer.key_press("f")
    assert viewer.camera.camera_mode is CameraMode.FREE
    viewer.key_press("t")
    assert viewer.camera.camera_mode is CameraMode.TARGET


def test_reset_key_restores_translation():
    viewer = _example_viewer()
    viewer.wheel(120)
    viewer.key_press("0")
    assert tuple(viewer.camera.translation) == pytest.approx(START, abs=1e-3)


def test_wheel_moves_along_forward():
    viewer = _example_viewer()
    viewer.wheel(120)
    assert tuple(viewer.camera.translation) == pytest.approx((750.0, 200.0, 100.0), abs=1e-3)


def test_wheel_shift_and_backwards():
    viewer = _example_viewer()
    viewer.wheel(-120, shift=True)
    assert tuple(viewer.camera.translation) == pytest.approx((915.0, 200.0, 100.0), abs=1e-3)


def test_wheel_zero_does_nothing():
    viewer = _example_viewer()
    viewer.wheel(0)
    assert tuple(viewer.camera.translation) == pytest.approx(START, abs=1e-3)


def test_left_drag_in_target_mode_keeps_distance():
    viewer = _example_viewer()
    camera = viewer.camera
    before = (camera.target - camera.translation).length()
    viewer.mouse_press(100, 100)
    viewer.mouse_move(130, 80, MouseButton.LEFT)
    after = (camera.target - camera.translation).length()
    assert after == pytest.approx(before, rel=1e-6)
    assert (camera.translation - Vec3(*START)).length() > 1e-3


def test_middle_drag_shift_moves_quarter():
    plain = _example_viewer()
    plain.mouse_press(0, 0)
    plain.mouse_move(8, 0, MouseButton.MIDDLE)
    slow = _example_viewer()
    slow.mouse_press(0, 0)
    slow.mouse_move(8, 0, MouseButton.MIDDLE, shift=True)
    start = Vec3(*START)
    plain_move = (plain.camera.translation - start).length()
    slow_move = (slow.camera.translation - start).length()
    assert plain_move == pytest.approx(8.0, rel=1e-6)
    assert slow_move == pytest.approx(plain_move / 4, rel=1e-6)


def test_move_without_buttons_keeps_camera():
    viewer = _example_viewer()
    viewer.mouse_press(0, 0)
    viewer.mouse_move(50, 50, MouseButton.NONE)
    assert tuple(viewer.camera.translation) == pytest.approx(START, abs=1e-3)


def test_resize_sets_aspect_ratio():
    viewer = _example_viewer()
    viewer.resize(200, 100)
    projection = viewer.camera.projection
    assert projection[0, 0] == pytest.approx(projection[1, 1] / 2)


def test_resize_zero_height_raises():
    viewer = _small_viewer()
    with pytest.raises(ValueError):
        viewer.resize(100, 0)


def test_example_config_values():
    config = example_config()
    assert config.fov == 45
    assert config.near_plane == 1
    assert config.far_plane == 4000.0
    assert config.initial_translation == Vec3(900, 200, 100)
    assert config.world_up == Vec3(0, 0, 1)
    assert config.camera_mode is CameraMode.TARGET