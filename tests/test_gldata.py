import pytest

from glviewer.gldata import GLData, Sides
from glviewer.geometry import Vec3

U1L, U1R, U2L, U2R = Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(1, 1, 0)


def _vertices(flat):
    return [tuple(flat[i:i + 6]) for i in range(0, len(flat), 6)]


def test_add_line_stores_positions_and_colour():
    data = GLData()
    data.add_line(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(0.5, 0.25, 0.75))
    assert data.line_vertex_count() == 2
    assert data.line_data == (1, 2, 3, 0.5, 0.25, 0.75, 4, 5, 6, 0.5, 0.25, 0.75)
    assert data.triangle_vertex_count() == 0


def test_add_triangle():
    data = GLData()
    data.add_triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(1, 0, 0))
    assert data.triangle_vertex_count() == 3
    assert _vertices(data.triangle_data)[1] == (1, 0, 0, 1, 0, 0)


def test_resize_truncates_and_pads():
    data = GLData()
    for i in range(3):
        data.add_line(Vec3(i, 0, 0), Vec3(i, 1, 0), Vec3(1, 1, 1))
    data.resize_line_vertex_count(2)
    assert data.line_vertex_count() == 2
    assert _vertices(data.line_data)[1] == (0, 1, 0, 1, 1, 1)
    data.resize_line_vertex_count(4)
    assert data.line_vertex_count() == 4
    assert _vertices(data.line_data)[3] == (0.0,) * 6


def test_full_cuboid_has_twelve_triangles():
    data = GLData()
    data.add_cuboid(U1L, U1R, U2L, U2R, 2.0, 0.0, 0.0)
    assert data.triangle_vertex_count() == 36
    assert Sides.ALL == (Sides.LEFT | Sides.RIGHT | Sides.FRONT
                         | Sides.BACK | Sides.TOP | Sides.BOTTOM)


def test_no_sides_adds_nothing():
    data = GLData()
    data.add_cuboid(U1L, U1R, U2L, U2R, 2.0, 0.3, 0.4, Sides.NONE)
    assert data.triangle_vertex_count() == 0


def test_top_uses_green_fraction_colour():
    data = GLData()
    data.add_cuboid(U1L, U1R, U2L, U2R, 2.0, 0.25, 0.5, Sides.TOP)
    vertices = _vertices(data.triangle_data)
    assert len(vertices) == 6
    assert all(v[3:] == pytest.approx((0.0, 0.75, 0.5)) for v in vertices)
    assert all(v[2] == 0 for v in vertices)


def test_bottom_is_offset_by_thickness():
    thickness = 2.0
    data = GLData()
    data.add_cuboid(U1L, U1R, U2L, U2R, thickness, 0.0, 0.5, Sides.BOTTOM)
    vertices = _vertices(data.triangle_data)
    assert len(vertices) == 6
    assert all(abs(v[2]) == pytest.approx(thickness) for v in vertices)
    assert all(v[3:] == pytest.approx((1.0, 0.0, 0.5)) for v in vertices)


def test_side_faces_span_top_and_bottom():
    data = GLData()
    data.add_cuboid(U1L, U1R, U2L, U2R, 3.0, 0.0, 0.0, Sides.LEFT | Sides.RIGHT)
    vertices = _vertices(data.triangle_data)
    assert len(vertices) == 12
    depths = {round(abs(v[2]), 6) for v in vertices}
    assert depths == {0.0, 3.0}


def test_copy_is_independent():
    data = GLData()
    data.add_line(U1L, U1R, Vec3(1, 0, 0))
    duplicate = data.copy()
    duplicate.add_line(U2L, U2R, Vec3(0, 1, 0))
    assert data.line_vertex_count() == 2
    assert duplicate.line_vertex_count() == 4