import math

import numpy as np
import pytest

from wren.math import (
    deg_to_rad,
    identity,
    multiply,
    rad_to_deg,
    rotate_points,
    scale,
    scaling,
    transform_points,
    translate,
    translation,
    x_rotate,
    x_rotation,
    y_rotate,
    y_rotation,
    z_rotate,
    z_rotation,
)


def test_identity_is_multiplicative_identity(composite_matrix):
    np.testing.assert_allclose(multiply(identity(), composite_matrix), composite_matrix)
    np.testing.assert_allclose(multiply(composite_matrix, identity()), composite_matrix)


def test_identity_has_sixteen_entries():
    m = identity()
    assert m.shape == (4, 4)
    assert m.ravel().tolist() == [
        1, 0, 0, 0,
        0, 1, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    ]


def test_translation_lives_in_bottom_row():
    m = translation(1.0, 2.0, 3.0)
    assert m.ravel()[12:].tolist() == [1.0, 2.0, 3.0, 1.0]


def test_inverse_translation_round_trip():
    m = translate(translate(identity(), 0.7, -1.3, 2.5), -0.7, 1.3, -2.5)
    np.testing.assert_allclose(m, identity(), rtol=0.0, atol=1e-12)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 7, 12])
def test_z_rotate_full_turn_returns_to_start(composite_matrix, k):
    m = composite_matrix
    for _ in range(k):
        m = z_rotate(m, 2.0 * math.pi / k)
    np.testing.assert_allclose(m, composite_matrix, rtol=0.0, atol=1e-12)


def test_z_rotation_row_layout():
    """Rows are [c, s] / [-s, c], the transpose of the textbook form."""
    a = 0.3
    c, s = math.cos(a), math.sin(a)
    m = z_rotation(a)
    np.testing.assert_allclose(m[0], [c, s, 0.0, 0.0])
    np.testing.assert_allclose(m[1], [-s, c, 0.0, 0.0])


def test_z_rotation_turns_points_counter_clockwise():
    out = transform_points(np.array([[1.0, 0.0]]), z_rotation(math.pi / 2))
    np.testing.assert_allclose(out, [[0.0, 1.0]], rtol=0.0, atol=1e-12)


def test_x_and_y_rotation_layout():
    a = 0.4
    c, s = math.cos(a), math.sin(a)
    np.testing.assert_allclose(x_rotation(a)[1], [0.0, c, s, 0.0])
    np.testing.assert_allclose(x_rotation(a)[2], [0.0, -s, c, 0.0])
    np.testing.assert_allclose(y_rotation(a)[0], [c, 0.0, -s, 0.0])
    np.testing.assert_allclose(y_rotation(a)[2], [s, 0.0, c, 0.0])


def test_multiply_returns_b_times_a():
    a = translation(1.0, 0.0, 0.0)
    b = z_rotation(math.pi / 3)
    np.testing.assert_allclose(multiply(a, b), b @ a)


def test_multiply_order_changes_result():
    t = translation(1.0, 0.0, 0.0)
    r = z_rotation(math.pi / 2)
    assert not np.allclose(multiply(t, r), multiply(r, t))


def test_translate_then_rotate_rotates_about_local_origin():
    # translate(identity) then z_rotate: the point spins first, then moves.
    m = z_rotate(translate(identity(), 1.0, 0.0, 0.0), math.pi / 2)
    out = transform_points(np.array([[1.0, 0.0]]), m)
    np.testing.assert_allclose(out, [[1.0, 1.0]], rtol=0.0, atol=1e-12)


def test_helpers_match_multiply(composite_matrix):
    m = composite_matrix
    np.testing.assert_allclose(translate(m, 1, 2, 3), multiply(m, translation(1, 2, 3)))
    np.testing.assert_allclose(x_rotate(m, 0.2), multiply(m, x_rotation(0.2)))
    np.testing.assert_allclose(y_rotate(m, 0.2), multiply(m, y_rotation(0.2)))
    np.testing.assert_allclose(z_rotate(m, 0.2), multiply(m, z_rotation(0.2)))
    np.testing.assert_allclose(scale(m, 2, 3, 4), multiply(m, scaling(2, 3, 4)))


def test_degenerate_scaling_is_allowed():
    flat = scaling(0.0, 1.0, 1.0)
    assert np.linalg.det(flat) == 0.0

    mirrored = scale(identity(), -1.0, 1.0, 1.0)
    out = transform_points(np.array([[2.0, 3.0]]), mirrored)
    np.testing.assert_allclose(out, [[-2.0, 3.0]])


def test_composite_leaves_w_at_one(composite_matrix):
    # Last column of an affine matrix is (0, 0, 0, 1).
    np.testing.assert_array_equal(composite_matrix[:, 3], [0.0, 0.0, 0.0, 1.0])
    points = np.array([[0.5, -1.0], [2.0, 3.0]])
    homo = np.array([[0.5, -1.0, 0.0, 1.0], [2.0, 3.0, 0.0, 1.0]])
    np.testing.assert_allclose(
        transform_points(points, composite_matrix), (homo @ composite_matrix)[:, :2]
    )


def test_matrices_are_read_only(composite_matrix):
    m = identity()
    with pytest.raises(ValueError):
        m[0, 0] = 5.0

    before = composite_matrix.copy()
    translate(composite_matrix, 1.0, 1.0, 1.0)
    np.testing.assert_array_equal(composite_matrix, before)


def test_rotate_points_about_pivot():
    pts = np.array([[2.0, 1.0]])
    out = rotate_points(pts, math.pi, pivot=(1.0, 1.0))
    np.testing.assert_allclose(out, [[0.0, 1.0]], rtol=0.0, atol=1e-12)


def test_rotate_points_zero_angle_returns_copy():
    pts = np.array([[2.0, 1.0]])
    out = rotate_points(pts, 0.0)
    np.testing.assert_array_equal(out, pts)
    assert out is not pts


def test_degree_conversion():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)
    assert rad_to_deg(math.pi / 2) == pytest.approx(90.0)
