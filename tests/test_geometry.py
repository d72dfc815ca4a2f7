import numpy as np

from morsetree.geometry import segment_distance, segment_distances


CASES = [
    # crossing
    (0.0, 0.0, 1.0, 0.0, 0.5, -1.0, 0.5, 1.0),
    # parallel, offset by 2
    (0.0, 0.0, 1.0, 0.0, 0.0, 2.0, 1.0, 2.0),
    # collinear, overlapping
    (0.0, 0.0, 4.0, 0.0, 2.0, 0.0, 6.0, 0.0),
    # collinear, gap of 3
    (0.0, 0.0, 1.0, 0.0, 4.0, 0.0, 6.0, 0.0),
    # T junction, stem ends 1 below the bar
    (-2.0, 0.0, 2.0, 0.0, 0.0, -1.0, 0.0, -5.0),
    # skew, closest at endpoints
    (0.0, 0.0, 1.0, 1.0, 3.0, 1.0, 5.0, -2.0),
    # first segment degenerate
    (1.0, 3.0, 1.0, 3.0, 0.0, 0.0, 2.0, 0.0),
    # second segment degenerate
    (0.0, 0.0, 2.0, 0.0, 1.0, -4.0, 1.0, -4.0),
    # both degenerate
    (0.0, 0.0, 0.0, 0.0, 3.0, 4.0, 3.0, 4.0),
    # shared endpoint
    (350.0, 380.0, 350.0, 500.0, 350.0, 380.0, 294.5, 313.8),
    # nearly parallel
    (0.0, 0.0, 10.0, 0.0, 0.0, 1.0, 10.0, 1.0 + 1e-9),
]


def test_crossing_segments_touch() -> None:
    assert np.isclose(segment_distance(*CASES[0]), 0.0)


def test_parallel_offset_and_symmetry() -> None:
    d = segment_distance(0.0, 0.0, 1.0, 0.0, 0.0, 2.0, 1.0, 2.0)
    d_swap = segment_distance(0.0, 2.0, 1.0, 2.0, 0.0, 0.0, 1.0, 0.0)
    assert np.isclose(d, 2.0)
    assert np.isclose(d, d_swap)


def test_parallel_segments_shifted_apart() -> None:
    # Parallel but not overlapping along their direction
    d = segment_distance(0.0, 0.0, 1.0, 0.0, 4.0, 4.0, 6.0, 4.0)
    assert np.isclose(d, 5.0)


def test_collinear_overlap_and_gap() -> None:
    assert np.isclose(segment_distance(*CASES[2]), 0.0)
    assert np.isclose(segment_distance(*CASES[3]), 3.0)


def test_t_junction_uses_stem_endpoint() -> None:
    assert np.isclose(segment_distance(*CASES[4]), 1.0)


def test_skew_segments_endpoint_distance() -> None:
    # Closest pair is (1,1) and the point on the second segment nearest to it
    d = segment_distance(*CASES[5])
    d1 = segment_distance(1.0, 1.0, 1.0, 1.0, 3.0, 1.0, 5.0, -2.0)
    assert np.isclose(d, d1)
    assert np.isclose(d, 2.0)


def test_degenerate_segments() -> None:
    assert np.isclose(segment_distance(*CASES[6]), 3.0)
    assert np.isclose(segment_distance(*CASES[7]), 4.0)
    assert np.isclose(segment_distance(*CASES[8]), 5.0)


def test_shared_endpoint_is_zero() -> None:
    assert np.isclose(segment_distance(*CASES[9]), 0.0)


def test_nearly_parallel_is_stable() -> None:
    d = segment_distance(*CASES[10])
    assert np.isfinite(d)
    assert np.isclose(d, 1.0)


def test_vectorized_matches_scalar() -> None:
    for case in CASES:
        first, second = case[:4], np.array([case[4:]])
        vec = segment_distances(*first, second)
        assert vec.shape == (1,)
        assert np.isclose(vec[0], segment_distance(*case))


def test_vectorized_many_rows() -> None:
    rng = np.random.default_rng(7)
    others = rng.uniform(-10.0, 10.0, size=(200, 4))
    others[::17, 2:4] = others[::17, 0:2]
    first = (-1.0, 2.0, 3.0, -0.5)

    expected = np.array([segment_distance(*first, *row) for row in others])
    np.testing.assert_allclose(segment_distances(*first, others), expected, atol=1e-9)

    point = (1.5, 1.5, 1.5, 1.5)
    expected = np.array([segment_distance(*point, *row) for row in others])
    np.testing.assert_allclose(segment_distances(*point, others), expected, atol=1e-9)


def test_vectorized_empty() -> None:
    out = segment_distances(0.0, 0.0, 1.0, 1.0, np.empty((0, 4)))
    assert out.shape == (0,)


def test_long_nearly_parallel_segments_exact() -> None:
    # Branch-sized segments: a*e is ~1e8, so the parallel test must scale with the lengths
    cases = [
        ((0.0, 0.0, 100.0, 0.0, 10.0, 1.0, 110.0, 1.0 + 1e-6), 1.0),
        ((0.0, 0.0, 100.0, 0.0, -50.0, 1.0, 50.0, 1.0 + 1e-6), 1.0 + 5e-7),
    ]
    for case, expected in cases:
        assert np.isclose(segment_distance(*case), expected, rtol=0.0, atol=1e-9)
        vec = segment_distances(*case[:4], np.array([case[4:]]))
        assert np.isclose(vec[0], expected, rtol=0.0, atol=1e-9)
