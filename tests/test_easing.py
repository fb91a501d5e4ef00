import pytest

from betterwall import easing

NAMED_CURVES = [
    "linear",
    "easeIn", "easeOut", "easeInOut",
    "easeInCubic", "easeOutCubic", "easeInOutCubic",
    "easeInSine", "easeOutSine", "easeInOutSine",
    "easeInExpo", "easeOutExpo", "easeInOutExpo",
    "easeInCirc", "easeOutCirc", "easeInOutCirc",
    "easeInBack", "easeOutBack", "easeInOutBack",
    "easeInElastic", "easeOutElastic", "easeInOutElastic",
    "easeInBounce", "easeOutBounce", "easeInOutBounce",
]

IN_OUT_NAMES = [
    "easeInOut", "easeInOutCubic", "easeInOutSine", "easeInOutExpo",
    "easeInOutCirc", "easeInOutBack", "easeInOutElastic", "easeInOutBounce",
]

MIRROR_NAME_PAIRS = [
    ("easeIn", "easeOut"),
    ("easeInCubic", "easeOutCubic"),
    ("easeInSine", "easeOutSine"),
    ("easeInExpo", "easeOutExpo"),
    ("easeInCirc", "easeOutCirc"),
    ("easeInBack", "easeOutBack"),
    ("easeInBounce", "easeOutBounce"),
]


@pytest.mark.parametrize("name", NAMED_CURVES)
def test_endpoints_are_fixed(name):
    assert easing.get_by_name(name)(0.0) == pytest.approx(0.0, abs=1e-9)
    assert easing.get_by_name(name)(1.0) == pytest.approx(1.0, abs=1e-9)


def test_quart_endpoints_are_fixed():
    assert easing.ease_in_quart(0.0) == pytest.approx(0.0, abs=1e-9)
    assert easing.ease_in_quart(1.0) == pytest.approx(1.0, abs=1e-9)
    assert easing.ease_out_quart(0.0) == pytest.approx(0.0, abs=1e-9)
    assert easing.ease_out_quart(1.0) == pytest.approx(1.0, abs=1e-9)
    assert easing.ease_in_out_quart(0.0) == pytest.approx(0.0, abs=1e-9)
    assert easing.ease_in_out_quart(1.0) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("name", IN_OUT_NAMES)
def test_in_out_curves_pass_through_midpoint(name):
    assert easing.get_by_name(name)(0.5) == pytest.approx(0.5, abs=1e-9)


def test_quart_in_out_passes_through_midpoint():
    assert easing.ease_in_out_quart(0.5) == pytest.approx(0.5, abs=1e-9)


@pytest.mark.parametrize("in_name, out_name", MIRROR_NAME_PAIRS)
@pytest.mark.parametrize("progress", [0.1, 0.3, 0.6, 0.85])
def test_out_curve_mirrors_in_curve(in_name, out_name, progress):
    mirrored = 1.0 - easing.get_by_name(in_name)(1.0 - progress)
    assert easing.get_by_name(out_name)(progress) == pytest.approx(mirrored, abs=1e-9)


@pytest.mark.parametrize("progress", [0.1, 0.3, 0.6, 0.85])
def test_quart_out_mirrors_quart_in(progress):
    mirrored = 1.0 - easing.ease_in_quart(1.0 - progress)
    assert easing.ease_out_quart(progress) == pytest.approx(mirrored, abs=1e-9)


@pytest.mark.parametrize(
    "curve",
    [easing.ease_in_quad, easing.ease_out_cubic, easing.ease_in_out_sine, easing.ease_out_circ],
)
def test_simple_curves_are_monotonic(curve):
    samples = [curve(step / 50) for step in range(51)]
    assert samples == sorted(samples)


def test_back_curve_undershoots():
    assert easing.ease_in_back(0.2) < 0.0
    assert easing.ease_out_back(0.8) > 1.0


def test_linear_is_identity():
    for value in (0.0, 0.25, 0.77, 1.0):
        assert easing.linear(value) == value


@pytest.mark.parametrize("progress", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
def test_cubic_bezier_on_diagonal_is_linear(progress):
    curve = easing.cubic_bezier(0.3, 0.3, 0.7, 0.7)
    assert curve(progress) == pytest.approx(progress, abs=1e-6)


def test_cubic_bezier_corner_points_are_linear():
    curve = easing.cubic_bezier(0.0, 0.0, 1.0, 1.0)
    for progress in (0.0, 0.2, 0.5, 0.8, 1.0):
        assert curve(progress) == pytest.approx(progress, abs=1e-6)


def test_cubic_bezier_ease_curve_endpoints_and_order():
    curve = easing.cubic_bezier(0.25, 0.1, 0.25, 1.0)
    assert curve(0.0) == pytest.approx(0.0, abs=1e-9)
    assert curve(1.0) == pytest.approx(1.0, abs=1e-9)
    samples = [curve(step / 20) for step in range(21)]
    assert samples == sorted(samples)
    assert curve(0.5) > 0.5


def test_get_by_name_resolves_aliases():
    assert easing.get_by_name("linear") is easing.linear
    assert easing.get_by_name("ease-in") is easing.ease_in_quad
    assert easing.get_by_name("easeIn") is easing.ease_in_quad
    assert easing.get_by_name("ease-out") is easing.ease_out_quad
    assert easing.get_by_name("ease-in-out") is easing.ease_in_out_quad
    assert easing.get_by_name("easeOutBounce") is easing.ease_out_bounce


def test_get_by_name_falls_back_to_ease_in_out_quad():
    assert easing.get_by_name("no-such-curve") is easing.ease_in_out_quad
    assert easing.get_by_name("") is easing.ease_in_out_quad


def test_available_names_map_to_distinct_curves():
    names = easing.available_names()
    curves = {easing.get_by_name(name) for name in names}
    assert len(curves) == len(names)
    assert names[0] == "linear"


def test_available_names_returns_a_copy():
    names = easing.available_names()
    names.clear()
    assert easing.available_names()


def test_elastic_curves_stay_bounded():
    for step in range(101):
        value = easing.ease_in_out_elastic(step / 100)
        assert -0.5 <= value <= 1.5