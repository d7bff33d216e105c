import pytest

from curve_eval import Circle, Ellipse, Helix, InvalidParameter
from curve_gen import generate_curves, make_rng


class ScriptedRng:
    """Replays fixed draws: uniform() values and integers() selectors."""

    def __init__(self, uniforms, selectors):
        self.uniforms = list(uniforms)
        self.selectors = list(selectors)

    def uniform(self, low, high):
        return self.uniforms.pop(0)

    def integers(self, high):
        return self.selectors.pop(0)


def test_count_and_types():
    rng, _ = make_rng(1234)
    curves = generate_curves(rng)
    assert len(curves) == 5
    assert all(c.kind in ('CIRCLE', 'ELLIPSE', 'HELIX') for c in curves)


def test_same_seed_same_curves():
    a = generate_curves(make_rng(7)[0], count=20)
    b = generate_curves(make_rng(7)[0], count=20)
    assert a == b


def test_make_rng_returns_seed():
    _, seed = make_rng(99)
    assert seed == 99
    _, seed = make_rng()
    assert isinstance(seed, int)


def test_parameters_within_ranges():
    curves = generate_curves(make_rng(3)[0], count=200)
    for c in curves:
        if c.kind == 'ELLIPSE':
            assert 1.0 <= c.major < 11.0
            assert c.minor == pytest.approx(0.5 * c.major)
        elif c.kind == 'HELIX':
            assert 1.0 <= c.radius < 11.0
            assert 1.0 <= c.step < 6.0
        else:
            assert 1.0 <= c.radius < 11.0


def test_all_variants_drawn():
    kinds = {c.kind for c in generate_curves(make_rng(5)[0], count=100)}
    assert kinds == {'CIRCLE', 'ELLIPSE', 'HELIX'}


def test_draw_order_radius_step_selector():
    rng = ScriptedRng(uniforms=[2.0, 1.5, 4.0, 3.5, 3.0, 1.0], selectors=[0, 1, 2])
    curves = generate_curves(rng, count=3)
    assert curves == [Circle(2.0), Ellipse(4.0, 2.0), Helix(3.0, 1.0)]


def test_zero_count():
    assert generate_curves(make_rng(1)[0], count=0) == []


def test_misconfigured_range_raises():
    with pytest.raises(InvalidParameter):
        generate_curves(make_rng(1)[0], count=5, radius_range=(-10.0, -1.0))
