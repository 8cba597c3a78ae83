import math

import pytest

from colorhub import Hue, HueRangeError, Oklch
from colorhub.colors.hue import ZERO_HUE


def test_degrees_round_trip():
    for tenths in range(0, 3600, 7):
        d = tenths / 10
        assert abs(Hue.from_degrees(d).to_degrees() - d) < 1e-9

def test_to_degrees_range():
    for d in (0.0, 0.001, 179.999, 180.0, 180.001, 359.999, 360.0):
        out = Hue.from_degrees(d).to_degrees()
        assert 0.0 <= out < 360.0

def test_full_turn_is_zero():
    assert Hue.from_degrees(360.0) == Hue.from_degrees(0.0)
    assert Hue.from_degrees(360.0).to_degrees() == 0.0

def test_storage_is_shifted_half_turn():
    assert Hue.from_degrees(180.0).unnormalized_radians == pytest.approx(math.pi)
    assert Hue.from_degrees(270.0).unnormalized_radians == pytest.approx(-math.pi / 2)
    assert Hue.from_degrees(90.0).unnormalized_radians == pytest.approx(math.pi / 2)

def test_seam_values_stay_small():
    just_below = Hue.from_degrees(359.999).to_radians()
    just_above = Hue.from_degrees(0.001).to_radians()
    assert abs(just_below) < 1e-4
    assert abs(just_above) < 1e-4

@pytest.mark.parametrize("bad", [-0.001, -90.0, 360.001, 720.0, math.inf, -math.inf, math.nan])
def test_out_of_range_rejected(bad):
    with pytest.raises(HueRangeError):
        Hue.from_degrees(bad)

def test_range_error_is_value_error():
    with pytest.raises(ValueError, match=r"\[0, 360\]"):
        Hue.from_degrees(400.0)

def test_wrapped_constructor():
    assert abs(Hue.from_degrees_wrapped(370.0).to_degrees() - 10.0) < 1e-9
    assert abs(Hue.from_degrees_wrapped(-90.0).to_degrees() - 270.0) < 1e-9
    assert Hue.from_degrees_wrapped(720.0).to_degrees() < 1e-9
    assert abs(Hue.from_degrees_wrapped(45.0).to_degrees() - 45.0) < 1e-9

def test_wrapped_constructor_rejects_non_finite():
    with pytest.raises(HueRangeError):
        Hue.from_degrees_wrapped(math.nan)
    with pytest.raises(HueRangeError):
        Hue.from_degrees_wrapped(math.inf)

def test_from_radians_normalizes():
    assert abs(Hue.from_radians(3 * math.pi / 2).to_degrees() - 270.0) < 1e-9
    assert abs(Hue.from_radians(-math.pi).to_degrees() - 180.0) < 1e-9
    assert Hue.from_radians(-math.pi).to_radians() == pytest.approx(math.pi)
    assert abs(Hue.from_radians(5 * math.pi).to_degrees() - 180.0) < 1e-9

def test_immutable():
    hue = Hue.from_degrees(10.0)
    with pytest.raises(AttributeError):
        hue._radians = 1.0

def test_equality_ordering_hash():
    assert Hue.from_degrees(10.0) == Hue.from_degrees(10.0)
    assert Hue.from_degrees(10.0) < Hue.from_degrees(20.0)
    # 270 degrees is stored as -90
    assert Hue.from_degrees(270.0) < Hue.from_degrees(10.0)
    assert len({Hue.from_degrees(10.0), Hue.from_degrees(10.0)}) == 1
    assert ZERO_HUE == Hue.from_degrees(0.0)

def test_seam_is_continuous_through_oklch():
    below = Oklch(0.7, 0.1, Hue.from_degrees(359.9999)).to_oklab()
    above = Oklch(0.7, 0.1, Hue.from_degrees(0.0001)).to_oklab()
    zero = Oklch(0.7, 0.1, Hue.from_degrees(0.0)).to_oklab()
    full = Oklch(0.7, 0.1, Hue.from_degrees(360.0)).to_oklab()

    assert abs(below.a - above.a) < 1e-9
    assert abs(below.b - above.b) < 1e-6
    assert zero == full
    assert abs(zero.a - 0.1) < 1e-12
    assert zero.b == 0.0

def test_half_turn_through_oklch():
    lab = Oklch(0.7, 0.1, Hue.from_degrees(180.0)).to_oklab()
    assert abs(lab.a + 0.1) < 1e-12
    assert abs(lab.b) < 1e-12

def test_constructor_normalizes_radians():
    hue = Hue(10.0)
    assert -math.pi < hue.to_radians() <= math.pi
    assert hue == Hue.from_radians(10.0)
    expected = math.degrees(10.0 - 4 * math.pi) + 360.0
    assert abs(hue.to_degrees() - expected) < 1e-9
    assert Hue(-math.pi).to_radians() == math.pi
    assert Hue(2 * math.pi).to_degrees() < 1e-9

def test_raw_hue_agrees_with_trig_through_oklch():
    lch = Oklch(0.5, 0.1, Hue(4.0))
    back = lch.to_oklab().to_oklch()
    assert abs(back.h.to_degrees() - lch.h.to_degrees()) < 1e-9
