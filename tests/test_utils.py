from chromascale.utils import get_dimension
from chromascale.utils.num_utils import round_half_up, clamp_channel, clamp_unit, normalize_hue


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert clamp_channel(127.5) == 128
    assert clamp_channel(-3) == 0
    assert clamp_channel(999) == 255
    assert clamp_unit(1.5) == 1.0


def test_normalize_hue():
    assert normalize_hue(360) == 0
    assert normalize_hue(-30) == 330
    assert normalize_hue(725) == 5
    assert normalize_hue(-1e-17) == 0


def test_get_dimension():
    assert get_dimension(None) == 0
    assert get_dimension(5) == 1
    assert get_dimension("abc") == 1
    assert get_dimension((1, 2, 3)) == 3
