import pytest

from fixed8.fixed import Fixed, format_float


def test_default_is_zero():
    assert Fixed().raw == 0
    assert Fixed().to_int() == 0


def test_int_constructor_scales_by_256():
    assert Fixed(10).raw == 10 << 8
    assert Fixed(10).to_int() == 10
    assert Fixed(-3).to_float() == -3.0


def test_copy_constructor_keeps_raw():
    original = Fixed(42.42)
    assert Fixed(original).raw == original.raw
    assert Fixed(original) == original


def test_float_constructor_is_close():
    value = Fixed(42.42)
    assert value.to_int() == 42
    assert abs(value.to_float() - 42.42) <= 1 / 512


@pytest.mark.parametrize("raw", [0, 1, -1, 255, 256, -(1 << 31), (1 << 31) - 1])
def test_from_raw_round_trip(raw):
    assert Fixed.from_raw(raw).raw == raw


def test_from_raw_float_value():
    assert Fixed.from_raw(1).to_float() == 1 / 256


def test_float_rounds_half_away_from_zero():
    assert Fixed(1 / 512).raw == 1
    assert Fixed(-1 / 512).raw == -1


def test_int_shift_wraps_like_32_bit():
    assert Fixed(1 << 23).raw == -(1 << 31)


def test_out_of_range_and_bad_inputs():
    with pytest.raises(OverflowError):
        Fixed(1 << 31)
    with pytest.raises(OverflowError):
        Fixed.from_raw(1 << 31)
    with pytest.raises(OverflowError):
        Fixed(1e20)
    with pytest.raises(ValueError):
        Fixed(float("nan"))
    with pytest.raises(TypeError):
        Fixed("1")


def test_add_and_sub_work_on_raw():
    a, b = Fixed(1.5), Fixed(2.25)
    assert (a + b).raw == a.raw + b.raw
    assert (a - b).raw == a.raw - b.raw
    assert (a + b) - b == a


def test_mul_and_div_identity():
    x = Fixed(42.42)
    assert x * Fixed(1) == x
    assert x / Fixed(1) == x


def test_integer_products():
    assert Fixed(3) * Fixed(4) == Fixed(12)
    assert Fixed(12) / Fixed(4) == Fixed(3)


def test_division_truncates_toward_zero():
    assert (Fixed.from_raw(-1) / Fixed(2)).raw == 0


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Fixed(1) / Fixed()


def test_arithmetic_accepts_numbers():
    assert Fixed(2) + 3 == Fixed(5)
    assert Fixed(2) * 1.5 == Fixed(3)


def test_comparisons():
    small, big = Fixed(0.125), Fixed(4242.4242)
    assert small < big
    assert small <= big
    assert big > small
    assert big >= small
    assert small != big
    assert small == Fixed(0.125)


def test_ordering_with_other_types_raises():
    with pytest.raises(TypeError):
        Fixed(1) < "x"


def test_min_max_prefer_first_on_tie():
    a, b = Fixed(1), Fixed(1)
    assert Fixed.min(a, b) is a
    assert Fixed.max(a, b) is a


def test_min_max_pick_values():
    low, high = Fixed(-2), Fixed(7.5)
    assert Fixed.min(high, low) is low
    assert Fixed.max(low, high) is high


def test_increment_and_decrement_are_pure():
    zero = Fixed()
    assert zero.increment().raw == 1
    assert zero.decrement().raw == -1
    assert zero.increment().decrement() == zero
    assert zero.raw == 0


def test_to_int_floors_negatives():
    assert Fixed.from_raw(-1).to_int() == -1
    assert int(Fixed(-3)) == -3


def test_float_conversion_matches_to_float():
    x = Fixed(1234.4321)
    assert float(x) == x.to_float()


def test_str_and_format():
    assert str(Fixed(10)) == "10"
    assert str(Fixed.from_raw(1)) == "0.00390625"
    assert format_float(1234.43359375) == "1234.43"


def test_repr():
    assert repr(Fixed(1)) == "Fixed.from_raw(256)"


def test_hash_consistent_with_eq():
    assert hash(Fixed(1)) == hash(Fixed(1.0))
    assert len({Fixed(1), Fixed(1.0), Fixed(2)}) == 2