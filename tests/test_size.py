import pytest

from lsmeta.size import Size, SizeFlag, Unit

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB


def test_render_byte():
    size = Size(42)
    assert size.value_string(SizeFlag.DEFAULT) == "42"
    assert size.unit_string(SizeFlag.DEFAULT) == "B"
    assert size.unit_string(SizeFlag.SHORT) == "B"
    assert size.unit_string(SizeFlag.BYTES) == ""


@pytest.mark.parametrize(
    "nbytes, value, long_unit, short_unit",
    [
        (4 * KB, "4.0", "KB", "K"),
        (42 * KB, "42", "KB", "K"),
        (420 * KB + 420, "420", "KB", "K"),
        (4 * MB, "4.0", "MB", "M"),
        (42 * MB, "42", "MB", "M"),
        (420 * MB + 420 * KB, "420", "MB", "M"),
        (4 * GB, "4.0", "GB", "G"),
        (42 * GB, "42", "GB", "G"),
        (420 * GB + 420 * MB, "420", "GB", "G"),
        (4 * TB, "4.0", "TB", "T"),
        (42 * TB, "42", "TB", "T"),
        (420 * TB + 420 * GB, "420", "TB", "T"),
    ],
)
def test_render_units(nbytes, value, long_unit, short_unit):
    size = Size(nbytes)
    assert size.value_string(SizeFlag.DEFAULT) == value
    assert size.unit_string(SizeFlag.DEFAULT) == long_unit
    assert size.unit_string(SizeFlag.SHORT) == short_unit


def test_render_with_a_fraction():
    size = Size(42 * KB + 103)
    assert size.value_string() == "42"
    assert size.unit_string() == "KB"


def test_render_with_a_truncated_fraction():
    size = Size(42 * KB + 1)
    assert size.value_string() == "42"
    assert size.unit_string() == "KB"


def test_render_short_nospaces():
    size = Size(42 * KB)
    assert size.render(SizeFlag.SHORT, 2) == "42K"
    assert size.render(SizeFlag.SHORT, 3) == " 42K"


def test_render_default_has_space():
    assert Size(42 * KB).render() == "42 KB"


def test_render_bytes_flag_keeps_raw_value():
    size = Size(42 * KB)
    assert size.unit(SizeFlag.BYTES) is Unit.BYTE
    assert size.value_string(SizeFlag.BYTES) == "43008"
    assert size.render(SizeFlag.BYTES) == "43008 "


def test_render_alignment_too_narrow():
    with pytest.raises(ValueError):
        Size(42 * KB).render(SizeFlag.SHORT, 1)


def test_small_fraction_has_one_decimal():
    assert Size(KB + 512).value_string() == "1.5"


@pytest.mark.parametrize(
    "nbytes, unit",
    [
        (0, Unit.BYTE),
        (1023, Unit.BYTE),
        (1024, Unit.KILO),
        (MB - 1, Unit.KILO),
        (MB, Unit.MEGA),
        (GB, Unit.GIGA),
        (TB, Unit.TERA),
    ],
)
def test_unit_boundaries(nbytes, unit):
    assert Size(nbytes).unit() is unit


def test_from_stat(tmp_path):
    path = tmp_path / "five.bin"
    path.write_bytes(b"12345")
    assert Size.from_stat(path.stat()).bytes == 5


def test_sizes_order_by_bytes():
    assert sorted([Size(10), Size(2), Size(7)]) == [Size(2), Size(7), Size(10)]