import pytest

from fractol.mlx.colornames import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("blue", 0xFF),
        ("navy", 0x80),
        ("darkred", 0x8B0000),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW", "Ghost White"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color(name.lower())


def test_repeated_name_keeps_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_scale_endpoints():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


def test_gray_scale_is_monotonic():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)


def test_spaced_and_joined_forms_agree():
    assert lookup_color("alice blue") == lookup_color("aliceblue")
    assert lookup_color("light green") == lookup_color("lightgreen")


def test_numbered_variant_one_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("not-a-colour")


def test_empty_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("")