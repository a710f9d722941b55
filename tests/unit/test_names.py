import pytest

from support_log_formatter.formatting import abbreviate_class_name


@pytest.mark.parametrize(
    "name,width,expected",
    [
        (None, 32, "-"),
        ("some.pkg.Catcher", 32, "some.pkg.Catcher"),
        ("abc.def", 7, "abc.def"),
        ("VeryLongClassNameWithoutPackage", 10, "VeryLongClassNameWithoutPackage"),
        ("org.example.deeply.nested.package.ClassName", 32, "o.e.d.nested.package.ClassName"),
        ("org.example.deeply.nested.package.ClassName", 40, "o.e.deeply.nested.package.ClassName"),
        ("alpha.beta.Gamma", 5, "a.b.Gamma"),
        ("a..b.LongClassName", 5, "a..b.LongClassName"),
    ],
)
def test_abbreviate_class_name(name, width, expected):
    assert abbreviate_class_name(name, width) == expected


def test_only_first_sixteen_dots_are_shortened():
    name = ".".join(["segment"] * 20) + ".Last"
    expected = "s." * 16 + "segment.segment.segment.segment.Last"
    assert abbreviate_class_name(name, 10) == expected


@pytest.mark.parametrize("width", [0, -5])
def test_target_width_must_be_positive(width):
    with pytest.raises(ValueError):
        abbreviate_class_name("some.pkg.Catcher", width)
