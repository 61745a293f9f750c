from inquest.list_option import ListOption


def test_fields_hold_given_values():
    option = ListOption(3, "d")
    assert option.index == 3
    assert option.value == "d"


def test_str_displays_value_only():
    assert str(ListOption(0, "Banana")) == "Banana"
    assert str(ListOption(5, 42)) == "42"


def test_equality_depends_on_index_and_value():
    assert ListOption(1, "b") == ListOption(1, "b")
    assert ListOption(1, "b") != ListOption(2, "b")
    assert ListOption(1, "b") != ListOption(1, "c")


def test_formatting_in_fstring_uses_value():
    option = ListOption(0, "Apple")
    assert f"{option}!" == "Apple!"