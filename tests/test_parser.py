import pytest

from inquest.parser import default_bool_parser, parse_type


@pytest.mark.parametrize("text", ["yes", "y", "YES", "Y", "yEs", "YeS"])
def test_valid_yes_inputs(text):
    assert default_bool_parser(text) is True


@pytest.mark.parametrize("text", ["yess", "ye", "yea", "1", "si", "s", "sim", "simm"])
def test_invalid_yes_inputs(text):
    with pytest.raises(ValueError):
        default_bool_parser(text)


@pytest.mark.parametrize("text", ["no", "n", "NO", "N", "nO", "No"])
def test_valid_no_inputs(text):
    assert default_bool_parser(text) is False


@pytest.mark.parametrize("text", ["noo", "nao", "0", "naoo", "não"])
def test_invalid_no_inputs(text):
    with pytest.raises(ValueError):
        default_bool_parser(text)


def test_parse_type_float_success():
    parser = parse_type(float)
    assert parser("32.44") == 32.44
    assert parser("11e15") == 11e15


@pytest.mark.parametrize("text", ["32f", "11^2"])
def test_parse_type_float_failure(text):
    parser = parse_type(float)
    with pytest.raises(ValueError):
        parser(text)


def test_parse_type_int():
    parser = parse_type(int)
    assert parser("17") == 17
    with pytest.raises(ValueError):
        parser("seventeen")