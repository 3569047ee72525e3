import pytest

from qcc.validators import DateValidator, HexValidator, State

SAMPLE = "15.06.2021 12:30:45"


def test_default_format_and_mask():
    v = DateValidator()
    assert v.format == "dd.MM.yyyy hh:mm:ss"
    assert v.input_mask == "NN.NN.NNNN NN:NN:NN;_"


def test_valid_date_is_acceptable():
    state, text = DateValidator().validate(SAMPLE)
    assert state is State.ACCEPTABLE
    assert text == SAMPLE


def test_impossible_date_is_intermediate():
    state, text = DateValidator().validate("31.02.2020 10:00:00")
    assert state is State.INTERMEDIATE
    assert text == "31.02.2020 10:00:00"


def test_short_input_is_intermediate_and_unchanged():
    state, text = DateValidator().validate("01.01")
    assert state is State.INTERMEDIATE
    assert text == "01.01"


def test_wrong_characters_are_replaced_with_format_characters():
    state, text = DateValidator().validate("0a.01.2020 10:00:00")
    assert state is State.INTERMEDIATE
    assert text == "0d.01.2020 10:00:00"


@pytest.mark.parametrize("pos", range(len(DateValidator.DEFAULT_FORMAT) + 1))
def test_up_then_down_round_trips(pos):
    v = DateValidator()
    assert v.down(v.up(SAMPLE, pos), pos) == SAMPLE


def test_up_day():
    assert DateValidator().up(SAMPLE, 0) == "16.06.2021 12:30:45"


def test_up_second_rolls_over_year():
    assert DateValidator().up("31.12.2021 23:59:59", 18) == "01.01.2022 00:00:00"


def test_position_at_end_uses_last_field():
    v = DateValidator()
    end = len(v.format)
    assert v.up(SAMPLE, end) == v.up(SAMPLE, end - 1)


def test_up_on_separator_keeps_text():
    assert DateValidator().up(SAMPLE, 2) == SAMPLE


@pytest.mark.parametrize("pos", [-1, 100])
def test_out_of_range_position_returns_input(pos):
    assert DateValidator().up(SAMPLE, pos) == SAMPLE


def test_invalid_date_is_not_stepped():
    assert DateValidator().up("99.99.2021 12:30:45", 0) == "99.99.2021 12:30:45"


def test_month_step_gives_valid_date():
    v = DateValidator()
    result = v.up("31.01.2021 00:00:00", 3)
    assert v.validate(result)[0] is State.ACCEPTABLE
    assert v.down(v.up(SAMPLE, 3), 3) == SAMPLE


def test_custom_format():
    v = DateValidator()
    v.format = "yyyy-MM-dd"
    assert v.input_mask == "NNNN-NN-NN;_"
    assert v.validate("2021-06-15")[0] is State.ACCEPTABLE
    assert v.validate(SAMPLE)[0] is not State.ACCEPTABLE


@pytest.mark.parametrize("text", ["", "0x", "0X"])
def test_hex_intermediate_inputs(text):
    assert HexValidator().validate(text) is State.INTERMEDIATE


@pytest.mark.parametrize("text", ["ff", "0x1A", "7fffffff"])
def test_hex_acceptable(text):
    assert HexValidator().validate(text) is State.ACCEPTABLE


@pytest.mark.parametrize("text", ["zz", "100000000", "1_0"])
def test_hex_invalid(text):
    assert HexValidator().validate(text) is State.INVALID


def test_hex_bottom_bound():
    v = HexValidator(bottom=16)
    assert v.validate("f") is State.INTERMEDIATE
    assert v.validate("10") is State.ACCEPTABLE


def test_hex_top_bound():
    v = HexValidator(top=255)
    assert v.validate("100") is State.INVALID
    assert v.validate("ff") is State.ACCEPTABLE