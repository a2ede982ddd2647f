import pytest

from igo_study.utils import sgf_utils


def test_human_to_sgf_c7_on_19():
    assert sgf_utils.human_to_sgf("C7", 19) == "cm"


def test_human_to_sgf_skips_i_and_ignores_case():
    # J is the ninth column once I is skipped
    assert sgf_utils.human_to_sgf("j10", 19) == "ij"
    assert sgf_utils.human_to_sgf("T19", 19) == "sa"
    assert sgf_utils.human_to_sgf("A1", 9) == "ai"


def test_sgf_to_human_uses_display_alphabet():
    assert sgf_utils.sgf_to_human("cm", 19) == "C7"
    assert sgf_utils.sgf_to_human("ij", 19) == "J10"
    assert sgf_utils.sgf_to_human("pd", 19) == "Q16"


@pytest.mark.parametrize("board_size", [9, 13, 19])
def test_round_trip_every_point(board_size):
    columns = "ABCDEFGHJKLMNOPQRST"[:board_size]
    for col in columns:
        for row in range(1, board_size + 1):
            human = f"{col}{row}"
            assert sgf_utils.sgf_to_human(sgf_utils.human_to_sgf(human, board_size), board_size) == human


def test_column_round_trip_all_columns_up_to_25():
    for index, letter in enumerate(sgf_utils.display_columns):
        sgf = sgf_utils.human_to_sgf(f"{letter}1", 25)
        assert sgf[0] == chr(97 + index)
        assert sgf_utils.sgf_to_human(sgf, 25) == f"{letter}1"


def test_malformed_input_never_raises():
    assert sgf_utils.human_to_sgf("I5", 19)[0] == "?"
    assert sgf_utils.human_to_sgf("C", 19) == "c?"
    assert sgf_utils.human_to_sgf("", 19) == "??"
    assert sgf_utils.human_to_sgf("C40", 19) == "c?"
    assert sgf_utils.sgf_to_human("z", 19) == "?"
    assert sgf_utils.sgf_to_human("za", 19) == "?19"


def test_is_human_coord():
    assert sgf_utils.is_human_coord("C7")
    assert sgf_utils.is_human_coord(" q16 ")
    assert not sgf_utils.is_human_coord("pd")
    assert not sgf_utils.is_human_coord("C123")
    assert not sgf_utils.is_human_coord("tengen")


def test_convert_click_to_sgf():
    # 190px canvas on 19 lines gives 10px cells
    assert sgf_utils.convert_click_to_sgf(0, 0, 190, 190, 19) == "aa"
    assert sgf_utils.convert_click_to_sgf(25, 125, 190, 190, 19) == "cm"
    assert sgf_utils.convert_click_to_sgf(189.9, 189.9, 190, 190, 19) == "ss"


def test_convert_click_outside_canvas_is_not_an_error():
    assert sgf_utils.convert_click_to_sgf(-500, 5, 190, 190, 19) == "?a"
    assert sgf_utils.convert_click_to_sgf(5, 5, 0, 190, 19) == "??"


def test_convert_sgf_coord_to_coord():
    assert sgf_utils.convert_sgf_coord_to_coord("pd") == (3, 15)
    assert sgf_utils.convert_sgf_coord_to_coord("p?") is None


def test_is_on_board():
    assert sgf_utils.is_on_board("aa", 19)
    assert sgf_utils.is_on_board("ss", 19)
    assert not sgf_utils.is_on_board("tt", 19)
    assert not sgf_utils.is_on_board("a?", 19)
    assert not sgf_utils.is_on_board("abc", 19)
