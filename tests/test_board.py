import random

import pytest
from game.board import Board, random_solution
from game.peg import AQUA, GREEN, PALETTE, RED, WHITE, to_code


SOLUTION = [to_code(c) for c in (RED, AQUA, GREEN, WHITE)]


def fill_row(board, i, colors):
    for j, color in enumerate(colors):
        assert board.set_peg(i, j, color)


def make_board(**kwargs):
    params = dict(slots=4, colors=6, max_rows=8, solution_pegs=SOLUTION)
    params.update(kwargs)
    return Board(**params)


def editable_rows(board):
    return [i for i in range(board.max_rows) if board.is_row_editable(i)]


# --- construction ---

@pytest.mark.parametrize("requested,expected", [
    ((1, 1, 1), (2, 2, 2)),
    ((0, -3, 0), (2, 2, 2)),
    ((4, 6, 8), (4, 6, 8)),
    ((11, 9, 21), (10, 8, 20)),
    ((10, 8, 100), (10, 8, 20)),
])
def test_dimensions_are_clamped(requested, expected):
    slots, colors, max_rows = requested
    board = Board(slots, colors, max_rows)
    assert (board.slots, board.colors, board.max_rows) == expected
    assert len(board.rows) == board.max_rows
    assert all(len(row) == board.slots for row in board.rows)
    assert len(board.solution) == board.slots


def test_new_board_has_only_first_row_active():
    board = make_board()
    assert board.active_row == 0
    assert editable_rows(board) == [0]
    assert all(board.row_string(i) == "----" for i in range(8))
    assert board.solution_string() == "ragw"


def test_random_solution_is_full_and_within_colors():
    for _ in range(20):
        board = Board(slots=6, colors=3, max_rows=4)
        assert board.solution.is_full()
        assert all(p in PALETTE[:3] for p in board.solution.pegs)


def test_random_solution_is_seedable():
    a = Board(rng=random.Random(7)).solution_string()
    b = Board(rng=random.Random(7)).solution_string()
    assert a == b
    assert random_solution(5, 4, random.Random(1)) == random_solution(5, 4, random.Random(1))


def test_new_game_keeps_dimensions():
    board = make_board(slots=5, colors=7, max_rows=10)
    fill_row(board, 0, [RED] * 5)
    fresh = board.new_game(random.Random(3))
    assert (fresh.slots, fresh.colors, fresh.max_rows) == (5, 7, 10)
    assert fresh.active_row == 0
    assert fresh.row_string(0) == "-----"
    assert fresh.solution.is_full()


# --- queries and mutation ---

@pytest.mark.parametrize("i,j", [(-1, 0), (8, 0), (0, -1), (0, 4), (99, 99)])
def test_out_of_range_coordinates(i, j):
    board = make_board()
    assert board.peg_at(i, j) is None
    assert board.set_peg(i, j, RED) is False
    assert board.clear_peg(i, j) is False


def test_is_row_full_out_of_range():
    board = make_board()
    assert board.is_row_full(-1) is False
    assert board.is_row_full(8) is False


def test_set_peg_only_on_active_row():
    board = make_board()
    assert board.set_peg(0, 2, GREEN) is True
    assert board.peg_at(0, 2) is GREEN
    assert board.set_peg(1, 0, RED) is False
    assert board.peg_at(1, 0) is None
    assert board.clear_peg(0, 2) is True
    assert board.peg_at(0, 2) is None


# --- feedback ---

def test_scenario_two_red_two_white():
    board = make_board()
    fill_row(board, 0, [RED, AQUA, WHITE, GREEN])
    assert board.test_row(0) == (2, 2)


def test_scenario_frequency_cap():
    board = make_board()
    fill_row(board, 0, [RED, RED, RED, RED])
    assert board.test_row(0) == (1, 0)


def test_exact_guess_is_all_red():
    board = make_board()
    fill_row(board, 0, [RED, AQUA, GREEN, WHITE])
    assert board.test_row(0) == (4, 0)


def test_test_row_needs_a_full_row():
    board = make_board()
    assert board.test_row(0) == (0, 0)
    fill_row(board, 0, [RED, AQUA, GREEN])
    assert board.test_row(0) == (0, 0)
    assert board.test_row(-1) == (0, 0)
    assert board.test_row(8) == (0, 0)


def test_test_row_with_incomplete_solution():
    board = make_board(solution_pegs=[1, 2, 0, 4])
    fill_row(board, 0, [RED, AQUA, GREEN, WHITE])
    assert board.test_row(0) == (0, 0)


# --- solution replacement ---

def test_set_solution_accepts_full_rows():
    board = make_board()
    assert board.set_solution([4, 3, 2, 1]) is True
    assert board.solution_string() == "wgar"


@pytest.mark.parametrize("candidate", [[1, 2, 3], [1, 2, 0, 4], [1, 2, 3, 9], []])
def test_set_solution_rejects_partial_rows(candidate):
    board = make_board()
    assert board.set_solution(candidate) is False
    assert board.solution_string() == "ragw"


# --- row progression ---

def test_next_row_does_nothing_until_active_row_is_full():
    board = make_board()
    fill_row(board, 0, [RED, AQUA, GREEN])
    for _ in range(3):
        board.next_row_if_possible()
        assert editable_rows(board) == [0]
    assert board.row_string(0) == "rag-"


def test_next_row_advances_one_row_at_a_time():
    board = make_board()
    fill_row(board, 0, [RED, RED, RED, RED])
    board.next_row_if_possible()
    assert editable_rows(board) == [1]
    assert board.set_peg(0, 0, AQUA) is False
    assert board.row_string(0) == "rrrr"

    # Row 1 is empty, so further calls keep it active
    board.next_row_if_possible()
    assert board.active_row == 1


def test_completing_every_row_leaves_none_active():
    board = make_board(max_rows=2)
    fill_row(board, 0, [WHITE] * 4)
    board.next_row_if_possible()
    fill_row(board, 1, [GREEN] * 4)
    board.next_row_if_possible()
    assert board.active_row is None
    assert editable_rows(board) == []
    board.next_row_if_possible()
    assert board.active_row is None


def test_completed_prefix_invariant_during_play():
    board = make_board(max_rows=5)
    for i in range(5):
        assert board.active_row == i
        assert all(board.is_row_full(k) for k in range(i))
        assert not any(board.is_row_full(k) for k in range(i, 5))
        fill_row(board, i, [PALETTE[i]] * 4)
        board.next_row_if_possible()
        assert len(editable_rows(board)) <= 1


# --- save image ---

def test_save_image_layout():
    board = make_board(max_rows=2)
    fill_row(board, 0, [RED, AQUA, WHITE, GREEN])
    data = board.to_byte_list()
    assert data[:3] == bytes([4, 6, 2])
    # 12 codes: ragw rawg ----
    assert len(data) == 3 + 6
    assert data[3:] == bytes([0x21, 0x43, 0x21, 0x34, 0x00, 0x00])


def test_save_image_pads_odd_peg_count():
    board = make_board(slots=3, max_rows=2, solution_pegs=[1, 2, 3])
    # 3 * (1 + 2) = 9 codes -> 5 bytes
    assert len(board.to_byte_list()) == 3 + 5


def assert_same_board(a, b):
    assert (a.slots, a.colors, a.max_rows) == (b.slots, b.colors, b.max_rows)
    assert a.solution == b.solution
    for i in range(a.max_rows):
        assert a.rows[i] == b.rows[i]
        for j in range(a.slots):
            assert a.peg_at(i, j) == b.peg_at(i, j)
    assert a.active_row == b.active_row
    assert editable_rows(a) == editable_rows(b)


def test_round_trip_fresh_board():
    board = make_board()
    assert_same_board(board, Board.from_byte_list(board.to_byte_list()))


def test_round_trip_mid_game():
    board = Board(slots=5, colors=8, max_rows=7, rng=random.Random(11))
    for i, color in enumerate([RED, AQUA, GREEN]):
        fill_row(board, i, [color] * 5)
        board.next_row_if_possible()
    board.set_peg(3, 1, WHITE)
    board.set_peg(3, 4, PALETTE[7])

    restored = Board.from_byte_list(board.to_byte_list())
    assert_same_board(board, restored)
    assert restored.active_row == 3
    assert restored.row_string(3) == "-w--o"
    assert restored.test_row(1) == board.test_row(1)


def test_round_trip_finished_board():
    board = make_board(max_rows=2)
    fill_row(board, 0, [WHITE] * 4)
    board.next_row_if_possible()
    fill_row(board, 1, [RED, AQUA, GREEN, WHITE])
    board.next_row_if_possible()

    restored = Board.from_byte_list(board.to_byte_list())
    assert_same_board(board, restored)
    assert restored.active_row is None
    assert restored.test_row(1) == (4, 0)


def test_load_accepts_bytearray_and_lists():
    data = make_board().to_byte_list()
    assert Board.from_byte_list(bytearray(data)).solution_string() == "ragw"
    assert Board.from_byte_list(list(data)).solution_string() == "ragw"


def test_load_treats_bad_codes_as_empty():
    # solution r a ? g, row 0 full of 9s (bad), row 1 "rr--"
    data = bytes([4, 6, 2]) + bytes([0x21, 0x3F, 0x99, 0x99, 0x11, 0x00])
    board = Board.from_byte_list(data)
    assert board.solution_string() == "ra-g"
    assert board.row_string(0) == "----"
    assert board.row_string(1) == "rr--"
    assert board.active_row == 0


def test_load_truncated_peg_data():
    data = make_board().to_byte_list()[:5]
    board = Board.from_byte_list(data)
    assert board.solution_string() == "ragw"
    assert all(board.row_string(i) == "----" for i in range(board.max_rows))
    assert board.active_row == 0


def test_load_missing_header_uses_defaults():
    board = Board.from_byte_list(b"")
    assert (board.slots, board.colors, board.max_rows) == (4, 6, 8)
    assert board.solution_string() == "----"
    assert board.test_row(0) == (0, 0)


def test_load_clamps_header():
    data = bytes([1, 20, 40]) + bytes(30)
    board = Board.from_byte_list(data)
    assert (board.slots, board.colors, board.max_rows) == (2, 8, 20)


def test_str_lists_guess_rows():
    board = make_board(max_rows=2)
    fill_row(board, 0, [RED, AQUA, WHITE, GREEN])
    assert str(board) == "rawg\n----"
