from collections import Counter

import pytest

from hashboggle.boggle import (
    LETTERS,
    boggle,
    format_board,
    gen_board,
    main,
    parse_dict,
    print_board,
)


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CAT CA\nDOG\nAX\n  TEN  \n", encoding="utf-8")
    return path


def test_letter_pool_frequencies():
    board = gen_board(40, 7)
    counts = Counter(ch for row in board for ch in row)
    assert sum(counts.values()) == 1600
    assert set(counts) <= set(LETTERS)
    assert counts["E"] > counts["Z"]


def test_gen_board_pinned_first_letter():
    # The first draw of the standard generator with seed 5489 is 3499211612,
    # which selects index 92 of the 98-letter pool.
    assert gen_board(1, 5489) == [["W"]]


def test_gen_board_shape_and_letters():
    board = gen_board(5, 3)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert all(ch in LETTERS for row in board for ch in row)


def test_gen_board_deterministic():
    first = gen_board(6, 11)
    second = gen_board(6, 11)
    assert first == second
    assert gen_board(3, 5489)[0][0] == "W"


def test_gen_board_seed_matters():
    assert gen_board(8, 1) != gen_board(8, 2)


def test_gen_board_prefix_consistency():
    small = gen_board(2, 9)
    big = gen_board(3, 9)
    assert [c for row in small for c in row][:2] == big[0][:2]


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_print_board(capsys):
    board = [["X", "Y"], ["Z", "W"]]
    print_board(board)
    assert capsys.readouterr().out == format_board(board)


def test_parse_dict(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    assert words == {"CAT", "CA", "DOG", "AX", "TEN"}
    assert {"", "C", "CA", "D", "DO", "A", "T", "TE"} == prefixes


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(str(tmp_path / "missing.txt"))


def test_boggle_keeps_only_longest_on_ray(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["C", "A", "T"], ["Q", "Q", "Q"], ["Q", "Q", "Q"]]
    assert boggle(words, prefixes, board) == {"CAT"}


def test_boggle_columns_and_diagonals(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["D", "Q", "Q"], ["O", "Q", "Q"], ["G", "Q", "Q"]]
    assert boggle(words, prefixes, board) == {"DOG"}
    diag = [["T", "Q", "Q"], ["Q", "E", "Q"], ["Q", "Q", "N"]]
    assert boggle(words, prefixes, diag) == {"TEN"}


def test_boggle_no_backward_reading(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    board = [["T", "A", "C"], ["Q", "Q", "Q"], ["Q", "Q", "Q"]]
    assert boggle(words, prefixes, board) == set()


def test_boggle_results_are_dictionary_words(dict_file):
    words, prefixes = parse_dict(str(dict_file))
    found = boggle(words, prefixes, gen_board(10, 4))
    assert found <= words


def test_main_usage(capsys):
    assert main(["3"]) == 1
    assert "Usage: boggle-driver" in capsys.readouterr().out


def test_main_output(tmp_path, capsys):
    board = gen_board(4, 21)
    words = {"".join(board[0]), board[1][0] + board[1][1]}
    path = tmp_path / "d.txt"
    path.write_text("\n".join(words), encoding="utf-8")
    assert main(["4", "21", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    dictionary, prefix = parse_dict(str(path))
    found = boggle(dictionary, prefix, board)
    assert out[:4] == format_board(board).splitlines()
    assert out[4] == f"Found {len(found)} words:"
    assert out[5] == ", ".join(sorted(found))
    assert "".join(board[0]) in found