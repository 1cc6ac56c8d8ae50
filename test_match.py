"""
Tests for the match controller and the console front end.

Usage:
    python test_match.py
    pytest test_match.py
"""

import sys

import pytest

from logic.board import Cell
from logic.config import GameConfig
from logic.match import Match, Mode
from logic.win_checker import GameStatus
from main import ConsoleGame


def play(match, moves):
    for row, col in moves:
        assert match.play_move(row, col), match.last_error


# ==================== MATCH ====================

def test_new_match_defaults():
    match = Match()
    assert match.current_player == GameConfig.STARTING_PLAYER == Cell.X
    assert match.mode == Mode.HUMAN_VS_COMPUTER
    assert match.outcome.status == GameStatus.IN_PROGRESS
    assert match.scores == {Cell.X: 0, Cell.O: 0}
    assert match.moves == []


def test_turns_alternate_until_over():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    sequence = [(1, 1), (0, 0), (0, 1), (2, 1), (1, 0), (1, 2), (2, 0), (0, 2), (2, 2)]
    expected = Cell.X
    for row, col in sequence:
        assert match.current_player == expected
        assert match.play_move(row, col)
        if match.is_game_over:
            break
        expected = expected.opposite()
        assert match.current_player == expected
    assert [m.player for m in match.moves] == [Cell.X, Cell.O] * 4 + [Cell.X]


def test_draw_scores_nothing():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(1, 1), (0, 0), (0, 1), (2, 1), (1, 0), (1, 2), (2, 0)])
    assert not match.is_game_over
    play(match, [(0, 2), (2, 2)])

    assert match.outcome.status == GameStatus.DRAW
    assert match.winner is None
    assert match.scores == {Cell.X: 0, Cell.O: 0}


def test_win_is_detected_on_the_completing_move():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert not match.is_game_over

    assert match.play_move(0, 2)
    assert match.outcome.status == GameStatus.WON
    assert match.winner == Cell.X
    assert match.outcome.line == ((0, 0), (0, 1), (0, 2))
    # The winner stays "to move"; turns stop switching once over
    assert match.current_player == Cell.X
    assert match.score(Cell.X) == 1
    assert match.score(Cell.O) == 0


def test_o_win_scores_for_o():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
    assert match.winner == Cell.O
    assert match.scores == {Cell.X: 0, Cell.O: 1}


def test_occupied_cell_is_rejected():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(1, 1)])
    before = match.board.copy()

    assert not match.play_move(1, 1)
    assert match.board == before
    assert match.current_player == Cell.O
    assert "occupied" in match.last_error
    assert len(match.moves) == 1


def test_out_of_range_is_rejected():
    match = Match()
    assert not match.play_move(3, 3)
    assert not match.play_move(-1, 0)
    assert match.current_player == Cell.X
    assert match.moves == []


def test_no_moves_after_game_over():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    before = match.board.copy()

    assert not match.play_move(2, 2)
    assert match.last_error == "Game is already over!"
    assert match.board == before
    assert match.score(Cell.X) == 1


def test_score_increments_once_per_win():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    # Re-applying the same result must not score again
    match._apply_outcome(match.win_checker.evaluate(match.board))
    match.play_move(2, 2)
    match.computer_move()
    assert match.score(Cell.X) == 1


def test_restart_keeps_scores():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    match.restart()

    assert match.outcome.status == GameStatus.IN_PROGRESS
    assert match.board.occupied_cells() == []
    assert match.current_player == Cell.X
    assert match.moves == []
    assert match.last_error is None
    assert match.score(Cell.X) == 1

    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert match.score(Cell.X) == 2


def test_restart_after_o_moved_first_turn_back_to_x():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0)])
    assert match.current_player == Cell.O
    match.restart()
    assert match.current_player == Cell.X


def test_computer_move_is_noop_when_over():
    match = Match()
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    before = match.board.copy()

    assert match.computer_move() is None
    assert match.board == before
    assert len(match.moves) == 5


def test_computer_move_plays_for_side_to_move():
    match = Match()
    play(match, [(0, 0), (1, 1), (0, 1)])
    assert match.current_player == Cell.O

    move = match.computer_move()
    assert move == (0, 2)
    assert match.get_cell(0, 2) == Cell.O
    assert match.current_player == Cell.X
    assert match.moves[-1].player == Cell.O


def test_computer_move_can_play_x():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert match.computer_move() == (0, 2)
    assert match.winner == Cell.X
    assert match.score(Cell.X) == 1


def test_computer_vs_computer_is_draw():
    match = Match()
    play(match, [(1, 1)])
    while not match.is_game_over:
        assert match.computer_move() is not None
    assert match.outcome.status == GameStatus.DRAW


def test_get_cell_off_board_raises():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(2, 0)])
    with pytest.raises(IndexError):
        match.get_cell(-1, 0)


def test_valid_moves_empty_once_over():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    play(match, [(0, 0), (1, 0)])
    assert match.valid_moves() == match.board.available_moves()
    assert len(match.valid_moves()) == 7

    play(match, [(0, 1), (1, 1), (0, 2)])
    assert match.valid_moves() == []


def test_set_mode_leaves_board_alone():
    match = Match()
    play(match, [(1, 1)])
    match.set_mode(Mode.HUMAN_VS_HUMAN)
    assert match.mode == Mode.HUMAN_VS_HUMAN
    assert match.get_cell(1, 1) == Cell.X
    assert match.current_player == Cell.O


def test_toggle_mode():
    match = Match()
    assert match.toggle_mode() == Mode.HUMAN_VS_HUMAN
    assert match.toggle_mode() == Mode.HUMAN_VS_COMPUTER


def test_is_computer_turn():
    match = Match()
    assert not match.is_computer_turn()
    play(match, [(1, 1)])
    assert match.is_computer_turn()
    match.set_mode(Mode.HUMAN_VS_HUMAN)
    assert not match.is_computer_turn()


# ==================== CONSOLE ====================

def scripted(lines):
    """input() replacement that replays lines, then quits."""
    feed = iter(lines)
    return lambda prompt="": next(feed, "q")


def test_console_human_vs_human_win():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    game = ConsoleGame(match, input_fn=scripted(["0 0", "1 0", "0,1", "1 1", "0 2"]))
    game.start()

    assert match.winner == Cell.X
    assert match.score(Cell.X) == 1
    assert not game.is_running


def test_console_rejects_bad_input(capsys):
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    game = ConsoleGame(match, input_fn=scripted(["1 1", "1 1", "nonsense", "9 9"]))
    game.start()

    out = capsys.readouterr().out
    assert "Illegal move: Cell (1, 1) is already occupied by X" in out
    assert "Illegal move: Invalid position (9, 9)" in out
    assert ConsoleGame.PROMPT_HELP in out
    assert match.board.occupied_cells() == [(1, 1)]


def test_console_ai_answers_human():
    match = Match(mode=Mode.HUMAN_VS_COMPUTER)
    game = ConsoleGame(match, input_fn=scripted(["0 0", "0 1"]))
    game.start()

    players = [m.player for m in match.moves]
    assert players == [Cell.X, Cell.O, Cell.X, Cell.O]
    # After X takes (0,0) and (0,1), the AI must block at (0,2)
    assert match.get_cell(0, 2) == Cell.O


def test_console_restart_and_mode_commands():
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    game = ConsoleGame(match, input_fn=scripted(["1 1", "r", "m"]))
    game.start()

    assert match.mode == Mode.HUMAN_VS_COMPUTER
    assert match.board.occupied_cells() == []


def test_console_hint(capsys):
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    game = ConsoleGame(match, input_fn=scripted(["0 0", "1 1", "0 1", "h"]))
    game.start()

    assert "Place O at position (0, 2)" in capsys.readouterr().out
    assert len(match.moves) == 3


def test_console_hint_after_game_over(capsys):
    match = Match(mode=Mode.HUMAN_VS_HUMAN)
    game = ConsoleGame(match, input_fn=scripted(["0 0", "1 0", "0 1", "1 1", "0 2", "h"]))
    game.start()

    out = capsys.readouterr().out
    assert "Game is already over!" in out
    assert "Place" not in out


def test_console_handles_end_of_input():
    def closed(prompt=""):
        raise EOFError

    game = ConsoleGame(Match(), input_fn=closed)
    game.start()
    assert not game.is_running


def run_all_tests():
    """Run every test_* function that needs no pytest fixture."""
    import inspect

    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)
             and not inspect.signature(fn).parameters]
    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  ✓ {name}")
        except Exception as e:
            failed += 1
            print(f"  ✗ {name}: {e!r}")
    print(f"\n{len(tests) - failed}/{len(tests)} passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
