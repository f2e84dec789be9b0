import random

from pixelyard.tetris.colors import BlockType
from pixelyard.tetris.session import FAST_STEP, NORMAL_STEP, Key, Session


def _session(piece_type=None):
    session = Session(random.Random(3))
    if piece_type is not None:
        session.piece.erase()
        session.piece.clear()
        session.piece.init(piece_type)
        session.piece.draw()
    return session


def _occupied(session):
    return sum(cell is not BlockType.NA for cell in session.board.cells)


def test_new_session_draws_one_piece():
    session = _session()
    assert _occupied(session) == 4
    assert session.running
    assert session.points == 0


def test_step_moves_piece_down():
    session = _session(BlockType.T)
    y = session.piece.y
    session.step()
    assert session.piece.y == y + 1
    assert _occupied(session) == 4


def test_down_key_speeds_up_steps():
    session = _session()
    session.key_event(Key.DOWN, True)
    session.handle_input()
    assert session.step_time == FAST_STEP
    session.key_event(Key.DOWN, False)
    session.handle_input()
    assert session.step_time == NORMAL_STEP


def test_escape_stops_game():
    session = _session()
    session.key_event(Key.ESCAPE, True)
    assert not session.running


def test_left_moves_each_frame_while_held():
    session = _session(BlockType.T)
    x = session.piece.x
    session.key_event(Key.LEFT, True)
    session.handle_input()
    session.handle_input()
    assert session.piece.x == x - 2
    session.key_event(Key.LEFT, False)
    session.handle_input()
    assert session.piece.x == x - 2


def test_right_moves_piece():
    session = _session(BlockType.T)
    x = session.piece.x
    session.key_event(Key.RIGHT, True)
    session.handle_input()
    assert session.piece.x == x + 1


def test_up_rotates_once_per_press():
    session = _session(BlockType.T)
    session.key_event(Key.UP, True)
    session.handle_input()
    session.handle_input()
    assert session.piece.direction == 1
    session.key_event(Key.UP, False)
    session.key_event(Key.UP, True)
    session.handle_input()
    assert session.piece.direction == 2


def test_space_slams_and_next_step_spawns_new_piece():
    session = _session(BlockType.T)
    session.key_event(Key.SPACE, True)
    session.handle_input()
    assert session.piece.locked
    session.step()
    assert not session.piece.locked
    assert _occupied(session) == 8


def test_full_row_is_cleared_and_scored():
    session = _session(BlockType.T)
    for col in range(10):
        session.board[(19, col)] = BlockType.O
    session.key_event(Key.SPACE, True)
    session.handle_input()
    session.step()
    assert session.points == 1
    assert not session.board.is_row_full(19)


def test_blocked_spawn_ends_game():
    session = _session(BlockType.T)
    session.piece.erase()
    for row in range(1, 20):
        for col in range(1, 10):
            session.board[(row, col)] = BlockType.O
    session.piece.locked = True
    session.step()
    assert not session.running


def test_advance_steps_only_when_period_elapsed():
    session = _session(BlockType.T)
    y = session.piece.y
    assert session.advance(0.5) is False
    assert session.piece.y == y
    assert session.advance(0.5) is True
    assert session.piece.y == y + 1