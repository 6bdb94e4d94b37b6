import pytest

from blocktris.block import Block
from blocktris.blocklist import BlockList
from blocktris.constants import COL, ROW, Color, MinoKind, Rotation
from blocktris.tetromino import (
    MinoI,
    MinoJ,
    MinoL,
    MinoO,
    MinoS,
    MinoT,
    MinoZ,
    Tetromino,
    make_mino,
)

ALL_CLASSES = [MinoI, MinoO, MinoT, MinoL, MinoJ, MinoS, MinoZ]


class FakeBoard:
    """Answers cell lookups straight from the block list."""

    def __init__(self, block_list):
        self.block_list = block_list
        self.refreshes = 0

    def set_game_board(self):
        self.refreshes += 1

    def block_at(self, x, y):
        if not (0 <= x < COL and 0 <= y < ROW):
            return None
        found = None
        for block in self.block_list:
            if block.x == x and block.y == y:
                if not block.shadow:
                    return block
                found = found or block
        return found


@pytest.fixture
def env():
    blocks = BlockList()
    return blocks, FakeBoard(blocks)


def cells(piece):
    return {(b.x, b.y) for b in piece.blocks}


def add_stopped(blocks, x, y):
    block = blocks.add(x, y)
    block.stopped = True
    return block


@pytest.mark.parametrize(
    "kind,color",
    [
        (MinoKind.I, Color.CYAN),
        (MinoKind.O, Color.YELLOW),
        (MinoKind.T, Color.MAGENTA),
        (MinoKind.L, Color.WHITE),
        (MinoKind.J, Color.BLUE),
        (MinoKind.S, Color.GREEN),
        (MinoKind.Z, Color.RED),
    ],
)
def test_make_mino_colour_and_blocks(env, kind, color):
    blocks, board = env
    piece = make_mino(kind, blocks, board)
    assert len(blocks) == 4
    assert all(b.color == color for b in piece.blocks)
    assert [(b.rel_x, b.rel_y) for b in piece.blocks] == list(piece.positions)


def test_i_piece_offsets(env):
    blocks, board = env
    piece = MinoI(blocks, board, 3, 4)
    assert [(b.rel_x, b.rel_y) for b in piece.blocks] == [(-1, 0), (0, 0), (1, 0), (2, 0)]
    assert all(b.axis.x == 3 and b.axis.y == 4 for b in piece.blocks)


def test_spawn_is_at_board_centre(env):
    blocks, board = env
    piece = make_mino(MinoKind.T, blocks, board)
    assert all(b.axis.x == COL // 2 and b.axis.y == ROW for b in piece.blocks)
    square = make_mino(MinoKind.O, blocks, board)
    assert all(b.axis.y == ROW + 1 for b in square.blocks)


def test_custom_blocks_are_appended(env):
    blocks, board = env
    given = [Block(i, 0) for i in range(4)]
    piece = Tetromino(blocks, board, blocks=given)
    assert len(blocks) == 4
    assert [piece.block_at(i) for i in range(4)] == given


def test_custom_blocks_need_four(env):
    blocks, board = env
    with pytest.raises(ValueError):
        Tetromino(blocks, board, blocks=[Block()])


def test_on_tick_falls_one_row(env):
    blocks, board = env
    piece = MinoT(blocks, board, 5, 10)
    before = cells(piece)
    piece.on_tick()
    assert cells(piece) == {(x, y - 1) for x, y in before}
    assert not piece.is_stopped()


def test_hard_drop_reaches_floor(env):
    blocks, board = env
    piece = make_mino(MinoKind.I, blocks, board)
    piece.hard_drop()
    assert min(y for _, y in cells(piece)) == 0
    piece.on_tick()
    assert piece.is_stopped()
    assert min(y for _, y in cells(piece)) == 0


def test_hard_drop_lands_on_stopped_row(env):
    blocks, board = env
    for x in range(COL):
        add_stopped(blocks, x, 0)
    piece = MinoT(blocks, board, 5, 10)
    piece.hard_drop()
    assert min(y for _, y in cells(piece)) == 1


def test_tick_stops_on_stopped_block(env):
    blocks, board = env
    piece = MinoI(blocks, board, 4, 3)
    add_stopped(blocks, 4, 2)
    before = cells(piece)
    piece.on_tick()
    assert piece.is_stopped()
    assert cells(piece) == before
    assert board.refreshes >= 1


def test_move_stops_at_wall(env):
    blocks, board = env
    piece = MinoT(blocks, board, 5, 10)
    for _ in range(COL):
        piece.move(-1, 0, False)
    assert min(x for x, _ in cells(piece)) == 0
    for _ in range(COL):
        piece.move(1, 0, False)
    assert max(x for x, _ in cells(piece)) == COL - 1


def test_move_blocked_by_stopped_block(env):
    blocks, board = env
    piece = MinoI(blocks, board, 4, 5)
    right = max(x for x, _ in cells(piece))
    add_stopped(blocks, right + 1, 5)
    before = cells(piece)
    piece.move(1, 0, False)
    assert cells(piece) == before
    piece.move(-1, 0, False)
    assert cells(piece) == {(x - 1, y) for x, y in before}


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_four_turns_return_to_start(env, cls):
    blocks, board = env
    piece = cls(blocks, board, 5, 10)
    before = cells(piece)
    for _ in range(4):
        piece.rotate(Rotation.CW)
    assert cells(piece) == before
    assert piece.rotation_state == 1


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_turn_and_turn_back(env, cls):
    blocks, board = env
    piece = cls(blocks, board, 5, 10)
    before = cells(piece)
    piece.rotate(Rotation.CW)
    piece.rotate(Rotation.CCW)
    assert cells(piece) == before


def test_rotation_changes_t_shape(env):
    blocks, board = env
    piece = MinoT(blocks, board, 5, 10)
    before = cells(piece)
    piece.rotate(Rotation.CW)
    assert cells(piece) != before
    assert len(cells(piece)) == 4
    assert piece.rotation_state == 2


def test_o_piece_never_turns(env):
    blocks, board = env
    piece = MinoO(blocks, board, 5, 10)
    before = cells(piece)
    piece.rotate(Rotation.CW)
    assert cells(piece) == before
    assert piece.rotation_state == 1


def test_copy_from_and_shadow(env):
    blocks, board = env
    piece = MinoS(blocks, board, 5, 10)
    shadow = Tetromino(blocks, board)
    shadow.copy_from(piece)
    shadow.set_shadow(True)
    shadow.set_text("□")
    assert cells(shadow) == cells(piece)
    assert all(b.shadow and b.text == "□" for b in shadow.blocks)
    assert all(not b.shadow for b in piece.blocks)
    shadow.hard_drop()
    assert min(y for _, y in cells(shadow)) == 0
    assert min(y for _, y in cells(piece)) > 0
    blocks.remove_shadow()
    assert len(blocks) == 4