import pytest

from square_game.game import (
    Block,
    Color,
    InvalidBlockError,
    InvalidPositionError,
    InvalidRectangleError,
    InvalidScoreError,
    Position,
    Rectangle,
    Score,
    SquareGameError,
)


def test_position_rejects_negative_coordinates():
    with pytest.raises(InvalidPositionError):
        Position(-1, 0)
    with pytest.raises(InvalidPositionError):
        Position(0, -1)


@pytest.mark.parametrize("x,y", [(1.5, 0), (0, "2"), (True, 0)])
def test_position_rejects_non_integers(x, y):
    with pytest.raises(InvalidPositionError):
        Position(x, y)


def test_position_is_a_value():
    assert Position(2, 3) == Position(2, 3)
    assert Position(2, 3).add(Position(1, 1)) == Position(3, 4)
    assert Position(2, 3).subtract(Position(2, 1)) == Position(0, 2)
    assert Position(7, 19).is_valid(8, 20)
    assert not Position(8, 0).is_valid(8, 20)
    assert not Position(0, 20).is_valid(8, 20)


def test_color_is_closed_set_of_three():
    assert len(Color) == 3
    assert [c.tag for c in Color] == ["blue", "red", "yellow"]
    assert Color.from_tag("red") is Color.RED
    assert Color.BLUE.hex_code == "#3498db"
    with pytest.raises(ValueError):
        Color.from_tag("green")


def test_block_compares_by_color():
    assert Block(Color.RED) == Block(Color.RED)
    assert Block(Color.RED).is_same_color(Block(Color.RED))
    assert not Block(Color.RED).is_same_color(Block(Color.BLUE))
    with pytest.raises(InvalidBlockError):
        Block("red")


def test_rectangle_geometry():
    rect = Rectangle(Position(1, 2), 3, 2)
    assert rect.bottom_right == Position(3, 3)
    assert rect.area() == 6
    assert rect.contains(Position(3, 3))
    assert not rect.contains(Position(4, 3))
    assert rect.positions() == [
        Position(1, 2), Position(2, 2), Position(3, 2),
        Position(1, 3), Position(2, 3), Position(3, 3),
    ]


def test_rectangle_containment():
    big = Rectangle(Position(0, 0), 3, 3)
    small = Rectangle(Position(1, 1), 2, 2)
    crossing = Rectangle(Position(2, 2), 2, 2)
    assert small.is_within(big)
    assert big.is_within(big)
    assert not big.is_within(small)
    assert not crossing.is_within(big)


def test_rectangle_requires_positive_size():
    with pytest.raises(InvalidRectangleError):
        Rectangle(Position(0, 0), 0, 2)
    with pytest.raises(InvalidRectangleError):
        Rectangle(Position(0, 0), 2, 0)


def test_score_is_non_negative():
    assert Score.zero().value == 0
    assert Score.zero().add(4).add(6) == Score(10)
    with pytest.raises(InvalidScoreError):
        Score(-1)
    with pytest.raises(InvalidScoreError):
        Score.zero().add(-4)


@pytest.mark.parametrize(
    "build",
    [
        lambda: Position(-1, 0),
        lambda: Block(3),
        lambda: Rectangle(Position(0, 0), 0, 1),
        lambda: Score(-1),
    ],
)
def test_construction_errors_share_a_base(build):
    with pytest.raises(SquareGameError) as excinfo:
        build()
    assert isinstance(excinfo.value, ValueError)
