from square_game.game import BlockMatchingService, Color, Field, Position, Rectangle

from tests.helpers import fill, fill_rect


def test_empty_field_has_no_matches():
    assert BlockMatchingService().find_matching_rectangles(Field()) == []


def test_exact_two_by_two():
    field = Field()
    fill_rect(field, 0, 0, 2, 2, Color.BLUE)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert result == [Rectangle(Position(0, 0), 2, 2)]


def test_filled_three_by_three_reports_only_the_largest():
    field = Field()
    fill_rect(field, 2, 10, 3, 3, Color.RED)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert result == [Rectangle(Position(2, 10), 3, 3)]


def test_l_shape_does_not_match():
    field = Field()
    fill(field, [(0, 18), (0, 19), (1, 19)], Color.YELLOW)
    assert BlockMatchingService().find_matching_rectangles(field) == []


def test_lines_do_not_match():
    field = Field()
    fill(field, [(x, 19) for x in range(8)], Color.BLUE)
    fill(field, [(0, y) for y in range(5, 19)], Color.BLUE)
    assert BlockMatchingService().find_matching_rectangles(field) == []


def test_mixed_colors_do_not_match():
    field = Field()
    fill(field, [(0, 18), (1, 18), (0, 19)], Color.BLUE)
    fill(field, [(1, 19)], Color.RED)
    assert BlockMatchingService().find_matching_rectangles(field) == []


def test_adjacent_rectangles_of_different_colors():
    field = Field()
    fill_rect(field, 0, 18, 2, 2, Color.BLUE)
    fill_rect(field, 2, 18, 2, 2, Color.RED)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert sorted(result, key=lambda r: r.top_left.x) == [
        Rectangle(Position(0, 18), 2, 2),
        Rectangle(Position(2, 18), 2, 2),
    ]


def test_tall_and_wide_rectangles():
    field = Field()
    fill_rect(field, 0, 15, 2, 5, Color.RED)
    fill_rect(field, 3, 18, 5, 2, Color.YELLOW)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert Rectangle(Position(0, 15), 2, 5) in result
    assert Rectangle(Position(3, 18), 5, 2) in result
    assert len(result) == 2


def test_no_returned_rectangle_is_inside_another():
    field = Field()
    fill_rect(field, 0, 14, 4, 6, Color.BLUE)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert result == [Rectangle(Position(0, 14), 4, 6)]
    for a in result:
        for b in result:
            assert a is b or not a.is_within(b)


def test_overlapping_same_color_rectangles_are_both_kept():
    # Two maximal rectangles that share cells but neither contains the other:
    # a 3x2 block plus a 2x3 block anchored at the same corner.
    field = Field()
    fill_rect(field, 0, 0, 3, 2, Color.RED)
    fill(field, [(0, 2), (1, 2)], Color.RED)
    result = BlockMatchingService().find_matching_rectangles(field)
    assert set(result) == {
        Rectangle(Position(0, 0), 3, 2),
        Rectangle(Position(0, 0), 2, 3),
    }


def test_is_rectangle():
    field = Field()
    fill_rect(field, 0, 0, 2, 2, Color.RED)
    service = BlockMatchingService()
    cells = Rectangle(Position(0, 0), 2, 2).positions()
    assert service.is_rectangle(cells, Color.RED, field)
    assert not service.is_rectangle(cells, Color.BLUE, field)
    assert not service.is_rectangle(cells + [Position(2, 0)], Color.RED, field)
