import pytest

from tremolo_fx.look_and_feel import Colors, Gradient, LookAndFeel, Rectangle, get_color


def test_named_colours():
    assert get_color(Colors.ORANGE) == 0xFFFFAA00
    assert get_color(Colors.PALE_BLUE) == 0xFFDDECFF


def test_look_and_feel_colours():
    laf = LookAndFeel()
    assert laf.colour("popup_menu.highlighted_background") == get_color(Colors.ORANGE)
    assert laf.colour("label.text") == get_color(Colors.PALE_BLUE)
    assert laf.colour("bubble.background") == 0xFF153245
    with pytest.raises(KeyError):
        laf.colour("slider.thumb")


def test_font_heights():
    laf = LookAndFeel()
    assert laf.side_labels_font_height() == 10.0
    assert laf.rate_label_font_height() == 12.0


def test_reduced_shrinks_symmetrically():
    rect = Rectangle(0, 0, 540, 270)
    smaller = rect.reduced(18, 27)
    assert smaller.x == 18 and smaller.y == 27
    assert smaller.centre_x == rect.centre_x
    assert smaller.bottom == rect.bottom - 27


def test_reduced_never_goes_negative():
    assert Rectangle(0, 0, 4, 4).reduced(10).width == 0.0


def test_remove_from_each_side_partitions_rectangle():
    rect = Rectangle(0, 0, 540, 270)
    top = rect.remove_from_top(66)
    bottom = rect.remove_from_bottom(176)
    left = rect.remove_from_left(16)
    right = rect.remove_from_right(392)
    assert top.height + bottom.height + rect.height == 270
    assert left.width + right.width + rect.width == 540
    assert rect.y == top.bottom
    assert right.x == rect.x + rect.width


def test_remove_is_clamped_and_rejects_negative():
    rect = Rectangle(0, 0, 10, 10)
    removed = rect.remove_from_top(100)
    assert removed.height == 10 and rect.height == 0
    with pytest.raises(ValueError):
        rect.remove_from_left(-1)


def test_gradient_stops():
    gradient = Gradient.vertical(0xFF4A7090, 0xFF324258, Rectangle(0, 0, 10, 10))
    gradient.add_colour(0.73, 0xFF315160)
    assert gradient.colour_at(0.0) == 0xFF4A7090
    assert gradient.colour_at(1.0) == 0xFF324258
    assert gradient.colour_at(0.73) == 0xFF315160
    assert gradient.point2 == (0, 10)
    with pytest.raises(ValueError):
        gradient.add_colour(1.5, 0xFF000000)


def test_knob_gradient_has_sorted_stops():
    gradient = LookAndFeel().knob_gradient(Rectangle(0, 0, 60, 60))
    positions = [position for position, _ in gradient.stops]
    assert positions == sorted(positions)
    assert gradient.colour_at(0.29) == 0xFF396086
    assert gradient.colour_at(1.0) == 0xFF060F1C


def test_rotary_arc_angles_follow_slider_position():
    laf = LookAndFeel()
    low = laf.rotary_arc(0, 0, 80, 80, 0.0, -2.0, 2.0)
    high = laf.rotary_arc(0, 0, 80, 80, 1.0, -2.0, 2.0)
    assert low.end_angle == low.start_angle == -2.0
    assert high.end_angle == 2.0
    assert low.bounds == Rectangle(0, 0, 80, 80).reduced(3.75).reduced(0.25)


def test_combo_box_arrow_is_symmetric():
    top_left, apex, top_right = LookAndFeel().combo_box_arrow(132, 38)
    assert top_left[1] == top_right[1] == 11
    assert apex[0] == (top_left[0] + top_right[0]) / 2
    assert apex[1] > top_left[1]


def test_combo_box_text_bounds_within_box():
    bounds = LookAndFeel().combo_box_text_bounds(132, 38)
    assert bounds.x == 10 and bounds.y == 6
    assert bounds.x + bounds.width < 132
    assert bounds.bottom < 38


def test_toggle_button_styles():
    laf = LookAndFeel()
    on = laf.toggle_button_style(True)
    off = laf.toggle_button_style(False)
    assert on.text_colour == 0xFF501A0B and on.bold
    assert off.text_colour == get_color(Colors.PALE_BLUE) and not off.bold
    assert on.font_height == off.font_height
    assert on.inset_stops == off.inset_stops
    assert on.fill_stops[0][1] == 0xFFFF901A