from codebuddy.credits_state import (
    SCROLL_STEP,
    VISIBLE_LINES,
    CreditsComponent,
    CreditsWidgetState,
)
from codebuddy.geometry import Rect


def test_default_state():
    state = CreditsWidgetState()
    assert state.selected_component is CreditsComponent.BACK_TO_OVERVIEW
    assert state.hovered_component is None
    assert state.registered_components == {}
    assert state.scroll_offset == 0


def test_is_over_registered_component():
    state = CreditsWidgetState()
    state.registered_components[CreditsComponent.SCROLL_UP] = Rect(0, 0, 10, 2)
    assert state.is_over(CreditsComponent.SCROLL_UP, 1, 1) is True
    assert state.is_over(CreditsComponent.SCROLL_UP, 10, 1) is False


def test_is_over_unregistered_component():
    state = CreditsWidgetState()
    assert state.is_over(CreditsComponent.SCROLL_DOWN, 0, 0) is False


def test_scroll_down_stops_at_end():
    state = CreditsWidgetState(total_lines=VISIBLE_LINES + 2 * SCROLL_STEP)
    for _ in range(10):
        state.scroll_down()
    assert state.scroll_offset == 2 * SCROLL_STEP


def test_scroll_down_short_content_does_not_move():
    state = CreditsWidgetState(total_lines=VISIBLE_LINES - 1)
    state.scroll_down()
    assert state.scroll_offset == 0


def test_scroll_up_saturates_at_zero():
    state = CreditsWidgetState(scroll_offset=SCROLL_STEP - 2)
    state.scroll_up()
    assert state.scroll_offset == 0
    state.scroll_up()
    assert state.scroll_offset == 0


def test_scroll_down_then_up_round_trip():
    state = CreditsWidgetState(total_lines=100)
    state.scroll_down()
    state.scroll_down()
    state.scroll_up()
    state.scroll_up()
    assert state.scroll_offset == 0