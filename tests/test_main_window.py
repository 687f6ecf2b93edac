import pytest
from PyQt6 import sip

from irishlotto.config import PRIZE_TABLE
from irishlotto.core.engine import DrawEngine, DrawResult
from irishlotto.ui.main_window import LottoApp
from irishlotto.ui.dialogs import PrizeTableDialog
from irishlotto.ui.widgets import DrawRow
from irishlotto.utils import ThemeManager


@pytest.fixture
def make_window(qapp):
    windows = []

    def _make(source):
        window = LottoApp(engine=DrawEngine(rng=source))
        windows.append(window)
        return window

    yield _make
    for window in windows:
        window.close()


def _fill(window, numbers, bonus):
    for edit, value in zip(window.number_inputs, numbers):
        edit.setText(value)
    window.bonus_input.setText(bonus)


def test_initial_render(make_window, scripted):
    window = make_window(scripted())

    assert window.losses_label.text() == "Losses: €0"
    assert window.earnings_label.text() == "Earnings: €0"
    assert window.drawn_widget.isHidden()
    assert window.history_widget.isHidden()


def test_play_updates_totals_and_history(make_window, scripted):
    window = make_window(scripted([1, 2, 3, 40, 41, 42, 9]))
    _fill(window, ["1", "2", "3", "4", "5", "6"], "9")

    window.play_lotto()

    assert window.session_state.total_losses == 2
    assert window.session_state.total_earnings == 10
    assert window.losses_label.text() == "Losses: €2"
    assert window.earnings_label.text() == "Earnings: €10"
    assert not window.drawn_widget.isHidden()
    assert not window.history_widget.isHidden()
    assert window.history_rows_layout.count() == 1
    assert "3 matched + bonus" in window.result_label.text()

    row = window.drawn_row_layout.itemAt(0).widget()
    highlighted = [ball.number for ball in row.balls if ball.is_highlighted()]
    assert highlighted == [1, 2, 3]
    assert row.bonus_ball.number == 9
    assert row.bonus_ball.is_highlighted()


def test_play_with_empty_field_is_silent_noop(make_window, scripted):
    source = scripted()
    window = make_window(source)
    _fill(window, ["1", "2", "3", "4", "", "6"], "7")

    window.play_lotto()

    assert window.session_state.total_losses == 0
    assert window.last_play is None
    assert window.drawn_widget.isHidden()
    assert source.calls == []


def test_history_shows_at_most_five_rows(make_window, scripted):
    draws = [[n, n + 1, n + 2, n + 3, n + 4, n + 5, n + 6] for n in range(1, 8)]
    window = make_window(scripted(*draws))
    _fill(window, ["1", "2", "3", "4", "5", "6"], "7")

    for _ in range(7):
        window.play_lotto()

    assert window.session_state.total_losses == 14
    assert len(window.session_state.history) == 5
    assert window.session_state.history[0].main_numbers == (7, 8, 9, 10, 11, 12)


def test_prize_table_dialog_lists_every_row(qapp):
    dialog = PrizeTableDialog()
    assert dialog.table.rowCount() == len(PRIZE_TABLE)
    assert dialog.table.item(0, 2).text() == "€1,000,000"


def test_draw_row_highlights_bonus_only_when_matched(qapp):
    result = DrawResult(main_numbers=(1, 2, 3, 4, 5, 6), bonus_number=7)

    matched = DrawRow(result, matched_numbers=(2, 5), bonus_matched=True)
    plain = DrawRow(result)

    assert [ball.number for ball in matched.balls if ball.is_highlighted()] == [2, 5]
    assert matched.bonus_ball.is_highlighted()
    assert not any(ball.is_highlighted() for ball in plain.balls)
    assert not plain.bonus_ball.is_highlighted()


def test_theme_toggle_rerenders_without_touching_state(make_window, scripted):
    window = make_window(scripted([1, 2, 3, 40, 41, 42, 9]))
    _fill(window, ["1", "2", "3", "4", "5", "6"], "9")
    window.play_lotto()

    try:
        window.theme_btn.click()

        assert ThemeManager.get_theme_name() == 'dark'
        assert window.theme_btn.text() == "Light"
        assert window.theme_btn.isChecked()
        assert window.session_state.total_losses == 2
        assert window.history_rows_layout.count() == 1
        assert window.drawn_row_layout.count() == 1
    finally:
        if ThemeManager.get_theme_name() == 'dark':
            ThemeManager.toggle_theme()

    assert window.theme_btn.text() == "Dark"
    assert not window.theme_btn.isChecked()


def test_closed_window_stops_listening(make_window, scripted):
    window = make_window(scripted())
    listener = window._on_theme_changed
    assert listener in ThemeManager._listeners

    window.show()
    window.close()

    assert listener not in ThemeManager._listeners


def test_destroyed_window_stops_listening(qapp, scripted):
    window = LottoApp(engine=DrawEngine(rng=scripted()))
    listener = window._on_theme_changed
    assert listener in ThemeManager._listeners

    sip.delete(window)

    assert listener not in ThemeManager._listeners
    ThemeManager.toggle_theme()
    ThemeManager.toggle_theme()
    assert ThemeManager.get_theme_name() == 'light'
