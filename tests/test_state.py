"""
Unit tests for grid state transitions.
"""

import pytest

from models.state import DEFAULT_ROWS_PER_PAGE, PageState, TableState

pytestmark = pytest.mark.unit


class TestPageState:
    def test_defaults(self):
        state = TableState()
        assert state.page.current_page == 1
        assert state.page.rows_per_page == DEFAULT_ROWS_PER_PAGE == 15

    @pytest.mark.parametrize("rows", [0, 10, 20, 200])
    def test_rows_per_page_must_be_an_option(self, rows):
        with pytest.raises(ValueError):
            PageState(rows_per_page=rows)

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            PageState(current_page=0)


class TestTransitions:
    def test_rows_per_page_change_resets_page(self):
        state = TableState().set_page(3, total_pages=3)
        assert state.page.current_page == 3

        changed = state.set_rows_per_page(50)
        assert changed.page.current_page == 1
        assert changed.page.rows_per_page == 50
        assert state.page.current_page == 3

    def test_invalid_rows_per_page_event(self):
        with pytest.raises(ValueError):
            TableState().set_rows_per_page(33)

    def test_set_page_clamps(self):
        state = TableState()
        assert state.set_page(99, total_pages=4).page.current_page == 4
        assert state.set_page(-1, total_pages=4).page.current_page == 1
        assert state.set_page(2, total_pages=0).page.current_page == 1

    @pytest.mark.parametrize(
        "event,args",
        [
            ("set_search", ("policyNumber", "POL")),
            ("set_column_filter", ("insuredName", "tech")),
            ("set_date_range", ("2024-01-01", "2024-12-31")),
            ("clear_filters", ()),
        ],
    )
    def test_filter_events_reset_page(self, event, args):
        state = TableState().set_page(2, total_pages=5)
        assert getattr(state, event)(*args).page.current_page == 1

    def test_filter_events_keep_rows_per_page(self):
        state = TableState().set_rows_per_page(25).set_search("policyNumber", "POL")
        assert state.page.rows_per_page == 25

    def test_clear_filters(self):
        state = (
            TableState()
            .set_search("policyNumber", "POL")
            .set_column_filter("insuredName", "tech")
            .set_date_range("2024-01-01", "")
        )
        assert not state.filters.is_empty()
        assert state.filters.active_columns() == {"insuredName": "tech"}
        assert state.clear_filters().filters.is_empty()

    def test_initial_seeds_date_range(self):
        state = TableState.initial(rows_per_page=25, date_from="2024-01-01", date_to="2024-12-31")
        assert state.filters.date_from == "2024-01-01"
        assert state.filters.date_to == "2024-12-31"
        assert state.page.rows_per_page == 25
