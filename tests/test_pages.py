"""
Smoke tests for the Streamlit pages that read local sample data.
"""

from streamlit.testing.v1 import AppTest

from tests.conftest import REPO_ROOT

PAGES = REPO_ROOT / "pages"


def _captions(at):
    return [c.value for c in at.caption]


def _small_grid():
    from components.tables import render_data_grid
    from models.tables import POLICY_TRANSACTIONS
    from services.normalizer import normalize_records

    raw = [{"POLICY_NUMBER": f"POL00{i}"} for i in range(1, 6)]
    render_data_grid("small", POLICY_TRANSACTIONS, normalize_records(raw, POLICY_TRANSACTIONS))


class TestPolicyTransactionsPage:
    def test_first_page(self):
        at = AppTest.from_file(str(PAGES / "3_Policy_Transactions.py"), default_timeout=30).run()

        assert not at.exception
        assert "Showing 1 to 15 of 18 entries" in _captions(at)
        assert len(at.dataframe[0].value) == 15

    def test_date_range_from_query_params(self):
        at = AppTest.from_file(str(PAGES / "3_Policy_Transactions.py"), default_timeout=30)
        at.query_params["start"] = "2024-09-01"
        at.run()

        assert not at.exception
        assert "Showing 1 to 5 of 5 entries" in _captions(at)

    def test_new_query_params_replace_seeded_range(self):
        at = AppTest.from_file(str(PAGES / "3_Policy_Transactions.py"), default_timeout=30)
        at.query_params["start"] = "2024-09-01"
        at.run()
        assert "Showing 1 to 5 of 5 entries" in _captions(at)

        at.query_params["start"] = "2030-01-01"
        at.run()

        assert not at.exception
        assert "Showing 0 to 0 of 0 entries" in _captions(at)
        assert at.text_input(key="policy_transactions::date_from").value == "2030-01-01"

    def test_rows_per_page_change(self):
        at = AppTest.from_file(str(PAGES / "3_Policy_Transactions.py"), default_timeout=30).run()
        at.selectbox(key="policy_transactions::rows_per_page").set_value(25).run()

        assert "Showing 1 to 18 of 18 entries" in _captions(at)
        assert len(at.dataframe[0].value) == 18


class TestReinsurerTransactionsPage:
    def test_missing_params_show_placeholder(self):
        at = AppTest.from_file(str(PAGES / "4_Reinsurer_Transactions.py"), default_timeout=30).run()

        assert not at.exception
        assert [m.value for m in at.metric][:3] == ["N/A", "N/A", "N/A"]


class TestPolicyDetailPage:
    def test_sample_policy(self):
        at = AppTest.from_file(str(PAGES / "5_Policy_Detail_View.py"), default_timeout=30)
        at.query_params["policy"] = "POL001"
        at.run()

        assert not at.exception
        assert len(at.dataframe[0].value) == 2


class TestAnalyticsPage:
    def test_kpis(self):
        at = AppTest.from_file(str(PAGES / "6_Analytics.py"), default_timeout=30).run()

        assert not at.exception
        assert [m.value for m in at.metric] == ["$7.0M", "$4.0M", "$55.0M", "17.7%"]
        assert len(at.dataframe) == 4


class TestDataGrid:
    def test_stored_page_past_the_end_is_clamped(self):
        from models.state import PageState, TableState

        at = AppTest.from_function(_small_grid, default_timeout=30)
        at.session_state["grid::small"] = TableState(page=PageState(current_page=3))
        at.run()

        assert not at.exception
        assert "Showing 1 to 5 of 5 entries" in _captions(at)
        assert len(at.dataframe[0].value) == 5
        assert at.session_state["grid::small"].page.current_page == 1
