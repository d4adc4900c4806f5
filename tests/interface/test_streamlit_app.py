"""Tests for the Streamlit app module."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.use_cases.record_transactions import (
    RecordTransactionsUseCase,
)
from src.domain.models import (
    EntryRecord,
    LedgerMonthGroup,
    MonthKey,
    MonthlyLedgerStats,
    OperationResult,
    TransactionRecord,
)
from src.infrastructure.settings import LedgerSettings


class _FakeSidebar:
    def __init__(self, choice: str) -> None:
        self.choice = choice

    def selectbox(self, label, options, **_kwargs):
        return self.choice


class _FakeStreamlit:
    def __init__(self, page: str = "Ledger", logged_in: bool = False) -> None:
        self.sidebar = _FakeSidebar(page)
        self.user = SimpleNamespace(is_logged_in=logged_in)
        self.config_called = False
        self.title_text = None
        self.stopped = False
        self.infos: list[str] = []
        self.buttons: list[tuple[str, object]] = []
        self.successes: list[str] = []
        self.errors: list[str] = []

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def info(self, text: str):
        self.infos.append(text)

    def button(self, label: str, on_click=None, **_kwargs):
        self.buttons.append((label, on_click))
        return False

    def login(self):
        pass

    def stop(self):
        self.stopped = True

    def success(self, text: str):
        self.successes.append(text)

    def error(self, text: str):
        self.errors.append(text)


def test_format_currency_uses_symbol_and_precision():
    assert app._format_currency(Decimal("1234567"), "KRW") == "1,234,567 ₩"
    assert app._format_currency(Decimal("1234.5"), "EUR") == "1,234.50 €"
    assert app._format_currency(Decimal("10"), "GBP") == "10.00 GBP"


def test_format_delta_helpers():
    assert app._format_delta(Decimal("200")) == "+200.00"
    assert app._format_delta(Decimal("-5")) == "-5.00"
    assert (
        app._format_delta_with_percent(Decimal("200"), Decimal("25"))
        == "+200.00 (+25.00%)"
    )
    assert (
        app._format_delta_with_percent(Decimal("0"), Decimal("0"))
        == "+0.00 (+0.00%)"
    )


def test_coerce_date_accepts_editor_values():
    assert app._coerce_date(None) is None
    assert app._coerce_date("") is None
    assert app._coerce_date(date(2024, 5, 1)) == date(2024, 5, 1)
    assert app._coerce_date(datetime(2024, 5, 1, 9, 30)) == date(2024, 5, 1)
    assert app._coerce_date("2024-05-01T00:00:00") == date(2024, 5, 1)


def test_malformed_editor_date_is_reported_as_missing():
    rows = [
        {
            "date": "05/01/2024",
            "description": "Lunch",
            "amount": "9000",
            "type": "EXPENSE",
            "source": "Cash",
            "destination": "Food",
        }
    ]

    drafts = app._drafts_from_rows(rows, {})
    repository = MagicMock()
    repository.fetch_accounts.return_value = []
    result = RecordTransactionsUseCase(repository, logger=MagicMock()).execute(
        "owner-1",
        drafts,
    )

    assert app._coerce_date("not a date") is None
    assert drafts[0].tx_date is None
    assert result.success is False
    assert result.message == "Row 1: Date is required."
    repository.create_transactions.assert_not_called()


def test_drafts_from_rows_skips_blank_rows_and_maps_names():
    rows = app._empty_entry_rows(date(2024, 5, 1), count=2)
    rows[0].update(
        {
            "description": "Lunch",
            "amount": "9,000",
            "source": "Cash",
            "destination": "Food",
        }
    )

    drafts = app._drafts_from_rows(rows, {"Cash": "id-cash", "Food": "id-food"})

    assert len(drafts) == 1
    draft = drafts[0]
    assert draft.tx_date == date(2024, 5, 1)
    assert draft.amount == "9,000"
    assert draft.transaction_type == "EXPENSE"
    assert draft.source_account_id == "id-cash"
    assert draft.destination_account_id == "id-food"


def test_drafts_from_rows_passes_unknown_names_through():
    rows = [
        {
            "date": date(2024, 5, 1),
            "description": "Gift",
            "amount": "10",
            "type": "EXPENSE",
            "source": "Ghost",
            "destination": None,
        }
    ]

    draft = app._drafts_from_rows(rows, {})[0]

    assert draft.source_account_id == "Ghost"
    assert draft.destination_account_id == ""


def test_history_rows_show_both_sides():
    group = LedgerMonthGroup(
        month=MonthKey(2024, 5),
        transactions=[
            TransactionRecord(
                id="t1",
                tx_date=date(2024, 5, 3),
                description="Lunch",
                transaction_type="EXPENSE",
                entries=[
                    EntryRecord("food", "Food", Decimal("9000")),
                    EntryRecord("cash", "Cash", Decimal("-9000")),
                ],
            )
        ],
        total=Decimal("9000"),
    )

    rows = app._history_rows(group, "KRW")

    assert rows == [
        {
            "Date": "2024-05-03",
            "Description": "Lunch",
            "Type": "EXPENSE",
            "From": "Cash",
            "To": "Food",
            "Amount": "9,000 ₩",
        }
    ]


def test_ledger_chart_data_has_two_series_per_month():
    stats = [
        MonthlyLedgerStats(MonthKey(2024, 4), Decimal("10"), Decimal("4")),
        MonthlyLedgerStats(MonthKey(2024, 5), Decimal("0"), Decimal("0")),
    ]

    data = app._ledger_chart_data(stats)
    table = app._ledger_table_rows(stats, "EUR")

    assert len(data) == 4
    assert data[0] == {"month": "2024-04", "series": "Income", "amount": 10.0}
    assert data[1]["series"] == "Expense"
    assert table[0]["Net"] == "6.00 €"


def test_render_result_routes_by_outcome(monkeypatch):
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_result(OperationResult.ok("Saved."))
    app._render_result(OperationResult.fail("Nope."))

    assert fake_st.successes == ["Saved."]
    assert fake_st.errors == ["Nope."]


def test_require_login_skipped_when_disabled(monkeypatch):
    fake_st = _FakeStreamlit(logged_in=False)
    monkeypatch.setattr(app, "st", fake_st)

    assert app._require_login(LedgerSettings(require_login=False)) is True
    assert fake_st.buttons == []


def test_require_login_shows_button_for_anonymous_user(monkeypatch):
    fake_st = _FakeStreamlit(logged_in=False)
    monkeypatch.setattr(app, "st", fake_st)

    assert app._require_login(LedgerSettings(require_login=True)) is False
    assert fake_st.buttons == [("Log in", fake_st.login)]


def test_require_login_passes_signed_in_user(monkeypatch):
    fake_st = _FakeStreamlit(logged_in=True)
    monkeypatch.setattr(app, "st", fake_st)

    assert app._require_login(LedgerSettings(require_login=True)) is True


def test_build_context_resolves_owner(monkeypatch):
    owners = MagicMock()
    owners.fetch_owner_id.return_value = "owner-1"
    monkeypatch.setattr(app, "_get_database_adapter", lambda: "adapter")
    monkeypatch.setattr(app, "build_owner_repository", lambda port: owners)

    context = app._build_context(LedgerSettings(owner_email="me@example.com"))

    assert context.db_port == "adapter"
    assert context.owner_id == "owner-1"
    owners.fetch_owner_id.assert_called_once_with("me@example.com")


def test_main_stops_when_login_is_required(monkeypatch):
    fake_st = _FakeStreamlit(logged_in=False)
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: LedgerSettings(require_login=True),
    )
    monkeypatch.setattr(
        app,
        "_build_context",
        lambda settings: (_ for _ in ()).throw(AssertionError("no context")),
    )

    app.main()

    assert fake_st.config_called
    assert fake_st.title_text == "Household Ledger"
    assert fake_st.stopped is True


def test_main_renders_selected_page(monkeypatch):
    fake_st = _FakeStreamlit(page="Net Worth")
    rendered = []
    context = app.DashboardContext(
        settings=LedgerSettings(),
        db_port="adapter",
        owner_id="owner-1",
    )
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_settings", LedgerSettings)
    monkeypatch.setattr(app, "_build_context", lambda settings: context)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    monkeypatch.setattr(
        app,
        "_render_net_worth_page",
        lambda ctx, today: rendered.append((ctx, today)),
    )

    app.main()

    assert fake_st.stopped is False
    assert rendered[0][0] is context
    assert isinstance(rendered[0][1], date)
    usage_logger.info.assert_called_once_with("page=Net Worth owner=owner-1")
