"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_annual_net_worth import (
    GetAnnualNetWorthUseCase,
)
from src.application.use_cases.get_asset_snapshot import (
    GetMonthlyAssetSnapshotUseCase,
)
from src.application.use_cases.get_ledger_history import (
    GetLedgerHistoryUseCase,
)
from src.application.use_cases.get_ledger_stats import (
    GetMonthlyLedgerStatsUseCase,
)
from src.application.use_cases.manage_accounts import ManageAccountsUseCase
from src.application.use_cases.manage_assets import ManageAssetsUseCase
from src.application.use_cases.record_transactions import (
    RecordTransactionsUseCase,
)
from src.application.use_cases.upsert_asset_value import (
    UpsertAssetValueUseCase,
)
from src.domain.constants import (
    ACCOUNT_TYPES,
    ASSET_CATEGORIES,
    TRANSACTION_TYPES,
)
from src.domain.models import (
    AccountUsage,
    AnnualNetWorthSeries,
    LedgerMonthGroup,
    MonthKey,
    MonthlyAssetSnapshot,
    MonthlyLedgerStats,
    OperationResult,
    TransactionDraft,
)
from src.infrastructure.container import (
    build_asset_repository,
    build_database_adapter,
    build_ledger_repository,
    build_owner_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings


PAGES = ["Ledger", "Cash Flow", "Assets", "Net Worth", "Settings"]
ENTRY_ROWS = 5

_CURRENCY_SYMBOLS = {"KRW": "₩", "EUR": "€", "USD": "$"}
_ZERO_DECIMAL_CURRENCIES = {"KRW", "JPY"}


@dataclass(frozen=True)
class DashboardContext:
    """Per-run wiring shared by the pages."""

    settings: LedgerSettings
    db_port: DatabaseEnginePort
    owner_id: str


@st.cache_resource(show_spinner=False)
def _get_database_adapter() -> DatabaseEnginePort:
    """Return the process-wide database adapter."""
    return build_database_adapter()


def _build_context(settings: LedgerSettings) -> DashboardContext:
    db_port = _get_database_adapter()
    owner_id = build_owner_repository(db_port).fetch_owner_id(
        settings.owner_email
    )
    return DashboardContext(settings=settings, db_port=db_port, owner_id=owner_id)


def _require_login(settings: LedgerSettings) -> bool:
    """Return True when the visitor may see the dashboard.

    With login disabled everyone passes. Otherwise a login button is shown
    until the built-in identity provider reports a signed-in user.
    """
    if not settings.require_login:
        return True
    if getattr(st.user, "is_logged_in", False):
        return True
    st.info("Please log in to view the ledger.")
    st.button("Log in", on_click=st.login)
    return False


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code, currency_code)
    places = 0 if currency_code in _ZERO_DECIMAL_CURRENCIES else 2
    return f"{value:,.{places}f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_delta_with_percent(delta: Decimal, percent: Decimal) -> str:
    """Format delta value with an already computed percentage change."""
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _render_result(result: OperationResult) -> None:
    if result.success:
        st.success(result.message)
    else:
        st.error(result.message)


def _month_selector(key: str, today: MonthKey) -> MonthKey:
    """Render year/month pickers in the sidebar and return the choice."""
    years = list(range(today.year - 10, today.year + 2))
    year = st.sidebar.selectbox(
        "Year",
        years,
        index=years.index(today.year),
        key=f"{key}_year",
    )
    month = st.sidebar.selectbox(
        "Month",
        list(range(1, 13)),
        index=today.month - 1,
        key=f"{key}_month",
    )
    return MonthKey(year, month)


def _coerce_date(value) -> date | None:
    """Return a date for values coming back from the data editor."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _empty_entry_rows(today: date, count: int = ENTRY_ROWS) -> list[dict]:
    return [
        {
            "date": today,
            "description": "",
            "amount": "",
            "type": "EXPENSE",
            "source": None,
            "destination": None,
        }
        for _ in range(count)
    ]


def _drafts_from_rows(
    rows: Sequence[dict],
    account_ids: dict[str, str],
) -> list[TransactionDraft]:
    """Turn edited rows into drafts, skipping rows left blank.

    Args:
        rows: Rows returned by the data editor.
        account_ids: Account ids keyed by account name.

    Returns:
        list[TransactionDraft]: One draft per filled-in row.
    """
    drafts = []
    for row in rows:
        description = str(row.get("description") or "").strip()
        amount = str(row.get("amount") or "").strip()
        if not description and not amount:
            continue
        source = row.get("source") or ""
        destination = row.get("destination") or ""
        drafts.append(
            TransactionDraft(
                tx_date=_coerce_date(row.get("date")),
                description=description,
                amount=amount,
                transaction_type=row.get("type") or "",
                source_account_id=account_ids.get(source, source),
                destination_account_id=account_ids.get(
                    destination,
                    destination,
                ),
            )
        )
    return drafts


def _history_rows(
    group: LedgerMonthGroup,
    currency_code: str,
) -> list[dict[str, str]]:
    rows = []
    for tx in group.transactions:
        debit = tx.debit_entry
        credit = tx.credit_entry
        rows.append(
            {
                "Date": tx.tx_date.isoformat(),
                "Description": tx.description,
                "Type": tx.transaction_type,
                "From": credit.account_name if credit else "—",
                "To": debit.account_name if debit else "—",
                "Amount": _format_currency(tx.amount, currency_code),
            }
        )
    return rows


def _ledger_chart_data(
    stats: Sequence[MonthlyLedgerStats],
) -> list[dict[str, str | float]]:
    """Return long-form rows (one per month and series) for Altair."""
    data: list[dict[str, str | float]] = []
    for bucket in stats:
        data.append(
            {
                "month": bucket.month.label(),
                "series": "Income",
                "amount": float(bucket.income),
            }
        )
        data.append(
            {
                "month": bucket.month.label(),
                "series": "Expense",
                "amount": float(bucket.expense),
            }
        )
    return data


def _ledger_table_rows(
    stats: Sequence[MonthlyLedgerStats],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Month": bucket.month.label(),
            "Income": _format_currency(bucket.income, currency_code),
            "Expense": _format_currency(bucket.expense, currency_code),
            "Net": _format_currency(bucket.net, currency_code),
        }
        for bucket in stats
    ]


def _snapshot_rows(
    snapshot: MonthlyAssetSnapshot,
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Category": item.category,
            "Total": _format_currency(item.total, currency_code),
            "Previous": _format_currency(item.previous_total, currency_code),
            "Change": _format_delta_with_percent(
                item.change,
                item.change_percent,
            ),
        }
        for item in snapshot.categories
    ]


def _net_worth_chart_data(
    series: AnnualNetWorthSeries,
) -> list[dict[str, str | float]]:
    """Return long-form rows for the annual net worth chart."""
    data: list[dict[str, str | float]] = []
    for point in series.points:
        label = point.month.label()
        data.extend(
            [
                {
                    "month": label,
                    "series": "Assets",
                    "amount": float(point.summary.asset_total),
                },
                {
                    "month": label,
                    "series": "Liabilities",
                    "amount": float(point.summary.liability_total),
                },
                {
                    "month": label,
                    "series": "Net Worth",
                    "amount": float(point.summary.net_worth),
                },
            ]
        )
    return data


def _account_rows(usages: Sequence[AccountUsage]) -> list[dict]:
    return [
        {
            "Name": usage.account.name,
            "Type": usage.account.account_type,
            "Entries": usage.usage_count,
        }
        for usage in usages
    ]


def _render_ledger_page(context: DashboardContext, today: date) -> None:
    """Batch entry form and the recent history."""
    ledger_repository = build_ledger_repository(context.db_port)
    currency_code = context.settings.currency_code
    accounts = ledger_repository.fetch_accounts(context.owner_id)
    account_ids = {account.name: account.id for account in accounts}
    account_names = sorted(account_ids)

    st.subheader("New transactions")
    if not accounts:
        st.warning("No accounts yet. Run the seed command or add some.")
    rows = st.data_editor(
        _empty_entry_rows(today),
        num_rows="dynamic",
        hide_index=True,
        key="ledger_entries",
        column_config={
            "date": st.column_config.DateColumn("Date", required=True),
            "description": st.column_config.TextColumn("Description"),
            "amount": st.column_config.TextColumn("Amount"),
            "type": st.column_config.SelectboxColumn(
                "Type",
                options=list(TRANSACTION_TYPES),
                required=True,
            ),
            "source": st.column_config.SelectboxColumn(
                "From",
                options=account_names,
            ),
            "destination": st.column_config.SelectboxColumn(
                "To",
                options=account_names,
            ),
        },
    )
    if st.button("Save transactions", type="primary"):
        use_case = RecordTransactionsUseCase(ledger_repository)
        result = use_case.execute(
            context.owner_id,
            _drafts_from_rows(rows, account_ids),
        )
        get_usage_logger().info(
            f"action=record_transactions success={result.success} "
            f"count={result.affected}"
        )
        _render_result(result)

    st.subheader("History")
    history = GetLedgerHistoryUseCase(
        ledger_repository,
        timezone=context.settings.timezone,
        limit=context.settings.history_limit,
    ).execute(context.owner_id)
    if not history:
        st.info("No transactions recorded yet.")
    for group in history:
        st.markdown(
            f"**{group.month.label()}** · "
            f"{_format_currency(group.total, currency_code)}"
        )
        st.dataframe(
            _history_rows(group, currency_code),
            width="stretch",
            hide_index=True,
        )


def _render_cash_flow_page(context: DashboardContext, today: date) -> None:
    """Twelve-month income and expense overview."""
    currency_code = context.settings.currency_code
    anchor = _month_selector(
        "cash_flow",
        MonthKey.from_date(today),
    )
    stats = GetMonthlyLedgerStatsUseCase(
        build_ledger_repository(context.db_port),
        timezone=context.settings.timezone,
    ).execute(context.owner_id, anchor, months=12)

    latest = stats[-1]
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric("Income", _format_currency(latest.income, currency_code))
    expense_col.metric(
        "Expense",
        _format_currency(latest.expense, currency_code),
    )
    net_col.metric("Net", _format_currency(latest.net, currency_code))

    chart = alt.Chart(alt.Data(values=_ledger_chart_data(stats))).mark_bar(
        cornerRadiusTopLeft=3,
        cornerRadiusTopRight=3,
    ).encode(
        x=alt.X("month:N", title=None),
        xOffset="series:N",
        y=alt.Y("amount:Q", title=currency_code),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    )
    st.altair_chart(chart, width="stretch")
    st.dataframe(
        _ledger_table_rows(stats, currency_code),
        width="stretch",
        hide_index=True,
    )


def _render_assets_page(context: DashboardContext, today: date) -> None:
    """Monthly snapshot by category with a value editor."""
    currency_code = context.settings.currency_code
    asset_repository = build_asset_repository(context.db_port)
    month = _month_selector("assets", MonthKey.from_date(today))

    with st.form("asset_value_form", clear_on_submit=True):
        assets = asset_repository.fetch_assets(context.owner_id)
        labels = {f"{asset.name} ({asset.category})": asset for asset in assets}
        choice = st.selectbox("Asset", list(labels))
        amount = st.text_input("Value", placeholder="0")
        submitted = st.form_submit_button(f"Save value for {month.label()}")
    if submitted and choice:
        result = UpsertAssetValueUseCase(asset_repository).execute(
            context.owner_id,
            labels[choice].id,
            month.year,
            month.month,
            amount,
        )
        get_usage_logger().info(
            f"action=upsert_asset_value success={result.success}"
        )
        _render_result(result)

    snapshot = GetMonthlyAssetSnapshotUseCase(asset_repository).execute(
        context.owner_id,
        month,
    )
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(snapshot.total_assets, currency_code),
        _format_delta(snapshot.total_assets - snapshot.previous.asset_total),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(snapshot.total_liabilities, currency_code),
        _format_delta(
            snapshot.total_liabilities - snapshot.previous.liability_total
        ),
        delta_color="inverse",
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(snapshot.net_worth, currency_code),
        _format_delta(snapshot.net_worth_change),
    )
    st.dataframe(
        _snapshot_rows(snapshot, currency_code),
        width="stretch",
        hide_index=True,
    )
    for category in snapshot.categories:
        if not category.positions:
            continue
        with st.expander(category.category):
            st.dataframe(
                [
                    {
                        "Asset": position.asset.name,
                        "Value": _format_currency(
                            position.current_value,
                            currency_code,
                        ),
                        "Change": _format_delta_with_percent(
                            position.change,
                            position.change_percent,
                        ),
                    }
                    for position in category.positions
                ],
                width="stretch",
                hide_index=True,
            )


def _render_net_worth_page(context: DashboardContext, today: date) -> None:
    """Annual net worth series with year-over-year figures."""
    currency_code = context.settings.currency_code
    this_month = MonthKey.from_date(today)
    years = list(range(this_month.year - 10, this_month.year + 1))
    year = st.sidebar.selectbox(
        "Year",
        years,
        index=len(years) - 1,
        key="net_worth_year",
    )
    series = GetAnnualNetWorthUseCase(
        build_asset_repository(context.db_port),
        timezone=context.settings.timezone,
    ).execute(context.owner_id, year, today=this_month)

    latest = series.latest
    net_worth = latest.summary.net_worth if latest else Decimal("0")
    net_col, change_col, average_col = st.columns(3)
    net_col.metric("Net Worth", _format_currency(net_worth, currency_code))
    change_col.metric(
        f"Change vs Dec {year - 1}",
        _format_currency(series.year_change, currency_code),
        f"{series.year_change_percent:.2f}%",
    )
    average_col.metric(
        "Average Net Worth",
        _format_currency(series.average_net_worth, currency_code),
    )

    if not series.points:
        st.info("No months to show for this year yet.")
        return
    chart = alt.Chart(alt.Data(values=_net_worth_chart_data(series))).mark_line(
        point=True,
    ).encode(
        x=alt.X("month:N", title=None),
        y=alt.Y("amount:Q", title=currency_code),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Assets", "Liabilities", "Net Worth"],
                range=["#1b9aaa", "#e76f51", "#f6c453"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.0f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_settings_page(context: DashboardContext, today: date) -> None:
    """Account and asset administration."""
    accounts_use_case = ManageAccountsUseCase(
        build_ledger_repository(context.db_port)
    )
    assets_use_case = ManageAssetsUseCase(
        build_asset_repository(context.db_port)
    )
    usage_logger = get_usage_logger()

    st.subheader("Accounts")
    grouped = accounts_use_case.list_grouped(context.owner_id)
    for title, usages in (
        ("Assets & Liabilities", grouped.balance_sheet),
        ("Expenses", grouped.expense),
        ("Revenue", grouped.revenue),
    ):
        st.caption(title)
        st.dataframe(_account_rows(usages), width="stretch", hide_index=True)

    with st.form("create_account", clear_on_submit=True):
        name = st.text_input("Account name")
        account_type = st.selectbox("Type", list(ACCOUNT_TYPES))
        if st.form_submit_button("Add account"):
            result = accounts_use_case.create(
                context.owner_id,
                name,
                account_type,
            )
            usage_logger.info(f"action=create_account success={result.success}")
            _render_result(result)

    all_accounts = {
        usage.account.name: usage.account.id
        for usage in accounts_use_case.list_accounts(context.owner_id)
    }
    if all_accounts:
        selected = st.selectbox("Account", list(all_accounts))
        new_name = st.text_input("New name", key="rename_account_name")
        rename_col, delete_col = st.columns(2)
        if rename_col.button("Rename account"):
            _render_result(
                accounts_use_case.rename(
                    context.owner_id,
                    all_accounts[selected],
                    new_name,
                )
            )
        if delete_col.button("Delete account"):
            result = accounts_use_case.delete(
                context.owner_id,
                all_accounts[selected],
            )
            usage_logger.info(f"action=delete_account success={result.success}")
            _render_result(result)

    st.subheader("Assets")
    by_category = assets_use_case.list_by_category(context.owner_id)
    st.dataframe(
        [
            {"Category": category, "Asset": asset.name}
            for category, items in by_category.items()
            for asset in items
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("create_asset", clear_on_submit=True):
        asset_name = st.text_input("Asset name")
        category = st.selectbox("Category", list(ASSET_CATEGORIES))
        if st.form_submit_button("Add asset"):
            result = assets_use_case.create(context.owner_id, asset_name, category)
            usage_logger.info(f"action=create_asset success={result.success}")
            _render_result(result)

    all_assets = {
        asset.name: asset.id
        for asset in assets_use_case.list_assets(context.owner_id)
    }
    if all_assets:
        selected_asset = st.selectbox("Asset", list(all_assets))
        new_asset_name = st.text_input("New name", key="rename_asset_name")
        rename_col, delete_col = st.columns(2)
        if rename_col.button("Rename asset"):
            _render_result(
                assets_use_case.rename(
                    context.owner_id,
                    all_assets[selected_asset],
                    new_asset_name,
                )
            )
        if delete_col.button("Delete asset"):
            result = assets_use_case.delete(
                context.owner_id,
                all_assets[selected_asset],
            )
            usage_logger.info(f"action=delete_asset success={result.success}")
            _render_result(result)


def _page_renderers() -> dict[
    str,
    Callable[[DashboardContext, date], None],
]:
    return {
        "Ledger": _render_ledger_page,
        "Cash Flow": _render_cash_flow_page,
        "Assets": _render_assets_page,
        "Net Worth": _render_net_worth_page,
        "Settings": _render_settings_page,
    }


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Ledger", layout="wide")
    st.title("Household Ledger")

    settings = build_settings()
    if not _require_login(settings):
        st.stop()
        return

    page = st.sidebar.selectbox("Page", PAGES)
    context = _build_context(settings)
    get_usage_logger().info(f"page={page} owner={context.owner_id}")
    renderer = _page_renderers()[page]
    renderer(context, datetime.now(settings.zone).date())


if __name__ == "__main__":  # pragma: no cover
    main()
