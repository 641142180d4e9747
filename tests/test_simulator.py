from datetime import date

from finplan.data_model import Asset, BudgetSettings, RecurringItem
from finplan.engine.simulator import generate_projection, resolve_horizon

START = date(2025, 1, 1)


def _cash(value: float = 0.0) -> Asset:
    return Asset(id="cash", name="Cash", asset_type="CASH", value=value)


def test_single_expense_no_income():
    rent = RecurringItem(id="e1", name="Rent", amount=1000.0)

    rows = generate_projection([rent], [], [], BudgetSettings(inflation_rate=2.5, months=3), start=START)

    assert [row.month for row in rows] == [date(2025, 1, 1), date(2025, 2, 1), date(2025, 3, 1)]
    for row in rows:
        assert row.total_expenses == 1000
        assert row.tax == 0
        assert row.cash_flow == -1000


def test_large_taxed_income_single_month():
    salary = RecurringItem(id="i1", name="Salary", amount=20000.0, taxable=True, flow_type="income")

    rows = generate_projection([], [salary], [], BudgetSettings(months=1), start=START)

    assert len(rows) == 1
    row = rows[0]
    assert row.total_income_before_tax == 20000
    assert row.tax == 7431
    assert row.total_income_after_tax == 20000 - 7431
    assert row.net_income == row.total_income_after_tax
    assert row.cash_flow == row.total_income_after_tax


def test_cash_flow_reinvested_into_cash_asset():
    salary = RecurringItem(id="i1", name="Salary", amount=500.0, taxable=True, flow_type="income")

    rows = generate_projection([], [salary], [_cash(1000.0)], BudgetSettings(months=2), start=START)

    assert rows[0].cash_flow == 500
    assert rows[0].asset_values["cash"] == 1500
    assert rows[1].asset_values["cash"] == 1500 + rows[1].cash_flow


def test_untaxed_income_not_taxed():
    benefit = RecurringItem(id="i1", name="Benefit", amount=20000.0, taxable=False, flow_type="income")

    rows = generate_projection([], [benefit], [], BudgetSettings(months=1), start=START)

    assert rows[0].tax == 0
    assert rows[0].total_income_after_tax == 20000


def test_sale_proceeds_credited_once():
    house = Asset(id="house", name="House", asset_type="PROPERTY", value=100000.0, sale_date=date(2025, 2, 10))

    rows = generate_projection([], [], [_cash(), house], BudgetSettings(months=4), start=START)

    assert [row.asset_values["house"] for row in rows] == [100000, 100000, 0, 0]
    assert [row.asset_sale_proceeds for row in rows] == [0, 0, 100000, 0]
    assert [row.asset_values["cash"] for row in rows] == [0, 0, 100000, 100000]
    assert sum(row.asset_sale_proceeds for row in rows) == 100000


def test_sale_without_cash_asset_is_not_reinvested():
    house = Asset(id="house", name="House", asset_type="PROPERTY", value=50000.0, sale_date=date(2025, 1, 20))

    rows = generate_projection([], [], [house], BudgetSettings(months=3), start=START)

    assert rows[1].asset_sale_proceeds == 50000
    assert rows[1].asset_values == {"house": 0}
    assert rows[1].cash_flow == 0


def test_investment_income_taxed_at_eighty_percent():
    fund = Asset(id="fund", name="Fund", asset_type="EQUITY", value=1200000.0, annual_dividend_rate=12.0)

    rows = generate_projection([], [], [fund], BudgetSettings(months=1), start=START)

    # Taxable base 9600: 628.33 basic + 2164.33 higher
    assert rows[0].investment_income == 12000
    assert rows[0].total_income_before_tax == 12000
    assert rows[0].tax == 2793


def test_tax_free_dividends_excluded_from_taxable_base():
    fund = Asset(
        id="fund",
        name="ISA",
        asset_type="EQUITY",
        value=1200000.0,
        annual_dividend_rate=12.0,
        dividend_taxable=False,
    )

    rows = generate_projection([], [], [fund], BudgetSettings(months=1), start=START)

    assert rows[0].investment_income == 12000
    assert rows[0].tax == 0


def test_asset_values_conserved_month_to_month():
    assets = [
        _cash(),
        Asset(id="savings", name="Savings", asset_type="SAVINGS", value=10000.0, annual_return=6.0),
        Asset(id="fund", name="Fund", asset_type="EQUITY", value=5000.0, annual_dividend_rate=4.0),
    ]

    rows = generate_projection([], [], assets, BudgetSettings(months=12), start=START, detailed=True)

    previous_total = sum(asset.value for asset in assets)
    for row in rows:
        returns = sum(entry["monthly_return"] for entry in row.asset_breakdown.values())
        expected = previous_total + returns + row.investment_income - row.tax
        total = sum(row.asset_values.values())
        assert abs(total - expected) <= len(assets)
        previous_total = total


def test_asset_compounds_to_annual_rate_over_twelve_months():
    savings = Asset(id="savings", name="Savings", asset_type="SAVINGS", value=10000.0, annual_return=5.0)

    rows = generate_projection([], [], [savings], BudgetSettings(months=12), start=START)

    assert abs(rows[-1].asset_values["savings"] - 10500) <= 1


def test_inputs_are_not_mutated_and_runs_are_repeatable():
    assets = [_cash(250.0), Asset(id="fund", name="Fund", asset_type="EQUITY", value=900.0, annual_return=7.0)]
    settings = BudgetSettings(months=24)

    first = generate_projection([], [], assets, settings, start=START)
    second = generate_projection([], [], assets, settings, start=START)

    assert first == second
    assert assets[0].value == 250.0
    assert assets[1].value == 900.0


def test_detailed_rows_break_down_non_zero_items():
    rent = RecurringItem(id="rent", name="Rent", amount=900.0, classification="Housing")
    later = RecurringItem(id="later", name="Later", amount=50.0, active_from=date(2025, 6, 1))
    salary = RecurringItem(id="pay", name="Salary", amount=3000.0, taxable=True, flow_type="income")

    rows = generate_projection([rent, later], [salary], [_cash()], BudgetSettings(months=1), start=START, detailed=True)

    row = rows[0]
    assert row.expense_breakdown == {"rent": {"name": "Rent", "amount": 900, "classification": "Housing"}}
    assert row.income_breakdown["pay"]["amount"] == 3000
    assert row.asset_breakdown["cash"]["is_sold"] is False
    assert "expenseBreakdown" in row.to_dict(detailed=True)
    assert "expenseBreakdown" not in row.to_dict()


def test_default_start_is_current_month():
    rows = generate_projection([], [], [], BudgetSettings(months=1))

    assert rows[0].month == date.today().replace(day=1)


def test_horizon_resolution():
    assert resolve_horizon(BudgetSettings(), START) == 360
    assert resolve_horizon(BudgetSettings(months=3), START) == 3
    assert resolve_horizon(BudgetSettings(horizon_end_date=date(2025, 6, 30)), START) == 6
    assert resolve_horizon(BudgetSettings(horizon_end_date=date(2020, 1, 1)), START) == 1
    assert resolve_horizon(BudgetSettings(months=5000), START) == 1200


def test_sold_cash_account_is_credited_once_and_stays_empty():
    cash = Asset(id="cash", name="Cash", asset_type="CASH", value=1000.0, sale_date=date(2025, 1, 10))

    rows = generate_projection([], [], [cash], BudgetSettings(months=4), start=START)

    assert [row.asset_values["cash"] for row in rows] == [1000, 0, 0, 0]
    assert [row.asset_sale_proceeds for row in rows] == [0, 1000, 0, 0]


def test_cash_flow_moves_to_next_live_cash_account_after_sale():
    old = Asset(id="old", name="Old Account", asset_type="CASH", value=1000.0, sale_date=date(2025, 1, 31))
    new = Asset(id="new", name="New Account", asset_type="CASH", value=0.0)
    benefit = RecurringItem(id="b", name="Benefit", amount=500.0, flow_type="income")

    rows = generate_projection([], [benefit], [old, new], BudgetSettings(months=3), start=START)

    assert [row.asset_values["old"] for row in rows] == [1500, 0, 0]
    assert [row.asset_values["new"] for row in rows] == [0, 2000, 2500]
    assert sum(row.asset_sale_proceeds for row in rows) == 1500


def test_asset_sold_before_start_is_liquidated_in_first_month():
    house = Asset(id="house", name="House", asset_type="PROPERTY", value=20000.0, sale_date=date(2024, 6, 1))

    rows = generate_projection([], [], [_cash(), house], BudgetSettings(months=2), start=START)

    assert [row.asset_values["house"] for row in rows] == [0, 0]
    assert [row.asset_sale_proceeds for row in rows] == [20000, 0]
    assert [row.asset_values["cash"] for row in rows] == [20000, 20000]
