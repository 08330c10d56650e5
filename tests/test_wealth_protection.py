import logging
from datetime import date

from analysis.wealth_protection import (
    ValidationReport,
    WealthScenario,
    generate_recommendations,
    longest_consecutive_run,
    scenarios_from_series,
    validate_preset,
    validate_wealth_protection,
)
from core.results import CheckResult
from core.schema import (
    Expense,
    FinancialModel,
    FixedGrowth,
    Income,
    Investment,
    Loan,
    OneTime,
    Recurring,
    Retirement,
    SafetySavingsRule,
)
from core.utils import age_month
from engine.projection import simulate


def _scenario(m, **overrides):
    values = dict(
        month_index=m,
        net_worth=1000.0,
        investments_total=0.0,
        monthly_income=1000.0,
        monthly_expenses=100.0,
        monthly_contributions=0.0,
        investment_withdrawal=0.0,
        wealth_warning=False,
        savings_depleted=False,
    )
    values.update(overrides)
    return WealthScenario(**values)


def _warning(m):
    return _scenario(m, net_worth=-50.0, investments_total=100.0, wealth_warning=True)


def test_clean_run_is_valid():
    report = validate_wealth_protection([_scenario(m) for m in range(12)])
    assert report.is_valid
    assert report.warnings == report.errors == report.suggestions == []
    assert "All checks passed" in report.summary()


def test_long_negative_run_is_an_error():
    scenarios = [_scenario(m) for m in range(5)] + [_warning(m) for m in range(5, 13)]
    report = validate_wealth_protection(scenarios)
    assert report.warnings[0] == (
        "Found 8 months with negative net worth despite available investments"
    )
    assert any("(8 months)" in e for e in report.errors)
    assert not report.is_valid
    assert report.suggestions == [
        "Consider reducing monthly expenses",
        "Increase emergency fund target",
        "Review investment withdrawal strategy",
    ]


def test_short_or_broken_runs_only_warn():
    six = validate_wealth_protection([_warning(m) for m in range(6)])
    assert six.is_valid
    assert len(six.warnings) == 1

    gapped = [_warning(m) for m in range(5)] + [_warning(m) for m in range(10, 15)]
    report = validate_wealth_protection(gapped)
    assert report.is_valid
    assert "Found 10 months" in report.warnings[0]


def test_longest_consecutive_run():
    assert longest_consecutive_run([]) == 0
    assert longest_consecutive_run([4]) == 1
    assert longest_consecutive_run([1, 2, 3, 7, 8, 9, 10, 20]) == 4


def test_depletion_is_an_error():
    scenarios = [_scenario(0), _scenario(1, net_worth=-10.0, savings_depleted=True)]
    report = validate_wealth_protection(scenarios)
    assert report.errors == ["Savings depleted in 1 months - critical financial risk"]
    assert "Build larger emergency fund" in report.suggestions
    assert not report.is_valid


def test_ratio_warnings_do_not_invalidate():
    scenarios = [
        _scenario(m, monthly_income=1000.0, monthly_expenses=950.0, monthly_contributions=600.0)
        for m in range(3)
    ]
    report = validate_wealth_protection(scenarios)
    assert report.is_valid
    assert any("High investment contribution rate" in w for w in report.warnings)
    assert any("High expense ratio" in w for w in report.warnings)


def test_empty_series():
    assert validate_wealth_protection([]).is_valid
    assert generate_recommendations([]) == []


def test_simulated_series_feeds_analyzer(worker_model):
    series = simulate(worker_model)
    scenarios = scenarios_from_series(series)
    assert len(scenarios) == 1200
    assert scenarios[400].monthly_contributions == series[400].contrib
    report = validate_wealth_protection(scenarios, worker_model)
    assert report.is_valid == (not report.errors)


def _preset(**overrides):
    values = dict(
        dob="1990-01-01",
        inflation=None,
        incomes=(Income("job", "Job", 5000.0, Recurring(start=age_month(22))),),
        expenses=(Expense("rent", "Rent", 2000.0, Recurring(start=age_month(22))),),
        safety_savings=(SafetySavingsRule("ss", "Fund", age_month(22), 6, 2000.0),),
    )
    values.update(overrides)
    return FinancialModel(**values)


def test_preset_expenses_over_income(flat_inflation):
    model = _preset(
        inflation=flat_inflation,
        incomes=(Income("job", "Job", 3000.0, Recurring(start=age_month(22))),),
        expenses=(
            Expense("rent", "Rent", 4000.0, Recurring(start=age_month(22))),
            Expense("trip", "Trip", 9000.0, OneTime(at=age_month(30))),
        ),
    )
    report = validate_preset(model)
    assert report.errors == ["Monthly expenses ($4,000) exceed income ($3,000)"]
    assert not report.is_valid


def test_preset_contributions_over_available(flat_inflation):
    model = _preset(
        inflation=flat_inflation,
        investments=(
            Investment("i", "Fund", 0.0, Recurring(start=age_month(25)), FixedGrowth(0.05),
                       recurring_amount=1000.0),
        ),
        loans=(Loan("l", "Mortgage", 300000.0, 2500.0, Recurring(start=age_month(30)), 0.04),),
    )
    report = validate_preset(model)
    assert report.is_valid
    assert report.warnings == [
        "Investment contributions ($1,000) exceed available income after expenses "
        "and loans ($500)"
    ]


def test_preset_thin_emergency_fund(flat_inflation):
    report = validate_preset(_preset(inflation=flat_inflation, safety_savings=()))
    assert any("(0 months)" in w for w in report.warnings)


def test_preset_early_retirement(flat_inflation):
    early = _preset(inflation=flat_inflation, retirement=Retirement(age=50, withdrawal_rate=0.04))
    report = validate_preset(early, today=date(2026, 1, 1))
    assert "Early retirement target may require higher savings rate (20%+ of income)" in (
        report.warnings
    )

    late = _preset(inflation=flat_inflation, retirement=Retirement(age=65, withdrawal_rate=0.04))
    assert validate_preset(late, today=date(2026, 1, 1)).warnings == []


def test_recommendations():
    scenarios = [
        _scenario(
            m,
            monthly_income=100.0,
            monthly_expenses=1000.0,
            investment_withdrawal=50.0,
            net_worth=-10000.0,
        )
        for m in range(10)
    ]
    assert generate_recommendations(scenarios) == [
        "Consider reducing monthly expenses or increasing income",
        "Frequent investment withdrawals detected - review spending patterns",
        "Consider building larger emergency fund (6+ months expenses)",
    ]
    assert generate_recommendations([_scenario(m) for m in range(10)]) == []


def test_report_summary_lists_sections():
    report = validate_wealth_protection([_warning(m) for m in range(8)])
    text = report.summary()
    assert "ERRORS (1)" in text
    assert "WARNINGS (1)" in text
    assert "SUGGESTIONS (3)" in text
    assert "  → Consider reducing monthly expenses" in text


def test_report_shares_check_result_shape():
    report = ValidationReport()
    assert isinstance(report, CheckResult)
    assert report.is_valid
    assert report.summary() == "✓ All checks passed."
    report.suggestions.append("Build larger emergency fund")
    assert report.is_valid
    assert report.summary() == "SUGGESTIONS (1):\n  → Build larger emergency fund"


def test_preset_and_recommendations_log_counts(flat_inflation, caplog):
    model = FinancialModel(
        dob="1990-01-01",
        inflation=flat_inflation,
        expenses=(Expense("e", "Rent", 1000.0, Recurring(start=age_month(25))),),
    )
    with caplog.at_level(logging.DEBUG, logger="analysis.wealth_protection"):
        validate_preset(model, today=date(2026, 1, 1))
        generate_recommendations([_scenario(m) for m in range(4)])
    assert "Preset check: 2 warnings, 1 errors" in caplog.text
    assert "0 recommendations over 4 months" in caplog.text
