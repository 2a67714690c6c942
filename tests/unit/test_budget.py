"""Budget normalization tests."""

from tripconsensus.domain.aggregation.budget import median_budget, normalize_budgets, parse_budget


def test_range_uses_rounded_midpoint():
    assert parse_budget("$1,000 - $1,500") == 1250
    assert parse_budget("$500 - $1,000") == 750
    assert parse_budget("$1 - $2") == 2


def test_open_ended_brackets_use_their_bound():
    assert parse_budget("< $500") == 500
    assert parse_budget("$2,500+") == 2500


def test_single_amount_and_compact_range():
    assert parse_budget("$750") == 750
    assert parse_budget("Budget ($500-$1000)") == 750
    assert parse_budget("$1,000–$2,000") == 1500


def test_unparseable_budget_is_excluded_not_zero():
    for text in ("", "   ", "flexible", "budget", "no idea"):
        assert parse_budget(text) is None
    assert normalize_budgets(["flexible", "$500 - $1,000", ""]) == [750]


def test_median_is_lower_median_order_statistic():
    assert median_budget([]) == 0
    assert median_budget([400]) == 400
    assert median_budget([3000, 1000, 2000]) == 2000
    # Even length picks index n // 2, never an average.
    assert median_budget([1250, 750]) == 1250
    assert median_budget([100, 200, 300, 400]) == 300


def test_median_of_survey_brackets():
    values = normalize_budgets(["$500 - $1,000", "$1,000 - $1,500"])
    assert values == [750, 1250]
    assert median_budget(values) == 1250
