"""
Tests for the summary service.
"""

from __future__ import annotations

from datetime import date

from kakeibo.model.item import Category, EntryKind
from kakeibo.services.summary_service import (
    SummaryService,
    filter_by_month,
    filter_by_period,
    format_month,
    format_price,
    monthly_totals,
    summarize,
    target_months,
)


class DescribeMonthlyHelpers:
    def it_should_collect_distinct_months_in_order(self, sample_items):
        assert target_months(sample_items) == [date(2022, 1, 1), date(2022, 2, 1), date(2022, 4, 1)]

    def it_should_filter_by_any_day_of_the_month(self, sample_items):
        assert filter_by_month(sample_items, date(2022, 4, 20)) == [sample_items[4]]

    def it_should_not_mix_same_month_of_other_years(self, sample_items):
        assert filter_by_month(sample_items, date(2023, 1, 1)) == []

    def it_should_sum_signed_amounts(self, sample_items):
        assert summarize(sample_items[0:3]) == 195000

    def it_should_sum_nothing_to_zero(self):
        assert summarize([]) == 0

    def it_should_total_each_month(self, sample_items):
        assert monthly_totals(sample_items) == {
            date(2022, 1, 1): 195000,
            date(2022, 2, 1): -3000,
            date(2022, 4, 1): -10000,
        }

    def it_should_filter_by_year_and_month(self, sample_items):
        assert filter_by_period(sample_items, year=2022, month=1) == sample_items[0:3]
        assert filter_by_period(sample_items, year=2021) == []
        assert filter_by_period(sample_items) == sample_items


class DescribeFormatting:
    def it_should_format_month_without_padding(self):
        assert format_month(date(2022, 4, 20)) == "2022/4"
        assert format_month(date(2022, 12, 1)) == "2022/12"

    def it_should_prefix_positive_amounts_with_plus(self):
        assert format_price(1000) == "+1000"
        assert format_price(-1000) == "-1000"
        assert format_price(0) == "0"


class DescribeSummaryService:
    def it_should_restrict_monthly_totals_to_a_year(self, sample_items):
        assert SummaryService(sample_items).monthly(year=2023) == {}
        assert list(SummaryService(sample_items).monthly(year=2022)) == target_months(sample_items)

    def it_should_compute_overall_balance(self, sample_items):
        balance = SummaryService(sample_items).balance()

        assert balance.income == 300000
        assert balance.expense == 118000
        assert balance.net == 182000
        assert balance.count == 5

    def it_should_match_sum_of_monthly_totals(self, sample_items):
        service = SummaryService(sample_items)
        assert service.balance().net == sum(service.monthly().values())

    def it_should_order_categories_income_first_then_menu_order(self, sample_items):
        rows = SummaryService(sample_items).balance().by_category

        assert [str(r.category) for r in rows] == [
            "Income:Salary",
            "Expense:Food",
            "Expense:Hobby",
            "Expense:Other",
        ]
        food = rows[1]
        assert food.category == Category(kind=EntryKind.expense, name="Food")
        assert food.count == 2
        assert food.amount == -8000

    def it_should_compute_balance_for_one_month(self, sample_items):
        balance = SummaryService(sample_items).balance(year=2022, month=2)

        assert balance.income == 0
        assert balance.expense == 3000
        assert balance.net == -3000

    def it_should_return_zero_balance_for_no_items(self):
        balance = SummaryService([]).balance()
        assert (balance.income, balance.expense, balance.net, balance.by_category) == (0, 0, 0, [])
