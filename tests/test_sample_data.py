from datetime import date

import numpy as np
import pytest
from faker import Faker

from table_report.errors import ConfigurationError
from table_report.sample_data import EXPENSE_COLUMNS, generate_expense_rows, sum_amounts


def make_rows(n, seed=7, **kwargs):
    fake = Faker()
    fake.seed_instance(seed)
    return generate_expense_rows(n, np.random.default_rng(seed), fake, **kwargs)


def test_rows_match_columns_and_period():
    rows = make_rows(30, period_start=date(2025, 3, 1), period_end=date(2025, 3, 31))
    assert len(rows) == 30
    assert all(len(row) == len(EXPENSE_COLUMNS) for row in rows)
    dates = [row[0] for row in rows]
    assert dates == sorted(dates)
    assert all("2025-03-01" <= d <= "2025-03-31" for d in dates)


def test_same_seed_same_rows():
    assert make_rows(10) == make_rows(10)


def test_sum_amounts_skips_blank_and_text():
    rows = [["a", "1,000.50"], ["b", None], ["c", "n/a"], ["d", "2.25"]]
    assert sum_amounts(rows) == 1002.75


def test_reversed_period_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        make_rows(3, period_start=date(2025, 2, 1), period_end=date(2025, 1, 1))
