"""Generate sample expense rows for demo reports."""

from datetime import date, timedelta
from typing import List, Optional, Sequence

import numpy as np
from faker import Faker

from .errors import ConfigurationError

EXPENSE_COLUMNS = ["Date", "Category", "Description", "Amount"]

EXPENSE_CATEGORIES = [
    "Food", "Transport", "Rent", "Utilities", "Health",
    "Entertainment", "Education", "Clothing", "Insurance", "Other",
]

# Amount ranges per category (ILS)
CATEGORY_AMOUNT_RANGES = {
    "Food": (15.0, 450.0),
    "Transport": (6.0, 300.0),
    "Rent": (2500.0, 6500.0),
    "Utilities": (80.0, 900.0),
    "Health": (30.0, 1200.0),
    "Entertainment": (20.0, 600.0),
    "Education": (50.0, 2500.0),
    "Clothing": (40.0, 800.0),
    "Insurance": (100.0, 1500.0),
    "Other": (5.0, 500.0),
}


def generate_expense_rows(
    num_rows: int,
    rng: np.random.Generator,
    fake: Optional[Faker] = None,
    period_start: date = date(2025, 1, 1),
    period_end: date = date(2025, 12, 31),
) -> List[List[str]]:
    """
    Generate expense rows sorted by date.

    Each row is [date, category, description, amount] with the amount
    formatted to two decimals.
    """
    if period_end < period_start:
        raise ConfigurationError(
            f"Period end {period_end} is before period start {period_start}"
        )
    fake = fake or Faker()
    span_days = (period_end - period_start).days

    expenses = []
    for _ in range(num_rows):
        day = period_start + timedelta(days=int(rng.integers(0, span_days + 1)))
        category = str(rng.choice(EXPENSE_CATEGORIES))
        low, high = CATEGORY_AMOUNT_RANGES[category]
        amount = round(float(rng.uniform(low, high)), 2)
        description = fake.company()
        expenses.append((day, category, description, amount))

    expenses.sort(key=lambda e: e[0])
    return [
        [day.isoformat(), category, description, f"{amount:.2f}"]
        for day, category, description, amount in expenses
    ]


def sum_amounts(rows: Sequence[Sequence[Optional[str]]], column: int = -1) -> float:
    """Sum the numeric values of one column, skipping blank or non-numeric cells."""
    total = 0.0
    for row in rows:
        value = row[column] if row else None
        if value is None:
            continue
        try:
            total += float(str(value).replace(",", ""))
        except ValueError:
            continue
    return round(total, 2)
