"""Reports package: pure aggregation and extraction over expense snapshots."""

from .aggregator import compare_months, monthly_report, recurring_expenses  # noqa: F401
from .periods import month_key, parse_months_window, template_key, window_cutoff  # noqa: F401
from .tags import extract_tags  # noqa: F401
