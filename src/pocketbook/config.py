"""
Settings for pocketbook (config/settings.yml).

Path resolution lives in pocketbook.workspace.Workspace; this module only
covers user-tunable presentation and aggregation knobs. A missing file means
defaults. Loading is local file I/O only.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

DEFAULT_SETTINGS_YML = """\
# pocketbook settings
# All keys are optional; remove a key to fall back to its default.

# Symbol printed in front of amounts
currency_symbol: "$"

# Budgets above this share of their limit are flagged as a warning
budget_warning_percent: 80

# Number of months shown in the summary trend (oldest to newest)
trend_months: 6

# strftime format for trend month labels
month_label_format: "%b %Y"

# Rows shown by default in transaction listings
recent_limit: 10
"""


class Settings(BaseModel):
    """User settings with defaults matching the starter settings.yml."""

    currency_symbol: str = Field(default="$")
    budget_warning_percent: float = Field(default=80.0, gt=0, le=100)
    trend_months: int = Field(default=6, ge=1, le=60)
    month_label_format: str = Field(default="%b %Y", min_length=1)
    recent_limit: int = Field(default=10, ge=1)

    def money(self, amount) -> str:
        """Format an amount with the configured currency symbol."""
        sign = "-" if amount < 0 else ""
        return f"{sign}{self.currency_symbol}{abs(amount):,.2f}"


def load_settings(path: Path) -> Settings:
    """Load settings from YAML (safe loader).

    Returns defaults if the file is missing or empty.

    Raises:
        ValueError: If the file is not valid YAML or holds invalid values
    """
    if not path.exists():
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    try:
        return Settings.model_validate(data)
    except ValidationError as ve:
        raise ValueError(f"Invalid settings in {path}: {ve}") from ve


__all__ = ["DEFAULT_SETTINGS_YML", "Settings", "load_settings"]
