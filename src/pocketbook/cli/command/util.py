from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from rich.console import Console
from rich.text import Text

from pocketbook.config import Settings, load_settings
from pocketbook.model import Category, TransactionType
from pocketbook.services.finance_service import FinanceService
from pocketbook.storage.record_store import RecordStore
from pocketbook.workspace import Workspace

console = Console()

# Minimum cell width for money columns, e.g. "$1,234.56"
AMOUNT_WIDTH = 9


class OptionError(ValueError):
    """A CLI option value could not be interpreted."""


def fmt_amount(amt: Decimal, settings: Settings | None = None) -> Text:
    s = (settings or Settings()).money(amt)
    if amt < 0:
        return Text(s, style="bold red")
    elif amt > 0:
        return Text(s, style="bold green")
    return Text(s)


def fmt_signed(amount: Decimal, type: TransactionType, settings: Settings) -> Text:
    """Amount coloured by transaction direction."""
    style = "green" if type == TransactionType.INCOME else "red"
    return Text(settings.money(amount), style=style)


def open_service(workspace: Workspace) -> tuple[FinanceService, Settings]:
    """Load settings and the finance service for a workspace.

    Raises:
        ValueError: If settings or stored records are invalid
    """
    settings = load_settings(workspace.settings_config)
    service = FinanceService(
        RecordStore(workspace.store_path),
        trend_months=settings.trend_months,
        label_format=settings.month_label_format,
    )
    return service, settings


def parse_date(value: str, option: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise OptionError(f"{option} must be a date in YYYY-MM-DD form, got '{value}'") from e


def parse_month(value: str, option: str = "--month") -> date:
    """Parse ``YYYY-MM`` into the first day of that month."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except ValueError as e:
        raise OptionError(f"{option} must be in YYYY-MM form, got '{value}'") from e


def parse_amount(value: str, option: str = "--amount") -> Decimal:
    try:
        amount = Decimal(value.strip())
    except InvalidOperation as e:
        raise OptionError(f"{option} must be a number, got '{value}'") from e
    if not amount.is_finite():
        raise OptionError(f"{option} must be a finite number, got '{value}'")
    return amount


def parse_category(value: str) -> Category:
    try:
        return Category(value.strip().lower())
    except ValueError as e:
        choices = ", ".join(c.value for c in Category)
        raise OptionError(f"Unknown category '{value}' (choose from: {choices})") from e


def parse_type(value: str) -> TransactionType:
    try:
        return TransactionType(value.strip().lower())
    except ValueError as e:
        raise OptionError(f"--type must be 'income' or 'expense', got '{value}'") from e


def short_id(record_id: str) -> str:
    return record_id[:8]


def resolve_record(prefix: str, records, kind: str):
    """Find a record by full id or unique id prefix.

    Returns:
        The record, or None when nothing matches

    Raises:
        OptionError: If the prefix matches more than one record
    """
    normalized = (prefix or "").strip().lower()
    if not normalized:
        return None
    matches = [r for r in records if r.id.lower().startswith(normalized)]
    exact = [r for r in matches if r.id.lower() == normalized]
    if exact:
        return exact[0]
    if len(matches) > 1:
        raise OptionError(f"Ambiguous {kind} id '{prefix}' matches {len(matches)} records")
    return matches[0] if matches else None
