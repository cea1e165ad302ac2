from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Literal

from .base import coerce_amount, finite_or_zero
from .months import DEFAULT_MONTH, is_month_key, normalize_month

CARRY_FORWARD = "carryForward"
MONTH_ONLY = "monthOnly"
BEHAVIORS = (CARRY_FORWARD, MONTH_ONLY)

ItemKind = Literal["income", "expense"]


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class DatedAmount:
    month: str
    amount: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DatedAmount":
        month = data.get("month", data.get("monthISO"))
        return cls(month=month if isinstance(month, str) else "", amount=coerce_amount(data.get("amount")))

    def to_dict(self) -> dict[str, Any]:
        return {"month": self.month, "amount": self.amount}


def dedupe_dated(entries: Iterable[DatedAmount]) -> List[DatedAmount]:
    """Last write wins per month; result sorted by month. Invalid months are dropped."""
    latest: dict[str, DatedAmount] = {}
    for entry in entries:
        if not is_month_key(entry.month):
            continue
        latest[entry.month] = entry
    return [latest[m] for m in sorted(latest)]


def upsert_dated(entries: Iterable[DatedAmount], month: str, amount: float) -> List[DatedAmount]:
    next_entries = list(entries)
    replacement = DatedAmount(month=month, amount=amount)
    for i, entry in enumerate(next_entries):
        if entry.month == month:
            next_entries[i] = replacement
            break
    else:
        next_entries.append(replacement)
    next_entries.sort(key=lambda e: e.month)
    return next_entries


def parse_dated_list(raw: Any) -> List[DatedAmount]:
    if not isinstance(raw, list):
        return []
    return dedupe_dated(DatedAmount.from_dict(x) for x in raw if isinstance(x, dict))


@dataclass
class RecurringItem:
    id: str
    kind: ItemKind
    name: str
    default_amount: float = 0.0
    behavior: str = CARRY_FORWARD
    changes: List[DatedAmount] = field(default_factory=list)
    overrides: List[DatedAmount] = field(default_factory=list)
    end_month: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], kind: ItemKind) -> "RecurringItem":
        behavior = data.get("behavior")
        end_month = data.get("endMonth", data.get("endMonthISO"))
        return cls(
            id=str(data.get("id") or new_id()),
            kind=kind,
            name=str(data.get("name") or ("Income" if kind == "income" else "Expense")),
            default_amount=finite_or_zero(data.get("defaultAmount")),
            behavior=behavior if behavior in BEHAVIORS else CARRY_FORWARD,
            changes=parse_dated_list(data.get("changes")),
            overrides=parse_dated_list(data.get("overrides")),
            end_month=end_month if is_month_key(end_month) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "defaultAmount": self.default_amount,
            "behavior": self.behavior,
            "changes": [c.to_dict() for c in self.changes],
            "overrides": [o.to_dict() for o in self.overrides],
            "endMonth": self.end_month,
        }


@dataclass
class OneTimeItem:
    id: str
    kind: ItemKind
    name: str
    month: str
    amount: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any], kind: ItemKind) -> "OneTimeItem":
        return cls(
            id=str(data.get("id") or new_id()),
            kind=kind,
            name=str(data.get("name") or ("One-time income" if kind == "income" else "One-time expense")),
            month=normalize_month(data.get("month", data.get("monthISO"))),
            amount=finite_or_zero(data.get("amount")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "kind": self.kind, "name": self.name, "month": self.month, "amount": self.amount}


def set_amount_for_month(item: RecurringItem, month: str, amount: float) -> RecurringItem:
    """Record ``amount`` for ``month`` in whichever history the item's behavior reads."""
    if item.behavior == MONTH_ONLY:
        return replace(item, overrides=upsert_dated(item.overrides, month, amount))
    return replace(item, changes=upsert_dated(item.changes, month, amount))


def new_recurring_item(kind: ItemKind) -> RecurringItem:
    return RecurringItem(
        id=new_id(),
        kind=kind,
        name="New income" if kind == "income" else "New expense",
    )


def new_one_time_item(kind: ItemKind, month: str) -> OneTimeItem:
    return OneTimeItem(
        id=new_id(),
        kind=kind,
        name="One-time income" if kind == "income" else "One-time expense",
        month=normalize_month(month, DEFAULT_MONTH),
    )
