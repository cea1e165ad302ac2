from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, List

from .items import DatedAmount, new_id, parse_dated_list, upsert_dated


@dataclass
class NetWorthAccount:
    id: str
    name: str
    balances: List[DatedAmount] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NetWorthAccount":
        return cls(
            id=str(data.get("id") or new_id()),
            name=str(data.get("name") or "Account"),
            balances=parse_dated_list(data.get("balances")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "balances": [b.to_dict() for b in self.balances]}


def set_account_balance(account: NetWorthAccount, month: str, amount: float) -> NetWorthAccount:
    return replace(account, balances=upsert_dated(account.balances, month, amount))


def new_net_worth_account(name: str = "New account") -> NetWorthAccount:
    return NetWorthAccount(id=new_id(), name=name)


def default_accounts() -> List[NetWorthAccount]:
    return [
        NetWorthAccount(id="acct_checking", name="Checking"),
        NetWorthAccount(id="acct_savings", name="Savings"),
        NetWorthAccount(id="acct_brokerage", name="Brokerage"),
        NetWorthAccount(id="acct_roth", name="Roth IRA"),
    ]
