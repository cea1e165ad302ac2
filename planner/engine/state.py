# engine/state.py
from typing import Dict

from ..data_model import Plan, plan_from_dict, plan_to_dict
from .storage import load_plans, save_plans


class PlanState:
    def __init__(self, storage_path: str = "user_data/plans.json"):
        self.storage_path = storage_path
        self.plans: Dict[str, dict] = load_plans(storage_path)

    def list_names(self):
        return sorted(self.plans.keys())

    def get(self, name: str) -> dict | None:
        return self.plans.get(name)

    def get_plan(self, name: str) -> Plan | None:
        raw = self.plans.get(name)
        if raw is None:
            return None
        return plan_from_dict(raw)

    def save(self, name: str, payload: dict) -> dict:
        document = plan_to_dict(plan_from_dict(payload))
        document["name"] = name
        self.plans[name] = document
        self._save()
        return document

    def save_plan(self, name: str, plan: Plan) -> dict:
        return self.save(name, plan_to_dict(plan))

    def delete(self, name: str) -> None:
        if name in self.plans:
            del self.plans[name]
            self._save()

    def _save(self) -> None:
        save_plans(self.storage_path, self.plans)
