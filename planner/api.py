"""REST backend for net worth plans."""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Flask, jsonify, request

from .config import Settings, configure_logging, load_settings
from .data_model import (
    DEFAULT_MONTH,
    coerce_amount,
    is_finite_number,
    is_month_key,
    month_range,
    normalize_month,
    set_account_balance,
    set_amount_for_month,
)
from .engine import (
    PlanState,
    aggregate_period,
    build_net_worth_series,
    build_summary,
    clamp_window_offset,
    net_worth_as_of,
    series_to_frame,
    window_series,
)
from .engine.storage import json_safe

logger = logging.getLogger(__name__)

FREQ_OPTIONS = ("M", "Q", "Y")


def _int_arg(name: str, default: int) -> int:
    try:
        return int(request.args.get(name, default))
    except (TypeError, ValueError):
        return default


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _month_and_amount(payload: Dict[str, Any]) -> tuple[str, float] | None:
    month = payload.get("month")
    amount = coerce_amount(payload.get("amount"))
    if not is_month_key(month) or not is_finite_number(amount):
        return None
    return month, amount


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    plan_state = PlanState(settings.plans_file)
    app.config["PLAN_STATE"] = plan_state

    @app.after_request
    def apply_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,DELETE,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.get("/api/health")
    def healthcheck():
        return jsonify({"status": "ok"})

    @app.get("/api/months")
    def month_options():
        start = normalize_month(request.args.get("start", DEFAULT_MONTH))
        count = max(0, _int_arg("count", 360))
        return jsonify({"months": month_range(start, count)})

    @app.get("/api/plans")
    def list_saved_plans():
        return jsonify({"plans": plan_state.list_names()})

    @app.get("/api/plans/<plan_name>")
    def get_plan(plan_name: str):
        plan = plan_state.get(plan_name)
        if not plan:
            return _error("Plan not found.", 404)
        return jsonify(json_safe(plan))

    @app.post("/api/plans")
    def save_plan():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return _error("Plan must be an object.", 400)
        name = str(payload.get("name", "")).strip()
        if not name:
            return _error("Plan name is required.", 400)
        document = plan_state.save(name, payload)
        logger.info("Saved plan %s", name)
        return jsonify({
            "message": "Plan saved.",
            "plans": plan_state.list_names(),
            "plan": json_safe(document),
        })

    @app.delete("/api/plans/<plan_name>")
    def delete_plan(plan_name: str):
        plan_state.delete(plan_name)
        logger.info("Deleted plan %s", plan_name)
        return jsonify({"message": "Plan deleted.", "plans": plan_state.list_names()})

    @app.post("/api/plans/<plan_name>/balances")
    def set_balance(plan_name: str):
        plan = plan_state.get_plan(plan_name)
        if plan is None:
            return _error("Plan not found.", 404)
        payload = request.get_json(silent=True) or {}
        parsed = _month_and_amount(payload) if isinstance(payload, dict) else None
        if parsed is None:
            return _error("A YYYY-MM month and a numeric amount are required.", 400)
        month, amount = parsed
        account_id = payload.get("accountId")
        for i, acct in enumerate(plan.net_worth_accounts):
            if acct.id == account_id:
                plan.net_worth_accounts[i] = set_account_balance(acct, month, amount)
                break
        else:
            return _error("Account not found.", 404)
        document = plan_state.save_plan(plan_name, plan)
        logger.info("Recorded balance for %s/%s at %s", plan_name, account_id, month)
        return jsonify({"plan": json_safe(document)})

    @app.post("/api/plans/<plan_name>/items/<item_id>/amount")
    def set_item_amount(plan_name: str, item_id: str):
        plan = plan_state.get_plan(plan_name)
        if plan is None:
            return _error("Plan not found.", 404)
        payload = request.get_json(silent=True) or {}
        parsed = _month_and_amount(payload) if isinstance(payload, dict) else None
        if parsed is None:
            return _error("A YYYY-MM month and a numeric amount are required.", 400)
        month, amount = parsed
        for items in (plan.income, plan.expenses):
            for i, item in enumerate(items):
                if item.id == item_id:
                    items[i] = set_amount_for_month(item, month, amount)
                    document = plan_state.save_plan(plan_name, plan)
                    logger.info("Recorded %s amount for %s/%s at %s", item.behavior, plan_name, item_id, month)
                    return jsonify({"plan": json_safe(document)})
        return _error("Item not found.", 404)

    @app.get("/api/plans/<plan_name>/series")
    def get_series(plan_name: str):
        plan = plan_state.get_plan(plan_name)
        if plan is None:
            return _error("Plan not found.", 404)
        freq = str(request.args.get("freq", "M")).upper()
        if freq not in FREQ_OPTIONS:
            return _error("freq must be one of M, Q, Y.", 400)
        series = build_net_worth_series(plan)
        offset = 0
        if "window" in request.args:
            window = _int_arg("window", 12)
            offset = clamp_window_offset(series[-1].month_index, window, _int_arg("offset", 0))
            series = window_series(series, window, offset)
        df = aggregate_period(series_to_frame(plan, series, name=plan_name, offset=offset), freq=freq)
        records = json_safe(df.to_dict(orient="records"))
        return jsonify({"plan": plan_name, "freq": freq, "mode": plan.net_worth_mode.value, "data": records})

    @app.get("/api/plans/<plan_name>/as-of")
    def get_as_of(plan_name: str):
        plan = plan_state.get_plan(plan_name)
        if plan is None:
            return _error("Plan not found.", 404)
        month = request.args.get("month")
        if not is_month_key(month):
            return _error("month must be YYYY-MM.", 400)
        result = net_worth_as_of(plan, month)
        return jsonify({"asOf": result.to_dict() if result else None})

    @app.get("/api/plans/<plan_name>/summary")
    def get_summary(plan_name: str):
        plan = plan_state.get_plan(plan_name)
        if plan is None:
            return _error("Plan not found.", 404)
        summary = build_summary(plan)
        return jsonify(json_safe({"summary": summary.to_dict()}))

    return app


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
