"""REST adapter around the projection engine.

Stateless: each request carries the owner's full snapshot of expenses, incomes,
assets and budget settings, and nothing is stored.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from finplan.data_model import (
    RecordValidationError,
    default_asset_rows,
    default_expense_rows,
    default_income_rows,
    parse_assets,
    parse_expenses,
    parse_incomes,
    parse_settings,
)
from finplan.data_model.parsing import parse_date
from finplan.engine import aggregate_period, generate_projection, projection_to_frame, summarize

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _native(value: Any) -> Any:
    # numpy scalars from DataFrame records
    return value.item() if hasattr(value, "item") else value


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({str(key): (None if _is_nan(value) else _native(value)) for key, value in row.items()})
    return clean_rows


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _load_snapshot(payload: dict):
    expenses = parse_expenses(_extract_payload_value(payload, "expenses", "spendings", default=[]))
    incomes = parse_incomes(_extract_payload_value(payload, "incomes", "income", default=[]))
    assets = parse_assets(_extract_payload_value(payload, "assets", default=[]))
    settings = parse_settings(payload)
    start = parse_date(_extract_payload_value(payload, "startMonth", default=None))
    return expenses, incomes, assets, settings, start


def _bad_request(exc: Exception):
    logger.info(f"[API] rejected projection payload: {exc}")
    return jsonify({"error": str(exc)}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/defaults")
def get_defaults():
    return jsonify(
        {
            "expenses": default_expense_rows(),
            "incomes": default_income_rows(),
            "assets": default_asset_rows(),
        }
    )


@app.post("/api/projection")
def projection():
    payload = request.get_json(silent=True) or {}
    try:
        expenses, incomes, assets, settings, start = _load_snapshot(payload)
        selected = parse_date(_extract_payload_value(payload, "month", "selectedMonth", default=None))
    except (RecordValidationError, TypeError, ValueError) as exc:
        return _bad_request(exc)

    rows = generate_projection(expenses, incomes, assets, settings, start=start)
    body: Dict[str, Any] = {
        "projection": [row.to_dict() for row in rows],
        "summary": summarize(rows, assets, incomes, expenses, settings.inflation_rate, selected_month=selected),
    }

    freq = _extract_payload_value(payload, "freq", "frequency", default=None)
    if freq:
        try:
            agg_df = aggregate_period(projection_to_frame(rows), freq=str(freq))
        except ValueError as exc:
            return _bad_request(exc)
        body["freq"] = str(freq).upper()
        body["aggregated"] = _sanitize_records(agg_df.to_dict(orient="records"))
    return jsonify(body)


@app.post("/api/projection/debug")
def debug_projection():
    payload = request.get_json(silent=True) or {}
    try:
        expenses, incomes, assets, settings, start = _load_snapshot(payload)
    except (RecordValidationError, TypeError, ValueError) as exc:
        return _bad_request(exc)

    rows = generate_projection(expenses, incomes, assets, settings, start=start, detailed=True)
    return jsonify(
        {
            "detailedProjection": [row.to_dict(detailed=True) for row in rows],
            "summary": {"inflationRate": settings.inflation_rate, "totalMonths": len(rows)},
        }
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=False, port=int(os.environ.get("FINPLAN_PORT", 8000)))
