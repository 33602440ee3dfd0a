#!/usr/bin/env python3

"""
Smoke test runner for a live Supplycast API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("SUPPLYCAST_BASE_URL", "http://localhost:4323/api/v1")
HEADERS = {"Content-Type": "application/json"}

LINEAR = [10, 12, 14, 16, 18, 20, 22, 24]
SEASONAL = [12, 30, 18, 6, 14, 32, 20, 8, 16, 34, 22, 10, 18, 36, 24, 12]
WEEKLY_REVENUE = [1200, 1350, 1280, 1420, 1500, 1480, 1610, 1590, 1700, 1760, 1820, 1790]
WEEKLY_UNITS = [40, 44, 42, 47, 50, 49, 53, 52, 56, 58, 60, 59]
WEEK_STARTS = [f"2026-{m:02d}-{d:02d}" for m, d in (
    (6, 1), (6, 8), (6, 15), (6, 22), (6, 29), (7, 6),
    (7, 13), (7, 20), (7, 27), (8, 3), (8, 10), (8, 17),
)]


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),
    Case("ready", "GET", "/ready", section="Health"),

    # ── Forecast ──────────────────────────────────────────
    Case("linear series", "POST", "/forecast", section="Forecast",
         body={"values": LINEAR, "periods": 4}),
    Case("empty series", "POST", "/forecast", section="Forecast", body={"values": []}),
    Case("weekly report", "POST", "/forecast/report", section="Forecast", body={
        "revenue": WEEKLY_REVENUE, "units": WEEKLY_UNITS, "week_starts": WEEK_STARTS, "weeks": 6,
    }),
    Case("short history report", "POST", "/forecast/report", section="Forecast",
         body={"revenue": WEEKLY_REVENUE[:5], "units": WEEKLY_UNITS[:5]}),
    Case("nightly predictions", "POST", "/forecast/predictions", section="Forecast", body={
        "supplier_id": "SUP-001", "as_of": "2026-08-24",
        "metrics": {"revenue": WEEKLY_REVENUE, "units": WEEKLY_UNITS},
    }),

    # ── Analysis ──────────────────────────────────────────
    Case("sma", "POST", "/smoothing", section="Analysis", body={"values": LINEAR, "method": "sma", "period": 3}),
    Case("ema", "POST", "/smoothing", section="Analysis", body={"values": LINEAR, "method": "ema", "alpha": 0.5}),
    Case("wma bad period", "POST", "/smoothing", section="Analysis", body={"values": LINEAR, "method": "wma", "period": 0}),
    Case("decompose", "POST", "/seasonal/decompose", section="Analysis", body={"values": SEASONAL, "season_length": 4}),
    Case("anomalies", "POST", "/anomalies", section="Analysis", body={"values": [5] * 9 + [50]}),

    # ── Metrics ───────────────────────────────────────────
    Case("accuracy", "POST", "/metrics/accuracy", section="Metrics",
         body={"actual": [100, 200, 0], "predicted": [110, 180, 5], "history": WEEKLY_REVENUE}),
    Case("lifecycle", "POST", "/metrics/lifecycle", section="Metrics", body={"values": LINEAR}),
    Case("performance", "POST", "/metrics/performance", section="Metrics", body={
        "sort_by": "score",
        "products": [
            {"product_id": "P1", "product_name": "Coil 0.8", "total_units": 120, "total_revenue": 2400,
             "period_days": 90, "revenue_30d": 1000, "revenue_60d": 1800, "revenue_90d": 2400},
            {"product_id": "P2", "product_name": "Pod Kit", "total_units": 8, "total_revenue": 320,
             "period_days": 14, "revenue_30d": 320, "revenue_60d": 320, "revenue_90d": 320},
        ],
    }),

    # ── Validation ────────────────────────────────────────
    Case("misaligned report", "POST", "/forecast/report", section="Validation",
         body={"revenue": [1, 2, 3], "units": [1, 2]}, expect=422),
    Case("unknown prediction metric", "POST", "/forecast/predictions", section="Validation",
         body={"supplier_id": "SUP-001", "metrics": {"margin": [1, 2]}}, expect=422),
    Case("accuracy length mismatch", "POST", "/metrics/accuracy", section="Validation",
         body={"actual": [1, 2], "predicted": [1]}, expect=400),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Exception | None = None
    while attempt < 2:
        try:
            if case.method == "GET":
                r = await client.get(case.path)
            else:
                r = await client.request(case.method, case.path, json=case.body)
            body: Any
            try:
                body = r.json()
            except ValueError:
                body = r.text
            if r.status_code == case.expect:
                return True, "", body
            return False, f"{r.status_code} {r.reason_phrase}: {body}", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
    return False, str(last_exc), None


async def main():
    parser = argparse.ArgumentParser(description="Run API smoke cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    parser.add_argument("--quiet", action="store_true", help="do not print response bodies")
    args = parser.parse_args()
    selected = [
        c for c in CASES
        if (not args.section or c.section == args.section) and (not args.label or c.label == args.label)
    ]
    if not selected:
        print("no matching cases (check --section or --label)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            pretty = json.dumps(body, indent=2) if isinstance(body, (dict, list)) else str(body)

            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} ({case.label})")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} ({case.label}, expected {case.expect})")
                if detail:
                    print(f"         {detail}")
            if not args.quiet:
                print(f"         response:\n{pretty}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
