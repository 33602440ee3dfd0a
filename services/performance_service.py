"""
Product performance report for a supplier's catalogue: weekly velocity, 30-day revenue growth, lifecycle stage and a blended performance score per product, ranked with top and bottom performers.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from api.requests import ProductSales
from api.responses import PerformanceReport, PerformanceSummary, ProductPerformance
from config import settings
from engine.enums import LifecycleStage
from engine.metrics import classify_lifecycle, growth_rate, sales_velocity

_SORT_KEYS: Dict[str, Callable[[ProductPerformance], float]] = {
    "revenue": lambda p: p.total_revenue,
    "velocity": lambda p: p.velocity,
    "growth": lambda p: p.growth_rate,
    "score": lambda p: p.performance_score,
}


def _quick_lifecycle(period_days: int, growth: float) -> LifecycleStage:
    # used when there is not enough weekly history to fit a trend
    cutoff = settings.lifecycle_growth_rate_cutoff
    if period_days < settings.lifecycle_new_max_days:
        return LifecycleStage.new
    if growth > cutoff:
        return LifecycleStage.growth
    if growth < -cutoff:
        return LifecycleStage.decline
    return LifecycleStage.mature


def performance_score(velocity: float, total_revenue: float) -> float:
    cap = settings.performance_score_cap
    weights = settings.performance_weights
    velocity_score = min(cap, velocity * settings.performance_velocity_scale)
    revenue_score = min(cap, total_revenue / settings.performance_revenue_divisor)
    return velocity_score * weights["velocity"] + revenue_score * weights["revenue"]


def evaluate_product(row: ProductSales) -> ProductPerformance:
    period_days = max(1, row.period_days)
    velocity = sales_velocity(row.total_units, period_days)
    # revenue of days 31-60 is the 60-day total minus the latest 30 days
    growth = growth_rate(row.revenue_30d, row.revenue_60d - row.revenue_30d)

    if len(row.weekly_units) >= settings.lifecycle_min_points:
        lifecycle = classify_lifecycle(row.weekly_units)
    else:
        lifecycle = _quick_lifecycle(period_days, growth)

    return ProductPerformance(
        product_id=row.product_id,
        product_name=row.product_name,
        sku=row.sku,
        order_count=row.order_count,
        total_units=row.total_units,
        total_revenue=row.total_revenue,
        avg_unit_price=row.avg_unit_price,
        velocity=round(velocity, 2),
        revenue_trending={"30d": row.revenue_30d, "60d": row.revenue_60d, "90d": row.revenue_90d},
        growth_rate=round(growth, 2),
        lifecycle=lifecycle,
        performance_score=round(performance_score(velocity, row.total_revenue), 1),
        first_sale_date=row.first_sale_date,
        last_sale_date=row.last_sale_date,
        period_days=period_days,
    )


def build_report(products: Sequence[ProductSales], sort_by: str = "revenue") -> PerformanceReport:
    key = _SORT_KEYS.get(sort_by, _SORT_KEYS["revenue"])
    rows: List[ProductPerformance] = sorted((evaluate_product(p) for p in products), key=key, reverse=True)
    top_n = settings.performance_top_n

    distribution = {stage.value: 0 for stage in LifecycleStage}
    for row in rows:
        distribution[row.lifecycle.value] += 1

    return PerformanceReport(
        sort_by=sort_by,
        data=rows,
        top_performers=rows[:top_n],
        bottom_performers=list(reversed(rows))[:top_n],
        summary=PerformanceSummary(
            total_products=len(rows),
            total_revenue=float(sum(r.total_revenue for r in rows)),
            avg_velocity=(sum(r.velocity for r in rows) / len(rows)) if rows else 0.0,
            lifecycle_distribution=distribution,
        ),
    )
