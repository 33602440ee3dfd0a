"""
Nightly prediction job: fits each supplier's weekly revenue, units and order series and emits per-week prediction rows with a one-sigma band, anomaly thresholds and a data quality score for downstream storage.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
import time
from datetime import date, timedelta
from typing import Dict, List, Mapping, Optional, Sequence

from api.responses import PredictionBatch, PredictionRow
from config import PREDICTION_METRICS, settings
from engine.baseline import compute as compute_baseline
from engine.forecast import confidence_intervals, linear_regression

log = logging.getLogger(__name__)


def data_quality(weeks: int) -> float:
    return min(1.0, weeks / settings.prediction_full_history_weeks)


def predict_metric(
    supplier_id: str,
    metric: str,
    vals: Sequence[float],
    as_of: date,
) -> List[PredictionRow]:
    horizon = settings.prediction_horizon_weeks
    fit = linear_regression(vals, horizon)
    band = confidence_intervals(fit.predictions, vals, 1.0)
    thresholds = compute_baseline(vals, settings.prediction_anomaly_z)
    quality = data_quality(len(vals))

    return [
        PredictionRow(
            supplier_id=supplier_id,
            prediction_date=as_of + timedelta(weeks=week),
            metric_type=metric,
            predicted_value=value,
            confidence_lower=band.lower[week - 1],
            confidence_upper=band.upper[week - 1],
            confidence_score=quality,
            anomaly_threshold_high=thresholds.upper,
            anomaly_threshold_low=thresholds.lower,
            data_quality_score=quality,
        )
        for week, value in enumerate(fit.predictions, start=1)
    ]


def predict_supplier(
    supplier_id: str,
    metrics: Mapping[str, Sequence[float]],
    as_of: Optional[date] = None,
) -> List[PredictionRow]:
    as_of = as_of or date.today()
    unknown = set(metrics) - set(PREDICTION_METRICS)
    if unknown:
        raise ValueError(f"unsupported metric(s): {', '.join(sorted(unknown))}")

    weeks = max((len(v) for v in metrics.values()), default=0)
    if weeks < settings.prediction_min_history:
        log.info("supplier %s skipped (insufficient weeks: %d)", supplier_id, weeks)
        return []

    rows: List[PredictionRow] = []
    for metric in PREDICTION_METRICS:
        if metric in metrics:
            rows.extend(predict_metric(supplier_id, metric, metrics[metric], as_of))
    return rows


class PredictionService:
    def run_batch(
        self,
        suppliers: Mapping[str, Mapping[str, Sequence[float]]],
        as_of: Optional[date] = None,
    ) -> PredictionBatch:
        started = time.monotonic()
        log.info("prediction batch started for %d supplier(s)", len(suppliers))

        rows: List[PredictionRow] = []
        counts: Dict[str, int] = {"succeeded": 0, "skipped": 0, "failed": 0}
        for supplier_id, metrics in suppliers.items():
            try:
                supplier_rows = predict_supplier(supplier_id, metrics, as_of)
            except Exception as exc:
                log.error("prediction failed for supplier %s: %s", supplier_id, exc)
                counts["failed"] += 1
                continue
            if not supplier_rows:
                counts["skipped"] += 1
                continue
            log.debug("supplier %s: %d prediction row(s)", supplier_id, len(supplier_rows))
            rows.extend(supplier_rows)
            counts["succeeded"] += 1

        log.info(
            "prediction batch finished in %.2fs: succeeded=%d skipped=%d failed=%d",
            time.monotonic() - started, counts["succeeded"], counts["skipped"], counts["failed"],
        )
        return PredictionBatch(suppliers=len(suppliers), rows=rows, **counts)


prediction_service = PredictionService()
