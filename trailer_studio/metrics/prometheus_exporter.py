"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


trailer_generation_total = Counter(
    "trailer_generation_total",
    "Total number of trailer preview generation requests by outcome.",
    ["outcome"],
)

active_sessions = Gauge(
    "active_sessions",
    "Number of configurator sessions currently held in memory.",
)
