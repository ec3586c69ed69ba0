# -*- coding: utf-8 -*-
"""
Metrics collection for fips_dsa.
Integrated with Prometheus for monitoring long parameter searches.
"""

from prometheus_client import Counter, Histogram, start_http_server

from ..logger import get_logger

logger = get_logger("fips_dsa.metrics")

# Counters
seeds_total = Counter(
    'fips_dsa_seeds_total',
    'Total number of seeds drawn for the q search',
    ['algorithm']
)

p_candidates_total = Counter(
    'fips_dsa_p_candidates_total',
    'Total number of p candidates built',
    ['algorithm']
)

generation_failures_total = Counter(
    'fips_dsa_generation_failures_total',
    'Total number of generation calls that ended without parameters',
    ['algorithm', 'reason']
)

# Histograms
generation_seconds = Histogram(
    'fips_dsa_generation_seconds',
    'Time taken to generate one set of domain parameters',
    ['algorithm'],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 300.0]
)


def start_metrics_server(port: int = 8000) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
    logger.info("metrics server started", extra={"port": port})
