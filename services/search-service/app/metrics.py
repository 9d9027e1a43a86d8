"""
Prometheus metrics for catalog search.

Tracks ranking calls, their latency and how many results they return.
"""

from prometheus_client import Counter, Histogram

rank_requests_total = Counter(
    "catalog_rank_requests_total", "Total ranking requests", ["status"]
)

rank_duration_seconds = Histogram(
    "catalog_rank_duration_seconds",
    "Ranking duration in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

rank_results = Histogram(
    "catalog_rank_results",
    "Number of results returned per ranking request",
    buckets=(0, 1, 5, 10, 25, 50, 100),
)
