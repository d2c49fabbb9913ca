"""
Metrics Collection for the Recurrence Engine.

Counts generated instances, refilter passes and rejected requests.
"""

import time
from typing import Dict, Any, Callable
from collections import defaultdict
from datetime import datetime, timezone
import functools
import threading


class MetricsCollector:
    """Collects and manages metrics for instance generation."""

    def __init__(self):
        """Initialize metrics collector."""
        self.metrics = defaultdict(int)
        self.timers = defaultdict(float)
        self.lock = threading.Lock()

        self.metrics["generations_total"] = 0
        self.metrics["instances_generated_total"] = 0
        self.metrics["window_refilters_total"] = 0
        self.metrics["invalid_requests_total"] = 0

    def increment_counter(self, metric_name: str, value: int = 1):
        """Increment a counter metric."""
        with self.lock:
            self.metrics[metric_name] += value

    def record_timer(self, metric_name: str, duration: float):
        """Record a timing metric."""
        with self.lock:
            self.timers[metric_name] += duration

    def get_metrics(self) -> Dict[str, Any]:
        """Get current metrics values."""
        with self.lock:
            return {
                "counters": dict(self.metrics),
                "timers": dict(self.timers),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

    def reset(self):
        """Zero all counters and timers."""
        with self.lock:
            for name in list(self.metrics):
                self.metrics[name] = 0
            self.timers.clear()

    def instances_generated(self, count: int):
        """Record one generation run producing ``count`` instances."""
        self.increment_counter("generations_total")
        self.increment_counter("instances_generated_total", count)

    def window_refiltered(self):
        """Record that an instance list was re-tagged against a window."""
        self.increment_counter("window_refilters_total")

    def invalid_request(self):
        """Record that a request was rejected as invalid input."""
        self.increment_counter("invalid_requests_total")

    def time_operation(self, metric_name: str) -> Callable:
        """Decorator timing every call of the wrapped function."""
        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    self.record_timer(metric_name, time.perf_counter() - start_time)
            return wrapper
        return decorator


# Global metrics instance
metrics_collector = MetricsCollector()
