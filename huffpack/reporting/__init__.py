from huffpack.reporting.stats import CompressionStats, compute_stats, shannon_entropy

__all__ = [
    "CompressionStats",
    "compute_stats",
    "shannon_entropy",
]
