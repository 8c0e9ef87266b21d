"""Statistics for benchmark measurements: samples, percentiles, bootstrap, KDE, outliers and regression."""

__version__ = "0.1.0"