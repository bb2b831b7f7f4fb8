"""chartsearch: ranked search over charts aggregated from chart repositories."""

__version__ = "0.1.0"
