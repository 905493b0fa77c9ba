"""Transport catalogue: bus route statistics, stop lookups and fastest-route search over JSON requests."""

__version__ = "0.1.0"