"""Sample-by-sample audio building blocks: filters, envelopes, effects, noise and drum voices."""

__version__ = "0.1.0"