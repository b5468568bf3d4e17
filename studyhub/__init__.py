"""Study portal services: topic search aggregation, AI study material generation and note export."""

__version__ = '0.1.0'
