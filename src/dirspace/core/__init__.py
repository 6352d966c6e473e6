"""Concurrent filesystem aggregation engine."""
