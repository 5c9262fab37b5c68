"""Barn ammonia monitoring dashboard."""
