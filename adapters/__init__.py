"""Presentation and integration adapters around the evaluation engine."""
