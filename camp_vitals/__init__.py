"""Vital-sign evaluation engine for health camps.

This package contains the reference ranges, per-metric evaluators and the
aggregation rule, isolated from any form binding or rendering layer.
"""
