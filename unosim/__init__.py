"""Deterministic UNO simulator."""
