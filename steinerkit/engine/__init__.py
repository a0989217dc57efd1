"""Benchmark execution engine."""
