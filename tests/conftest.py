"""Shared pytest configuration for chart-tokens tests."""

import matplotlib

# Headless backend; no display in CI
matplotlib.use("Agg")
