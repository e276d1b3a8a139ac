"""Packaged reference tables loaded by :mod:`ai_footprint.estimation.defaults`."""
