"""Visualization package for wellbore schematics."""
