"""Constraint checks run on the manifest before generation."""
