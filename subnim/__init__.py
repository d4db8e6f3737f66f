"""Subtraction Nim against an optimal opponent."""
