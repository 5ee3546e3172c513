"""Advent of Code solutions, one module per puzzle day."""
