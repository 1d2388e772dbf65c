"""Advent of Code puzzle solvers for 2019, 2020 and 2024, and a command-line runner."""

__version__ = "0.1.0"