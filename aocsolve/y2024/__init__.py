"""Solvers for 2024 Advent of Code days 1, 2, 3, 4, 5, 7, 9 and 10."""