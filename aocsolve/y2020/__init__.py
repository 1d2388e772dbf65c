"""Solvers for 2020 Advent of Code days 1 to 22, 24 and 25."""