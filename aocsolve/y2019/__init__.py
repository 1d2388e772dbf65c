"""Solvers for 2019 Advent of Code days 1 to 11, including the Intcode machine."""