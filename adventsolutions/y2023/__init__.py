"""Puzzle solvers for the 2023 event: days 1 to 10."""