"""Puzzle solvers for the 2021 event: days 6 and 7."""