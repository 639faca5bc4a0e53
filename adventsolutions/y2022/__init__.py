"""Puzzle solvers for the 2022 event: days 1 to 6 and 8 to 12."""