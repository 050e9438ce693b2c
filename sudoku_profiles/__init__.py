"""Sudoku user active games service."""
