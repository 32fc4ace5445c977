"""Utility functions and helpers."""

from .csv_normalization import normalize_cell, normalize_column_name, normalize_dataframe_columns

__all__ = [
    'normalize_cell',
    'normalize_column_name',
    'normalize_dataframe_columns'
]
