"""CSV column and cell normalization utilities."""

from typing import Any, Optional
import pandas as pd

def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    Collapses repeated whitespace and strips the ends. Case is preserved.

    Examples:
        >>> normalize_column_name(" Quantity  In Stock ")
        "Quantity In Stock"
    """
    return ' '.join(str(name).split())

def normalize_dataframe_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize all column names in a DataFrame."""
    return df.rename(columns=normalize_column_name)

def normalize_cell(value: Any) -> Optional[str]:
    """Turn a raw CSV cell into a stripped string, or None when blank.

    Examples:
        >>> normalize_cell(pd.NA)
        None
        >>> normalize_cell("  NES ")
        "NES"
    """
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None
