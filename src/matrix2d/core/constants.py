__all__ = ["EPSILON", "DEFAULT_PRECISION", "CSV_LINE_END"]

# Tolerance for equality and invertibility tests.
EPSILON: float = 1e-14

DEFAULT_PRECISION: int = 4

CSV_LINE_END: str = "\r\n"
