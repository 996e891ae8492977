"""Classic algorithms on numbers, strings, arrays, matrices and combinatorics."""

__version__ = "0.1.0"
__all__ = ["number_theory", "text", "matrix", "arrays", "combinatorics"]