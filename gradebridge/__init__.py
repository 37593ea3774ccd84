"""Validation and transformation layer between Google Classroom/Forms and the grading backend."""

__version__ = "0.1.0"
