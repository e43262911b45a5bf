"""
FP Tour App - Functional Idioms Tour

A small tour of functional-first idioms in Python. Resolves markup documents
from URLs or files and queries them for links, and runs composable query
pipelines over immutable financial transaction records.
"""

__version__ = "0.1.0"
__author__ = "FP Tour Team"
