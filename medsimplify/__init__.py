"""
Medical Report Simplifier

Turns a medical report into a plain-language, sectioned summary in the
reader's language and exports it as a PDF.
"""

__version__ = "1.0.0"
