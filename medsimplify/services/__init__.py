"""
Application services used by the HTTP layer.
"""
from .intake import ACCEPTED_EXTENSIONS, read_report_upload

__all__ = ["ACCEPTED_EXTENSIONS", "read_report_upload"]
