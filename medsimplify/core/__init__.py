"""
Core adapters: language-model simplification and PDF export.
"""
