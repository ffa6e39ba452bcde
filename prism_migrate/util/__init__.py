"""
Utility functions and helpers.

Modules:
- files: Directory and text file helpers
- naming: Account name conversions
- templates: Jinja2 template loading and rendering
"""
