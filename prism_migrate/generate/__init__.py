"""
Code generation for account setup modules.
"""

from prism_migrate.generate.typescript import module_name, render_account

__all__ = ["module_name", "render_account"]
