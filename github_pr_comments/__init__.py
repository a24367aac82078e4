"""
GitHub PR Comments

Collects keyword-matching comments on merged pull requests of a milestone
and renders per-author contribution reports in markdown.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
