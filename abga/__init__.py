"""
Google Optimize integration for the MonsterInsights and Analytify
analytics plugins.
"""

__version__ = "1.0.0"
