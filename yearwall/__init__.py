"""
yearwall - full-year calendar wallpapers rendered on demand
"""

__version__ = "0.1.0"
