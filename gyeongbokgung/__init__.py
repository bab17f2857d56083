"""
Secret of Gyeongbokgung Palace - a short text adventure.
"""

__version__ = "0.1.0"
