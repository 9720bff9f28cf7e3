"""
shophours - operating-hours schedule and service completion calculator.
"""

__version__ = "0.1.0"
