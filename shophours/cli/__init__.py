"""
Command-line presenting layer.
"""
