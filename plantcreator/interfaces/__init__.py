"""
Interfaces Layer

Command-line entry points.
"""
