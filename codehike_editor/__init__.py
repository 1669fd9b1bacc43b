"""
Code Hike Editor — visual MDX editing with automatic component wiring.
"""

__version__ = "0.1.0"
