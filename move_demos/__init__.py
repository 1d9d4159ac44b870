"""
Demo flows for token, marketplace and managed-coin contracts on Aptos.
"""

__version__ = "0.1.0"
