"""
Command-line entry points for the demo flows.
"""
