"""
Galileo CLI entry point and shared CLI plumbing
"""
