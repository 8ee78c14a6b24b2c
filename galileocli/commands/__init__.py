"""
Galileo CLI commands
"""
