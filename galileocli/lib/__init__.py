"""
Galileo CLI library modules
"""
