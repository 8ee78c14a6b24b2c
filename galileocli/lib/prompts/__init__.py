"""
Question descriptors, their default resolution and the interactive engine that asks them
"""
