"""
pagetree CLI commands
"""
