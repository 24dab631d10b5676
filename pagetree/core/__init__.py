"""
pagetree core - route compilation
"""
