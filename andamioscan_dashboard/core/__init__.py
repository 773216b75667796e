"""
Core utilities shared by every layer: the error taxonomy.
"""
