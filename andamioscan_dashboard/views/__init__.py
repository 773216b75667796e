"""
View models and the mapper that builds them from upstream or placeholder records.
"""
