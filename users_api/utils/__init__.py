"""
Utility modules for the Users API.
"""
