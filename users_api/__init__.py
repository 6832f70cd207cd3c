"""
Users API: CRUD over the users resource.
"""
