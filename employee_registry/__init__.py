"""
Employee registry: CRUD over employees with a cached employee list
"""
