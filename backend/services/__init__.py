"""
High-level use cases for the users backend.

Each service module orchestrates repositories to implement one use case.
Scripts call these services instead of reading or writing the JSON file
directly.
"""
