"""
Persistence adapters.

These modules encapsulate how user records are stored and retrieved (today a
JSON file). Services call them instead of touching the file directly.
"""
