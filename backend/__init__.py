"""
Users backend: a fixed list of user records persisted to backend/users.json.
"""
