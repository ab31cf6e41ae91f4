"""
Read-only data access. Each function issues one parameterized query and
returns the record(s) or None; no business rules live here.
"""
