"""
Shared service utilities.

- http.py - requests session with retry, fetch_json (bounded, never raises)
"""
