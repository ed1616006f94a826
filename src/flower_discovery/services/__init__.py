"""
Shared infrastructure for talking to external services.

- http.py  - requests session with retry/backoff and a default timeout
"""
