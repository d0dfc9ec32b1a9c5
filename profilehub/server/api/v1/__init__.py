"""
Version 1 of the ProfileHub HTTP API.

Routers are mounted under ``/api`` by :mod:`profilehub.server.main`.
"""
