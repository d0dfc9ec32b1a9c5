"""
Service layer for the ProfileHub server.

- auth: Password hashing, admin seeding and login sessions for the role switch
- uploads: On-disk storage of uploaded documents
- deps: FastAPI dependencies wiring sessions, repositories and services together
"""
