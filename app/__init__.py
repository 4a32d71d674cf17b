"""
Student Idea Platform
A small CRUD backend connecting students and company HR.

Architecture:
- FastAPI: HTTP/JSON API under /api
- MongoDB: users, problems, solutions
- bcrypt (passlib): password digests
"""

__version__ = "1.0.0"
