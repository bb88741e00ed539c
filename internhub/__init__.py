"""
InternHub
A marketplace connecting students to internships, jobs and courses.

Architecture:
- Repository: SQL (SQLAlchemy) or in-memory storage behind one interface
- Access control: session cookie resolved to a student/employer/admin principal
- Listing filter: pure predicates over internships, jobs and courses
"""

__version__ = "1.0.0"
