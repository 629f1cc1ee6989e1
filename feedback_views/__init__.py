"""
Presentation-derivation layer for the course and feedback session client.

Derives session display status, orders student, session and course lists,
and rewrites access keys in student links.
"""

__version__ = "0.1.0"
