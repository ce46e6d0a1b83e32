"""Mentorship platform API: mentor and session endpoints behind a request validation gate."""
