"""Organizational health checks.

Loads a flat employee list, builds the manager -> subordinates index and
flags manager salaries outside the allowed band and reporting lines that
are too long.
"""

__version__ = "0.1.0"
