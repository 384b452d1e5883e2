"""
Laboratory Work #1 - SOLID

- SRP: Report
- OCP: Shape and its area formula table
- DIP: Notification depending on MessageSender
"""

from .lab import run

__all__ = ["run"]
