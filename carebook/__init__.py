"""
CareBook

A command-driven contact book for patients and specialists: add, edit,
find, list and delete contacts with prefix-tagged commands.
"""

__version__ = "0.1.0"
