"""
utils package
-------------

Contains utility modules used throughout the scheduling assistant.

Includes the constants loader, logging setup, and date/time parsing helpers.
"""
