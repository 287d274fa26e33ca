"""
EditorConfig Properties - Core Package

Typed parsers for the standard EditorConfig properties, turning raw string
values into enums, integers and booleans.
"""

__version__ = "0.1.0"
__author__ = "EditorConfig Properties Team"
