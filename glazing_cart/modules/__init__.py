"""
Calculation-module registry and module families.

Static tables only. No I/O, no engine calls.
Given a glazing category and type, say which engine module serves it,
which form fields it needs, and how to build its parameter record.
"""
