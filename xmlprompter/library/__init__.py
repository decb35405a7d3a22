"""Static catalogue package.

Roles, user goals and prompt templates offered to users when filling in the
prompt form. Data only; no I/O.
"""
