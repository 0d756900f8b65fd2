"""
Bulk store import.

Responsibilities:
- Read a CSV export of stores (spreadsheet or database dump).
- Normalize tolerant column names and values into the store entry schema.
- Insert the cleaned rows into the hosted database.
"""
