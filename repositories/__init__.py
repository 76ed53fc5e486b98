"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for one table.
Repositories receive rows from the database and return domain model objects;
an absent row is None or an empty list, a failed statement is a StorageError.
"""
