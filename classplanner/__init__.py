"""Class scheduling records in SQLite and the JSON HTTP API that serves them."""

__version__ = "0.1.0"