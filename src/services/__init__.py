"""Matching engine and the services that call it.

Services touching boto3/SQLAlchemy are imported lazily by handlers; the
engine modules have no third-party dependencies beyond pydantic.
"""
