"""Pydantic schemas for ledger requests and reports."""
