"""Hierarchical income/expense budget ledger engine."""
