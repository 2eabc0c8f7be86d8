"""
Ledger Core: a double-entry accounting core.

Balanced journal entries posted against typed accounts, with
balances derived from posting history.
"""

__version__ = "0.1.0"
