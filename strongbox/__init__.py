"""
Strongbox

Bank account products (plain, savings, checking, trust) with their own
deposit and withdrawal rules, and batch operations over groups of accounts.
"""

__version__ = "1.0.0"
