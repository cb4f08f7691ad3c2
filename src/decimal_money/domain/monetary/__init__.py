"""Monetary domain package.

This package contains classes for handling exact monetary amounts and
currencies: Currency identities, the Money value type with truncating decimal
arithmetic, and the errors both raise.
"""
