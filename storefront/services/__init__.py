"""Storefront helper services."""
