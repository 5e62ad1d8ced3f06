"""Test doubles and builders shared across the storefront test suite."""
