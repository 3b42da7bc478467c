"""
Version 1 of the API.

This subpackage bundles the card and list endpoints.  Breaking changes
should be introduced in a new version subpackage (e.g. ``v2``).
"""
