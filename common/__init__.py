"""
Shared helpers for the helpdesk backend.

Hosts the extension-point registry that plugin apps register their
filters and actions into.
"""
