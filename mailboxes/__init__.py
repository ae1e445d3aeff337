"""
Mailboxes app package for the helpdesk backend.

Holds the host data that plugin modules read (mailboxes, customers and
their conversations) and the screens that expose extension points for
those plugins to render into.
"""
