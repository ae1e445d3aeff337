"""
Stripe integration app package for the helpdesk backend.

Shows a customer's Stripe invoices and subscriptions on their profile
screen.  Each mailbox stores its own Stripe secret key, encrypted at
rest; the key is decrypted only for the request that needs it and is
used for read-only API calls.  See `provider.py` for the hooks this app
registers into the host.
"""
