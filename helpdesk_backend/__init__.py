"""
Package initializer for the helpdesk backend.

The project is a plain Django deployment: the host helpdesk data lives
in the `mailboxes` app and payment-provider modules such as
`stripe_integration` plug into it through `common.hooks`.
"""
