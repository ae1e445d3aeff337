"""
Database models for the mailboxes app.

A mailbox is a support inbox.  Customers write into mailboxes and each
exchange is a conversation, which keeps a copy of the address the
customer wrote from along with a reference to the mailbox it landed in.
Plugins resolve a customer email to its mailbox through conversations.
"""
from __future__ import annotations

from django.db import models


class Mailbox(models.Model):
    """A support inbox."""

    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "mailboxes"

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class Customer(models.Model):
    """A person who has written into one or more mailboxes."""

    first_name = models.CharField(max_length=255, blank=True)
    last_name = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def get_full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    def get_main_email(self) -> str:
        """Return the customer's first recorded email, or '' if none."""
        email = self.emails.order_by("id").values_list("email", flat=True).first()
        return email or ""

    def __str__(self) -> str:
        return self.get_full_name() or self.get_main_email() or f"Customer {self.pk}"


class CustomerEmail(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name="emails")
    email = models.EmailField(unique=True)

    def save(self, *args, **kwargs):
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.email


class Conversation(models.Model):
    """A support conversation between a customer and a mailbox."""

    mailbox = models.ForeignKey(Mailbox, on_delete=models.CASCADE, related_name="conversations")
    customer = models.ForeignKey(
        Customer, on_delete=models.SET_NULL, related_name="conversations", null=True, blank=True
    )
    customer_email = models.EmailField(db_index=True)
    subject = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]
        indexes = [
            models.Index(fields=["customer_email", "mailbox"], name="mailboxes_conv_email_mbx_idx"),
        ]

    def save(self, *args, **kwargs):
        self.customer_email = (self.customer_email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"#{self.pk} {self.subject or '(no subject)'}"
