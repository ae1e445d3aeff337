"""
Django admin configuration for the mailboxes app.
"""
from django.contrib import admin
from .models import Conversation, Customer, CustomerEmail, Mailbox


@admin.register(Mailbox)
class MailboxAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "created_at")
    search_fields = ("name", "email")
    ordering = ("name",)


class CustomerEmailInline(admin.TabularInline):
    model = CustomerEmail
    extra = 1


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "main_email", "created_at")
    search_fields = ("first_name", "last_name", "emails__email")
    inlines = [CustomerEmailInline]
    ordering = ("-created_at",)

    def main_email(self, obj):
        return obj.get_main_email()


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ("id", "subject", "customer_email", "mailbox", "updated_at")
    list_filter = ("mailbox", "updated_at")
    search_fields = ("subject", "customer_email")
    ordering = ("-updated_at",)
