"""
Views for the mailboxes app.

Server-rendered screens of the helpdesk.  Their templates expose the
extension points (`stylesheets`, `javascripts`, `customer.profile.extra`,
`mailboxes.settings.menu`) that plugin apps render into.
"""
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, render

from .models import Customer, Mailbox


@login_required
def mailbox_list(request):
    mailboxes = Mailbox.objects.all()
    return render(request, "mailboxes/mailbox_list.html", {"mailboxes": mailboxes})


@login_required
def mailbox_settings(request, pk):
    mailbox = get_object_or_404(Mailbox, pk=pk)
    return render(request, "mailboxes/mailbox_settings.html", {"mailbox": mailbox})


@login_required
def customer_profile(request, pk):
    customer = get_object_or_404(Customer.objects.prefetch_related("emails"), pk=pk)
    conversations = customer.conversations.select_related("mailbox")[:20]
    return render(
        request,
        "mailboxes/customer_profile.html",
        {"customer": customer, "conversations": conversations},
    )
