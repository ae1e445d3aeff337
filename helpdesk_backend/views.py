from django.conf import settings
from django.shortcuts import redirect


def index(request):
    # Logged in? send to the admin-facing mailbox list
    if request.user.is_authenticated:
        return redirect("mailboxes:mailbox-list")
    return redirect(settings.LOGIN_URL)
