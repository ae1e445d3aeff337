from django.apps import AppConfig


class StripeIntegrationConfig(AppConfig):
    """Configuration for the Stripe integration app.

    The ready() hook registers the module's filters and actions into the
    host's hook registry.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "stripe_integration"
    verbose_name = "Stripe"
    provider = None

    def ready(self) -> None:
        from common.hooks import registry
        from .provider import StripeServiceProvider

        if self.provider is None:
            self.provider = StripeServiceProvider(registry)
            self.provider.hooks()
