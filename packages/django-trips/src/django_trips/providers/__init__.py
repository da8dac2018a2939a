"""Email providers."""

from ..conf import EmailConfig, get_email_config
from ..exceptions import ConfigurationError
from .base import BaseEmailProvider, EmailAttachment, SendResult
from .console import ConsoleEmailProvider
from .django_mail import DjangoMailProvider
from .ses import SESEmailProvider

PROVIDERS = {
    ConsoleEmailProvider.provider_name: ConsoleEmailProvider,
    DjangoMailProvider.provider_name: DjangoMailProvider,
    SESEmailProvider.provider_name: SESEmailProvider,
}


def get_email_provider(config: EmailConfig | None = None) -> BaseEmailProvider:
    """Get the email provider named by configuration.

    Raises:
        ConfigurationError: If the provider name is unknown
    """
    config = config or get_email_config()
    try:
        provider_class = PROVIDERS[config.provider]
    except KeyError:
        raise ConfigurationError(f"Unknown email provider: {config.provider}")
    return provider_class(config)


__all__ = [
    "BaseEmailProvider",
    "ConsoleEmailProvider",
    "DjangoMailProvider",
    "EmailAttachment",
    "SESEmailProvider",
    "SendResult",
    "get_email_provider",
]
