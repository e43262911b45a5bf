"""Render and log a message for each contact method."""

from ..logging.config import get_logger
from .models import SMS, ContactMethod, Email, PostalMail, VoiceMail

logger = get_logger(__name__)


def format_message(message: str, method: ContactMethod) -> str:
    """
    Build the delivery line for a message.

    Raises:
        TypeError: If method is not one of the ContactMethod variants
    """
    if isinstance(method, PostalMail):
        address = method.address
        return f"Posting: {message} to {address.house_number} {address.street_name}"
    if isinstance(method, Email):
        return f"Emailing: {message} to {method.address}"
    if isinstance(method, VoiceMail):
        phone = method.phone
        return f"Leaving +{phone.code} {phone.number} a voicemail saying: {message}"
    if isinstance(method, SMS):
        phone = method.phone
        return f"SMS messaging +{phone.code} {phone.number}: {message}"
    raise TypeError(f"Unsupported contact method: {type(method).__name__}")


def send_message(message: str, method: ContactMethod) -> str:
    """Format and log a message for the given contact method."""
    line = format_message(message, method)
    logger.info(line, contact_method=type(method).__name__)
    return line
