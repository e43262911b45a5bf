"""
Contact methods and message dispatch.
"""
from .messenger import send_message
from .models import SMS, Address, ContactMethod, Email, PhoneNumber, PostalMail, VoiceMail

__all__ = [
    "Address",
    "PhoneNumber",
    "ContactMethod",
    "PostalMail",
    "Email",
    "VoiceMail",
    "SMS",
    "send_message",
]
