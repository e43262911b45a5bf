"""Contact method variants.

ContactMethod is a closed union: PostalMail, Email, VoiceMail and SMS are its
only members.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Address:
    """Postal address."""
    house_number: int
    street_name: str


@dataclass(frozen=True)
class PhoneNumber:
    """International phone number split into country code and local number."""
    code: int
    number: str


@dataclass(frozen=True)
class PostalMail:
    address: Address


@dataclass(frozen=True)
class Email:
    address: str


@dataclass(frozen=True)
class VoiceMail:
    phone: PhoneNumber


@dataclass(frozen=True)
class SMS:
    phone: PhoneNumber


ContactMethod = Union[PostalMail, Email, VoiceMail, SMS]
