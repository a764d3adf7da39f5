import re
from typing import List

from ..domain.models import PROFILE_FIELDS, Profile

CONTACT_PATTERN = re.compile(r'^[0-9]{10}$')
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$')


def validate(profile: Profile) -> List[str]:
    """
    check a profile before it is saved.

    returns:
        error messages, one per problem; empty when the profile is valid
    """
    errors = [f"{field} is required." for field in PROFILE_FIELDS if not getattr(profile, field)]

    if profile.contact and not CONTACT_PATTERN.fullmatch(profile.contact):
        errors.append("Contact must be a 10-digit number.")
    if profile.email and not EMAIL_PATTERN.fullmatch(profile.email):
        errors.append("Invalid email address.")

    return errors
