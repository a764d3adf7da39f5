import logging
import uuid
from typing import Dict, List, Optional, Tuple

from ..accounts.directory import AccountDirectory
from ..biodata.directory import ProfileDirectory
from ..biodata.validation import validate
from ..domain.errors import (
    NotLoggedInError,
    NotOwnerError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from ..domain.models import PROFILE_FIELDS, Profile, ProfileListing

logger = logging.getLogger(__name__)


def new_profile_id() -> str:
    return uuid.uuid4().hex


class BiodataService:
    """biodata use cases for the logged-in user."""

    def __init__(self, accounts: AccountDirectory, profiles: ProfileDirectory):
        self.accounts = accounts
        self.profiles = profiles

    def _require_session(self) -> str:
        email = self.accounts.session_email()
        if email is None:
            raise NotLoggedInError()
        return email

    def _require_owned(self, profile_id: str, session: str) -> Profile:
        existing = self.profiles.get(profile_id)
        if existing is None:
            raise ProfileNotFoundError(profile_id)
        if existing.owner_email != session:
            raise NotOwnerError(profile_id)
        return existing

    def save(self, form: Dict[str, str], profile_id: Optional[str] = None) -> Tuple[Profile, bool]:
        """
        create or update a profile from submitted form values.

        args:
            form: field name -> value; missing fields count as empty
            profile_id: id of the profile being edited, None for a new one

        returns:
            tuple of (saved profile, True if it was created)

        raises:
            NotLoggedInError: if nobody is logged in
            ValidationFailedError: if any field is missing or malformed
            ProfileNotFoundError, NotOwnerError: when editing
        """
        session = self._require_session()
        if profile_id:
            self._require_owned(profile_id, session)

        values = {field: (form.get(field) or "").strip() for field in PROFILE_FIELDS}
        profile = Profile(
            id=profile_id or new_profile_id(),
            owner_email=session,
            **values
        )

        errors = validate(profile)
        if errors:
            raise ValidationFailedError(errors)

        if profile_id:
            self.profiles.update(profile)
            return profile, False

        self.profiles.create(profile)
        logger.debug(f"{session} added profile {profile.id}")
        return profile, True

    def editable(self, profile_id: str) -> Profile:
        """
        the session user's own profile, ready to be edited.

        raises:
            NotLoggedInError, ProfileNotFoundError, NotOwnerError
        """
        return self._require_owned(profile_id, self._require_session())

    def delete(self, profile_id: str) -> None:
        """
        delete one of the session user's profiles.

        raises:
            NotLoggedInError, ProfileNotFoundError, NotOwnerError
        """
        session = self._require_session()
        self._require_owned(profile_id, session)
        self.profiles.delete(profile_id)

    def view(self, profile_id: str) -> Profile:
        profile = self.profiles.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def browse(self, query: str = "", mine: bool = False) -> List[ProfileListing]:
        """search profiles and annotate each with ownership and poster name."""
        session = self.accounts.session_email()
        names = {u.email: u.name for u in self.accounts.list_users()}

        listings = []
        for profile in self.profiles.search(query):
            is_owner = session is not None and profile.owner_email == session
            if mine and not is_owner:
                continue
            listings.append(ProfileListing(
                profile=profile,
                is_owner=is_owner,
                posted_by=names.get(profile.owner_email, profile.owner_email),
            ))
        return listings
