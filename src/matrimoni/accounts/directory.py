import logging
import time
from typing import List, Optional

from pydantic import ValidationError

from ..domain.errors import DuplicateEmailError, InvalidCredentialsError
from ..domain.models import User
from ..storage.store import KeyValueStore

logger = logging.getLogger(__name__)

USERS_KEY = "users"
SESSION_KEY = "sessionUser"


class AccountDirectory:
    """registered users plus the single session slot."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _records(self) -> list:
        """the stored user records, exactly as persisted."""
        records = self.store.get(USERS_KEY)
        if not isinstance(records, list):
            # first access (or unreadable state) starts from an empty directory
            records = []
            self.store.set(USERS_KEY, records)
        return records

    def _load(self) -> List[User]:
        users = []
        for record in self._records():
            try:
                users.append(User.model_validate(record))
            except ValidationError as e:
                logger.warning(f"skipping malformed user record: {e}")
        return users

    def _next_id(self, records: list) -> int:
        # millisecond timestamp, bumped so rapid registrations never collide
        now = int(time.time() * 1000)
        ids = [r.get("id") for r in records if isinstance(r, dict)]
        highest = max((i for i in ids if isinstance(i, int)), default=0)
        return max(now, highest + 1)

    def list_users(self) -> List[User]:
        return self._load()

    def find_by_email(self, email: str) -> Optional[User]:
        """look up a user by email, ignoring case."""
        email = email.lower()
        return next((u for u in self._load() if u.email == email), None)

    def register(self, name: str, email: str, password: str) -> User:
        """
        add a new user.

        raises:
            DuplicateEmailError: if the email is taken, compared case-insensitively
        """
        # records that fail validation are kept as stored and still count as taken
        records = self._records()
        taken = {
            r["email"].lower() for r in records
            if isinstance(r, dict) and isinstance(r.get("email"), str)
        }
        if email.lower() in taken:
            raise DuplicateEmailError(email)

        user = User(
            id=self._next_id(records),
            name=name,
            email=email.lower(),
            password=password,
        )
        records.append(user.model_dump())
        self.store.set(USERS_KEY, records)

        logger.debug(f"registered user {user.email}")
        return user

    def login(self, email: str, password: str) -> User:
        """
        start a session for the user matching email and password.

        raises:
            InvalidCredentialsError: if no user matches both
        """
        email = email.lower()
        user = next(
            (u for u in self._load() if u.email == email and u.password == password),
            None
        )
        if user is None:
            raise InvalidCredentialsError()

        self.store.set(SESSION_KEY, user.email)
        logger.debug(f"session started for {user.email}")
        return user

    def logout(self) -> None:
        self.store.remove(SESSION_KEY)

    def session_email(self) -> Optional[str]:
        """the email held in the session slot, as stored."""
        email = self.store.get(SESSION_KEY)
        if isinstance(email, str) and email:
            return email
        return None

    def current_user(self) -> Optional[User]:
        """resolve the session against the directory; None when logged out or unknown."""
        email = self.session_email()
        if email is None:
            return None
        return next((u for u in self._load() if u.email == email), None)
