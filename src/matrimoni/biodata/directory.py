import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from ..domain.errors import ProfileNotFoundError
from ..domain.models import Profile
from ..storage.store import KeyValueStore

logger = logging.getLogger(__name__)

BIODATA_KEY = "biodata"
SEARCH_FIELDS = ("name", "location", "education")


class ProfileDirectory:
    """biodata records kept as one array, in insertion order."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _records(self) -> list:
        """the stored biodata records, exactly as persisted."""
        records = self.store.get(BIODATA_KEY)
        if not isinstance(records, list):
            records = []
            self.store.set(BIODATA_KEY, records)
        return records

    def _load(self) -> List[Profile]:
        profiles = []
        for record in self._records():
            try:
                profiles.append(Profile.model_validate(record))
            except ValidationError as e:
                logger.warning(f"skipping malformed biodata record: {e}")
        return profiles

    @staticmethod
    def _index_of(records: list, profile_id: str) -> Optional[int]:
        for idx, record in enumerate(records):
            if isinstance(record, dict) and record.get("id") == profile_id:
                return idx
        return None

    def list(self) -> List[Profile]:
        """all profiles in storage order."""
        return self._load()

    def get(self, profile_id: str) -> Optional[Profile]:
        return next((p for p in self._load() if p.id == profile_id), None)

    def owned_by(self, email: str) -> List[Profile]:
        return [p for p in self._load() if p.owner_email == email]

    def create(self, profile: Profile) -> None:
        """append profile; the caller supplies a unique id."""
        records = self._records()
        records.append(profile.to_record())
        self.store.set(BIODATA_KEY, records)
        logger.debug(f"created profile {profile.id}")

    def update(self, profile: Profile) -> None:
        """
        replace the profile sharing profile.id, keeping its position.

        keys the model does not know about are carried over from the stored record.

        raises:
            ProfileNotFoundError: if no profile has that id
        """
        records = self._records()
        idx = self._index_of(records, profile.id)
        if idx is None:
            raise ProfileNotFoundError(profile.id)

        records[idx] = {**records[idx], **profile.to_record()}
        self.store.set(BIODATA_KEY, records)
        logger.debug(f"updated profile {profile.id}")

    def delete(self, profile_id: str) -> None:
        """remove the profile with profile_id; unknown ids are ignored."""
        records = self._records()
        idx = self._index_of(records, profile_id)
        if idx is None:
            return

        del records[idx]
        self.store.set(BIODATA_KEY, records)
        logger.debug(f"deleted profile {profile_id}")

    def search(self, query: str, fields: Sequence[str] = SEARCH_FIELDS) -> List[Profile]:
        """
        case-insensitive substring search over the named fields.

        an empty query returns every profile.
        """
        q = query.strip().lower()
        profiles = self._load()
        if not q:
            return profiles

        return [
            p for p in profiles
            if q in " ".join(str(getattr(p, f, "")) for f in fields).lower()
        ]
