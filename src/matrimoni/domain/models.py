from pydantic import BaseModel, ConfigDict, Field

PROFILE_FIELDS = [
    "name",
    "gender",
    "dob",
    "contact",
    "email",
    "height",
    "education",
    "occupation",
    "location",
    "religion",
]


class User(BaseModel):
    """a registered account. passwords are kept verbatim."""
    id: int
    name: str
    email: str
    password: str


class Profile(BaseModel):
    """a biodata listing, persisted with the `ownerEmail` key."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner_email: str = Field(alias="ownerEmail")
    name: str = ""
    gender: str = ""
    dob: str = ""
    contact: str = ""
    email: str = ""
    height: str = ""
    education: str = ""
    occupation: str = ""
    location: str = ""
    religion: str = ""

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class ProfileListing(BaseModel):
    """a profile as shown to the session user in a listing."""
    profile: Profile
    is_owner: bool = False
    posted_by: str = ""
