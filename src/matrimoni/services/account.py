from typing import Optional

from ..accounts.directory import AccountDirectory
from ..domain.errors import MissingRequiredFieldsError
from ..domain.models import User


class AccountService:
    """handles the register / login / logout flow."""

    def __init__(self, accounts: AccountDirectory):
        self.accounts = accounts

    def register(self, name: str, email: str, password: str) -> User:
        """
        register a new account and log straight into it.

        raises:
            MissingRequiredFieldsError: if name, email or password is empty
            DuplicateEmailError: if the email is already registered
        """
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not password:
            raise MissingRequiredFieldsError()

        self.accounts.register(name, email, password)
        return self.accounts.login(email, password)

    def login(self, email: str, password: str) -> User:
        return self.accounts.login((email or "").strip(), password or "")

    def logout(self) -> None:
        self.accounts.logout()

    def whoami(self) -> Optional[User]:
        return self.accounts.current_user()
