from typing import List


class MatrimoniError(Exception):
    """base class for exceptions in matrimoni."""
    pass


class DuplicateEmailError(MatrimoniError):
    """raised when registering an email that already has an account."""
    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered.")


class InvalidCredentialsError(MatrimoniError):
    def __init__(self):
        super().__init__("Invalid credentials.")


class ProfileNotFoundError(MatrimoniError):
    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__("Profile not found.")


class ValidationFailedError(MatrimoniError):
    """raised when a biodata submission has one or more field errors."""
    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class MissingRequiredFieldsError(MatrimoniError):
    def __init__(self, message: str = "Please fill all registration fields."):
        super().__init__(message)


class NotLoggedInError(MatrimoniError):
    def __init__(self, message: str = "You must be logged in to save."):
        super().__init__(message)


class NotOwnerError(MatrimoniError):
    """raised when the session user tries to change someone else's profile."""
    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__("You can only change profiles you created.")
