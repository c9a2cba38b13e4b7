# trashcam/utils/validation.py
import re

# at least one lowercase, one uppercase and one non-word character, in any order
USERNAME_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\W).+\Z", re.ASCII)

INVALID_USERNAME_MESSAGE = (
    "Invalid username. Must contain at least one lowercase, "
    "one uppercase, and one special character."
)

def is_valid_username(username) -> bool:
    if not isinstance(username, str):
        return False
    return USERNAME_PATTERN.match(username) is not None
