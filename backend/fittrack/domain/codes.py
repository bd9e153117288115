# fittrack/domain/codes.py
import secrets
import string

GROUP_CODE_ALPHABET = string.ascii_uppercase + string.digits
GROUP_CODE_LENGTH = 6


def generate_group_code() -> str:
    """
    Uniform draw over 36 symbols x 6 positions (~2.2e9 codes).
    Uniqueness is the store's job; see GroupRepository.create.
    """
    return "".join(secrets.choice(GROUP_CODE_ALPHABET) for _ in range(GROUP_CODE_LENGTH))


def normalize_group_code(code: str) -> str:
    return code.strip().upper()


def is_valid_group_code(code: str) -> bool:
    return len(code) == GROUP_CODE_LENGTH and all(c in GROUP_CODE_ALPHABET for c in code)
