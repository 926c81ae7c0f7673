"""Structural email address validation."""

from protean.exceptions import ValidationError

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def validate_email_address(email: str) -> str:
    """Ensure ``email`` follows a basic valid structure and return it normalized.

    Checks: exactly one @, non-empty local and domain parts without leading or
    trailing dots, a dotted domain whose labels do not start or end with a
    hyphen, no consecutive dots, no whitespace and no forbidden characters.
    """
    email = (email or "").strip()

    if not email:
        raise ValidationError({"email": ["is required"]})

    if any(ch in email for ch in (" ", "\t", "\n")) or email.count("@") != 1:
        raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
        raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    if ".." in email or any(ch in email for ch in _FORBIDDEN):
        raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    return email.lower()
