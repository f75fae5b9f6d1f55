"""
Userbase Backend — Field Validation Rules
===========================================

What:  Ordered (field, predicate, message) rules checked against inbound DTOs.
Why:   Every violated field is reported in one 400 response, with stable
       messages the frontend can display next to the input.
How:   validate() walks the rule list once. For each field only the first
       failing rule is recorded; other fields are still checked.
Who:   Run by the app.dependencies.validated_user_dto dependency, before
       any route body or service call executes.

Rule order matters: presence is checked first, then size, then format.
email-validator rejects anything over 254 characters on its own, so the
email size rule has to run before the syntax check to be reported.
"""

from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from email_validator import EmailNotValidError, validate_email

from app.exceptions import FieldViolation, ValidationFailure

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
ABOUT_MAX_LENGTH = 1000


class Rule(NamedTuple):
    field: str
    predicate: Callable[[Any], bool]
    message: str


# ── Predicates ────────────────────────────────────────────────────────────

def not_blank(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def max_length(limit: int) -> Callable[[Optional[str]], bool]:
    def check(value: Optional[str]) -> bool:
        return value is None or len(value) <= limit
    return check


def is_email(value: Optional[str]) -> bool:
    if value is None:
        return False
    try:
        # Syntax only: no DNS lookups on the request path
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


# ── Rule Sets ─────────────────────────────────────────────────────────────

USER_RULES: List[Rule] = [
    Rule("name", not_blank, "must not be empty"),
    Rule("name", max_length(NAME_MAX_LENGTH), f"size must be between 1 and {NAME_MAX_LENGTH}"),
    Rule("email", not_blank, "must not be empty"),
    Rule("email", max_length(EMAIL_MAX_LENGTH), f"size must be between 1 and {EMAIL_MAX_LENGTH}"),
    Rule("email", is_email, "must be a valid email address"),
    Rule("about", max_length(ABOUT_MAX_LENGTH), f"size must be at most {ABOUT_MAX_LENGTH}"),
]


def validate(obj: Any, rules: Sequence[Rule] = USER_RULES) -> List[FieldViolation]:
    """
    Evaluate every rule against `obj` and collect the violations.

    Returns:
        One FieldViolation per failing field, in rule order. Empty when valid.
    """
    violations: List[FieldViolation] = []
    failed = set()
    for rule in rules:
        if rule.field in failed:
            continue
        if not rule.predicate(getattr(obj, rule.field, None)):
            failed.add(rule.field)
            violations.append(FieldViolation(rule.field, rule.message))
    return violations


def ensure_valid(obj: Any, rules: Sequence[Rule] = USER_RULES) -> None:
    """
    Raises:
        ValidationFailure: At least one rule failed (→ 400)
    """
    violations = validate(obj, rules)
    if violations:
        raise ValidationFailure(violations)
