"""Flat string encoding for a membership's role set.

A role set is stored as one string: role names joined with ROLE_SEPARATOR.
Role refuses names containing the separator, so splitting is unambiguous.
Order carries no meaning; encode sorts for stable output and decode drops
blank tokens.
"""

from __future__ import annotations

from collections.abc import Iterable

from iam.domain.value_objects import ROLE_SEPARATOR, Role


def encode_roles(roles: Iterable[Role]) -> str:
    """Join a role set into its stored form."""
    return ROLE_SEPARATOR.join(sorted({role.name for role in roles}))


def split_role_names(raw: str | None) -> tuple[str, ...]:
    """Split a stored role string into its non-blank names, in stored order."""
    if not raw:
        return ()
    return tuple(token for token in raw.split(ROLE_SEPARATOR) if token.strip())


def decode_roles(raw: str | None) -> list[Role]:
    """Rebuild Role objects from a stored role string.

    Never constructs a Role from a blank token.
    """
    return [Role(name) for name in split_role_names(raw)]
