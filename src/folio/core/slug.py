"""Project slug generation.

A slug is minted once, when a project is created, from its display name:

    base_slug("My Awesome Project!! 2024")  ->  "my-awesome-project-2024"

Uniqueness within an owner's projects is resolved by probing
"base", "base-2", "base-3", ... against an existence check supplied by the
storage layer. Storage remains the final authority: if an insert loses a
race, mint_slug() excludes that candidate and resolves again.
"""

import re
from typing import Any, Awaitable, Callable, Collection, Union

from folio.core.errors import SlugConflictError, SlugExhaustedError
from folio.utils.async_utils import maybe_await

MAX_ATTEMPTS = 100
MAX_CONFLICT_RETRIES = 3

_DISALLOWED = re.compile(r"[^a-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

ExistsFn = Callable[[str], Union[bool, Awaitable[bool]]]
InsertFn = Callable[[str], Union[Any, Awaitable[Any]]]


def base_slug(display_name: str) -> str:
    """Derive the deterministic base slug for a display name.

    Lower-cases, drops characters outside [a-z0-9_ whitespace -], turns
    whitespace runs into a hyphen, collapses hyphen runs and trims hyphens
    from both ends. Underscores are kept as-is.

    A name made only of stripped characters yields "".
    """
    slug = display_name.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def candidate(base: str, attempt: int) -> str:
    """Return the candidate slug for a 1-based attempt number."""
    if attempt == 1:
        return base
    return f"{base}-{attempt}"


async def resolve_unique(
    base: str,
    exists_fn: ExistsFn,
    max_attempts: int = MAX_ATTEMPTS,
    exclude: Collection[str] = (),
) -> str:
    """Find the first free candidate for a base slug.

    Candidates are probed one at a time, in ascending suffix order.

    Args:
        base: Output of base_slug()
        exists_fn: Returns True if the candidate is taken for this owner.
            May be a plain or an async callable.
        max_attempts: Number of candidates to try before giving up
        exclude: Candidates to treat as taken without probing

    Returns:
        The first candidate that is neither excluded nor taken

    Raises:
        SlugExhaustedError: If every attempt collided
    """
    for attempt in range(1, max_attempts + 1):
        slug = candidate(base, attempt)
        if slug in exclude:
            continue
        if not await maybe_await(exists_fn(slug)):
            return slug

    raise SlugExhaustedError(base, max_attempts)


async def mint_slug(
    display_name: str,
    exists_fn: ExistsFn,
    insert_fn: InsertFn,
    max_attempts: int = MAX_ATTEMPTS,
    max_conflicts: int = MAX_CONFLICT_RETRIES,
    fallback: str = "project",
) -> str:
    """Resolve a slug for a new project and hand it to storage.

    insert_fn(slug) persists the project; it raises SlugConflictError when
    the storage uniqueness constraint rejects the slug. The rejected
    candidate is excluded and resolution starts over.

    Args:
        display_name: Project display name
        exists_fn: Existence check scoped to the owner
        insert_fn: Persists the project under the given slug
        max_attempts: Per-resolution attempt bound
        max_conflicts: Number of storage conflicts tolerated
        fallback: Base used when the display name yields an empty slug

    Returns:
        The slug the project was stored under

    Raises:
        SlugExhaustedError: If no slug could be stored; conflicts holds the
            number of storage rejections
    """
    base = base_slug(display_name) or fallback
    rejected: set[str] = set()

    for _ in range(max_conflicts + 1):
        slug = await resolve_unique(base, exists_fn, max_attempts, exclude=rejected)
        try:
            await maybe_await(insert_fn(slug))
        except SlugConflictError:
            rejected.add(slug)
            continue
        return slug

    raise SlugExhaustedError(base, max_attempts, conflicts=len(rejected))
