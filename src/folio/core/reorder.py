"""All-or-nothing reordering of an owner's projects.

apply_reorder() checks the batch, asks storage which ids the owner actually
owns, and only then writes every position. If any id is foreign or missing,
nothing is written. Positions are written verbatim; gaps and arbitrary
starting values are allowed.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Union

from folio.core.errors import InvalidReorderError, NotFoundError, ValidationIssue
from folio.utils.async_utils import maybe_await

OwnershipCheckFn = Callable[[str, list[str]], Union[Iterable[str], Awaitable[Iterable[str]]]]
ApplyFn = Callable[[str, str, int], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class ReorderEntry:
    """New position for one project."""

    id: str
    position: int


def _batch_issues(entries: list[ReorderEntry]) -> list[ValidationIssue]:
    issues = []
    seen: set[str] = set()
    for i, entry in enumerate(entries):
        if not entry.id:
            issues.append(ValidationIssue(field=f"entries.{i}.id", issue="Required"))
        elif entry.id in seen:
            issues.append(
                ValidationIssue(
                    field=f"entries.{i}.id",
                    issue="Duplicate id values are not allowed",
                )
            )
        seen.add(entry.id)

        # bool is an int subclass but never a valid position
        if isinstance(entry.position, bool) or not isinstance(entry.position, int):
            issues.append(
                ValidationIssue(
                    field=f"entries.{i}.position",
                    issue="Position must be an integer",
                )
            )
        elif entry.position < 0:
            issues.append(
                ValidationIssue(
                    field=f"entries.{i}.position",
                    issue="Position must be non-negative",
                )
            )
    return issues


async def apply_reorder(
    owner_id: str,
    entries: Iterable[ReorderEntry],
    ownership_check_fn: OwnershipCheckFn,
    apply_fn: ApplyFn,
) -> None:
    """Write new positions for a batch of projects.

    Args:
        owner_id: The acting owner
        entries: Distinct ids with non-negative positions
        ownership_check_fn: (owner_id, ids) -> ids owned by owner_id
        apply_fn: (owner_id, id, position) -> persists one position. Expected
            to run inside a single storage transaction for the whole batch.

    Raises:
        InvalidReorderError: Duplicate ids or invalid positions
        NotFoundError: Any id is not owned by owner_id (nothing is written)
    """
    entries = list(entries)
    issues = _batch_issues(entries)
    if issues:
        raise InvalidReorderError(issues=issues)
    if not entries:
        return

    ids = [entry.id for entry in entries]
    owned = set(await maybe_await(ownership_check_fn(owner_id, ids)))
    if any(entry_id not in owned for entry_id in ids):
        raise NotFoundError()

    for entry in entries:
        await maybe_await(apply_fn(owner_id, entry.id, entry.position))
