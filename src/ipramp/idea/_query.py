"""Filtering and ordering of idea listings."""

from collections.abc import Callable, Iterable  # noqa: TC003

from ipramp.enums import IdeaSortField, IdeaStatus, SortDirection

from ._models import Idea

__all__ = ["filter_and_sort_ideas", "matches_search"]


def matches_search(idea: Idea, query: str) -> bool:
    """Case-insensitive substring match over title, problem and tags.

    An empty or blank query matches every idea.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in idea.title.lower() or needle in idea.problem_statement.lower():
        return True
    return any(needle in tag.lower() for tag in idea.tags)


def _sort_key(sort_by: IdeaSortField) -> Callable[[Idea], str]:
    if sort_by is IdeaSortField.TITLE:
        return lambda idea: idea.title.lower()
    if sort_by is IdeaSortField.CREATED_AT:
        return lambda idea: idea.created_at
    return lambda idea: idea.updated_at


def filter_and_sort_ideas(
    ideas: Iterable[Idea],
    *,
    status: IdeaStatus | str | None = None,
    search: str = "",
    sort_by: IdeaSortField | str = IdeaSortField.UPDATED_AT,
    sort_dir: SortDirection | str = SortDirection.DESC,
) -> list[Idea]:
    """Filter ideas by status and search text, then order them.

    Args:
        ideas: Ideas to filter.
        status: Keep only ideas with this status; None keeps all.
        search: Text matched by :func:`matches_search`.
        sort_by: Field to order by. Titles compare case-insensitively.
        sort_dir: Ordering direction. Sorting is stable in both directions.

    Returns:
        A new list; the input is not modified.

    Raises:
        ValueError: If ``status``, ``sort_by`` or ``sort_dir`` is not a
            known value.
    """
    wanted = IdeaStatus(status) if status is not None else None
    key = _sort_key(IdeaSortField(sort_by))
    selected = [
        idea
        for idea in ideas
        if (wanted is None or idea.status is wanted) and matches_search(idea, search)
    ]
    return sorted(
        selected, key=key, reverse=SortDirection(sort_dir) is SortDirection.DESC
    )
