"""Sorting and star filtering for a product's comment list."""

from datetime import UTC, datetime

from protean.utils.globals import current_domain

from storefront.review.comment import Comment

SORT_ORDERS = ("newest", "oldest", "highest", "lowest")

_EPOCH = datetime.min.replace(tzinfo=UTC)


def parse_star_filter(stars: str | None) -> list[int]:
    """Turn ``"5,4"`` into ``[5, 4]``, dropping anything that is not a whole star from 1 to 5."""
    if not stars:
        return []

    values = []
    for part in stars.split(","):
        try:
            value = float(part)
        except ValueError:
            continue
        if value.is_integer() and 1 <= value <= 5:
            values.append(int(value))
    return values


def _created(comment: Comment) -> datetime:
    moment = comment.created_at or _EPOCH
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


def _stars(comment: Comment) -> int:
    # Unrated comments sort below every star rating
    return comment.rating or 0


def sort_comments(comments: list[Comment], sort: str = "newest") -> list[Comment]:
    """Order comments by one of ``SORT_ORDERS``; unknown values fall back to newest."""
    by_recency = sorted(comments, key=_created, reverse=(sort != "oldest"))
    if sort == "highest":
        return sorted(by_recency, key=_stars, reverse=True)
    if sort == "lowest":
        return sorted(by_recency, key=_stars)
    return by_recency


def list_comments(product_id, sort: str = "newest", stars: str | None = None) -> list[Comment]:
    comments = current_domain.repository_for(Comment).for_product(product_id)

    wanted = parse_star_filter(stars)
    if wanted:
        comments = [c for c in comments if c.rating in wanted]

    return sort_comments(comments, sort)
