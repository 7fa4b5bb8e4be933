"""Discussion thread building.

Comments are persisted as a flat, id-indexed set. The nested thread shown
to students is a derived view rebuilt from that set whenever it changes;
nodes borrow the comments and are never edited in place.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Iterator

from campus.domain.model.comment import Comment
from campus.domain.value import CommentId, ThreadOrder


@dataclass(frozen=True)
class ThreadNode:
    """Node in a course discussion thread.

    Represents a comment and its replies. Orphaned replies (whose parent
    is not in the data set) are promoted to roots with depth 0.
    """

    comment: Comment
    depth: int
    children: tuple["ThreadNode", ...] = ()

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def is_orphan(self) -> bool:
        """A root that was meant to be a reply."""
        return self.depth == 0 and self.comment.parent_id is not None

    @property
    def reply_count(self) -> int:
        """Number of replies below this node, at any depth."""
        return sum(1 for _ in self.walk()) - 1

    def walk(self) -> Iterator["ThreadNode"]:
        """Yield this node and its descendants in pre-order."""
        stack: list[ThreadNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def _sort_key(comment: Comment) -> tuple:
    # ID breaks created_at ties so sibling order is total
    return (comment.created_at, str(comment.id))


def build_thread(
    comments: Iterable[Comment],
    order: ThreadOrder = ThreadOrder.OLDEST_FIRST,
) -> list[ThreadNode]:
    """Build the thread forest for one course.

    Algorithm:
    1. Index comments by ID (first occurrence wins on duplicate IDs)
    2. Split into roots (no parent, or a parent missing from the set) and
       replies grouped by parent ID
    3. Sort every sibling group by created_at, then ID
    4. Walk down from each root assigning depth = parent depth + 1
    5. Anything no root reaches (only possible with cyclic parent links,
       which normal writes never produce) is surfaced as an extra root

    Never raises for malformed input, and every distinct comment appears
    exactly once in the result.

    Args:
        comments: Flat comments of a single course, in any order
        order: Sibling order applied at every level

    Returns:
        Root nodes with children populated recursively
    """
    by_id: dict[CommentId, Comment] = {}
    for comment in comments:
        by_id.setdefault(comment.id, comment)

    reverse = order is ThreadOrder.NEWEST_FIRST

    roots: list[Comment] = []
    children_of: dict[CommentId, list[Comment]] = defaultdict(list)
    for comment in by_id.values():
        parent_id = comment.parent_id
        if parent_id is None or parent_id not in by_id or parent_id == comment.id:
            roots.append(comment)
        else:
            children_of[parent_id].append(comment)

    for siblings in children_of.values():
        siblings.sort(key=_sort_key, reverse=reverse)
    roots.sort(key=_sort_key, reverse=reverse)

    placed: set[CommentId] = set()
    forest = [_build_subtree(root, children_of, placed) for root in roots]

    if len(placed) < len(by_id):
        stranded = sorted(
            (c for c in by_id.values() if c.id not in placed),
            key=_sort_key,
            reverse=reverse,
        )
        for comment in stranded:
            if comment.id not in placed:
                forest.append(_build_subtree(comment, children_of, placed))
        forest.sort(key=lambda node: _sort_key(node.comment), reverse=reverse)

    return forest


def _build_subtree(
    root: Comment,
    children_of: dict[CommentId, list[Comment]],
    placed: set[CommentId],
) -> ThreadNode:
    """Build one root's subtree.

    Iterative, so very deep reply chains don't hit the recursion limit.
    """
    visit_order: list[tuple[Comment, int]] = []
    stack: list[tuple[Comment, int]] = [(root, 0)]
    placed.add(root.id)
    while stack:
        comment, depth = stack.pop()
        visit_order.append((comment, depth))
        for child in reversed(children_of.get(comment.id, ())):
            if child.id not in placed:
                placed.add(child.id)
                stack.append((child, depth + 1))

    # Reverse pre-order builds every child before its parent
    built: dict[CommentId, ThreadNode] = {}
    for comment, depth in reversed(visit_order):
        children = tuple(
            built[child.id]
            for child in children_of.get(comment.id, ())
            if child.id in built
        )
        built[comment.id] = ThreadNode(comment=comment, depth=depth, children=children)

    return built[root.id]


def iter_nodes(forest: Iterable[ThreadNode]) -> Iterator[ThreadNode]:
    """Yield every node of a forest in pre-order."""
    for root in forest:
        yield from root.walk()


def count_nodes(forest: Iterable[ThreadNode]) -> int:
    """Total number of comments in a forest."""
    return sum(1 for _ in iter_nodes(forest))
