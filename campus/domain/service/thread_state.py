"""Per-node interaction state for a mounted thread view.

State is keyed by comment ID rather than by tree position, so rebuilding
the thread after a re-fetch, or a new reply landing elsewhere, leaves
every other node's collapse and in-flight flags alone.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from campus.domain.service.thread_service import ThreadNode
from campus.domain.value import CommentId


@dataclass
class ThreadUIState:
    """Interaction flags for one comment."""

    collapsed: bool = False
    is_deleting: bool = False
    is_replying: bool = False

    @property
    def is_default(self) -> bool:
        return not (self.collapsed or self.is_deleting or self.is_replying)


class ThreadViewState:
    """Keyed state map for one thread view.

    Lifecycle: create one when a course's thread is first shown, call
    ``retain`` after every re-fetch, and ``clear`` when the view goes away.
    """

    def __init__(self) -> None:
        self._states: dict[CommentId, ThreadUIState] = {}

    def __len__(self) -> int:
        return len(self._states)

    def get(self, comment_id: CommentId) -> ThreadUIState:
        """Snapshot of a node's state (defaults for unknown IDs)."""
        state = self._states.get(comment_id)
        return replace(state) if state else ThreadUIState()

    def _update(self, comment_id: CommentId, **changes: bool) -> None:
        state = replace(self._states.get(comment_id) or ThreadUIState(), **changes)
        if state.is_default:
            self._states.pop(comment_id, None)
        else:
            self._states[comment_id] = state

    # Collapse

    def set_collapsed(self, comment_id: CommentId, collapsed: bool) -> None:
        self._update(comment_id, collapsed=collapsed)

    def is_collapsed(self, comment_id: CommentId) -> bool:
        return self.get(comment_id).collapsed

    def toggle_collapsed(self, comment_id: CommentId) -> bool:
        """Flip the collapse flag.

        Returns:
            The new collapse state
        """
        collapsed = not self.is_collapsed(comment_id)
        self.set_collapsed(comment_id, collapsed)
        return collapsed

    # Delete guard

    def begin_delete(self, comment_id: CommentId) -> bool:
        """Mark a delete as in flight.

        Returns:
            False if a delete for this comment is already in flight, in
            which case the caller must not submit another one
        """
        if self.is_deleting(comment_id):
            return False
        self._update(comment_id, is_deleting=True)
        return True

    def end_delete(self, comment_id: CommentId) -> None:
        self._update(comment_id, is_deleting=False)

    def is_deleting(self, comment_id: CommentId) -> bool:
        return self.get(comment_id).is_deleting

    # Reply composer

    def begin_reply(self, comment_id: CommentId) -> None:
        """Open the reply composer under a comment, closing any other."""
        current = self.replying_to
        if current is not None and current != comment_id:
            self.end_reply(current)
        self._update(comment_id, is_replying=True)

    def end_reply(self, comment_id: CommentId) -> None:
        self._update(comment_id, is_replying=False)

    def is_replying(self, comment_id: CommentId) -> bool:
        return self.get(comment_id).is_replying

    @property
    def replying_to(self) -> Optional[CommentId]:
        """Comment whose reply composer is open, if any."""
        for comment_id, state in self._states.items():
            if state.is_replying:
                return comment_id
        return None

    # Rendering and lifecycle

    def visible(self, forest: Iterable[ThreadNode]) -> list[ThreadNode]:
        """Nodes to render, in display order.

        A collapsed node is itself shown; its replies are hidden but stay
        attached to the tree, so expanding again needs no re-fetch.
        """
        shown: list[ThreadNode] = []
        stack: list[ThreadNode] = list(reversed(list(forest)))
        while stack:
            node = stack.pop()
            shown.append(node)
            if not self.is_collapsed(node.id):
                stack.extend(reversed(node.children))
        return shown

    def retain(self, comment_ids: Iterable[CommentId]) -> None:
        """Drop state for comments that no longer exist.

        Call after a re-fetch; state of surviving comments is untouched.
        """
        keep = set(comment_ids)
        for comment_id in list(self._states):
            if comment_id not in keep:
                del self._states[comment_id]

    def clear(self) -> None:
        self._states.clear()
