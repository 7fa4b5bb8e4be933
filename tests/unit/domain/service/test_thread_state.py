"""Unit tests for per-node thread view state."""

from uuid import uuid4

from campus.domain.service import ThreadViewState, build_thread, iter_nodes
from campus.domain.value import CommentId
from tests.conftest import make_comment


class TestCollapse:
    """Tests for collapse state."""

    def test_defaults_to_expanded(self):
        state = ThreadViewState()
        assert state.is_collapsed(CommentId(uuid4())) is False
        assert len(state) == 0

    def test_toggle_flips_and_reports_new_state(self):
        # Arrange
        state = ThreadViewState()
        comment_id = CommentId(uuid4())

        # Act / Assert
        assert state.toggle_collapsed(comment_id) is True
        assert state.is_collapsed(comment_id) is True
        assert state.toggle_collapsed(comment_id) is False
        assert state.is_collapsed(comment_id) is False

    def test_collapse_survives_rebuild_after_new_reply(self):
        """Collapsing one node persists when a reply lands elsewhere."""
        # Arrange
        first = make_comment(content="first", minutes=0)
        second = make_comment(content="second", minutes=1)
        state = ThreadViewState()
        state.set_collapsed(first.id, True)

        # Act
        reply = make_comment(parent=second, minutes=2)
        forest = build_thread([first, second, reply])
        state.retain(node.id for node in iter_nodes(forest))

        # Assert
        assert state.is_collapsed(first.id) is True
        assert state.is_collapsed(second.id) is False


class TestVisible:
    """Tests for the render list."""

    def test_collapsed_node_shown_but_children_hidden(self):
        # Arrange
        root = make_comment(content="root", minutes=0)
        child = make_comment(content="child", parent=root, minutes=1)
        grandchild = make_comment(content="grandchild", parent=child, minutes=2)
        other = make_comment(content="other", minutes=3)
        forest = build_thread([root, child, grandchild, other])
        state = ThreadViewState()

        # Act
        state.set_collapsed(child.id, True)
        shown = [n.comment.content for n in state.visible(forest)]

        # Assert
        assert shown == ["root", "child", "other"]
        # Subtree is still attached
        assert forest[0].children[0].children[0].comment.content == "grandchild"

    def test_expand_again_restores_subtree(self):
        # Arrange
        root = make_comment(content="root", minutes=0)
        child = make_comment(content="child", parent=root, minutes=1)
        forest = build_thread([root, child])
        state = ThreadViewState()
        state.set_collapsed(root.id, True)

        # Act
        state.set_collapsed(root.id, False)

        # Assert
        assert [n.comment.content for n in state.visible(forest)] == ["root", "child"]


class TestDeleteGuard:
    """Tests for the in-flight delete flag."""

    def test_second_delete_is_refused_while_in_flight(self):
        # Arrange
        state = ThreadViewState()
        comment_id = CommentId(uuid4())

        # Act
        first = state.begin_delete(comment_id)
        second = state.begin_delete(comment_id)

        # Assert
        assert first is True
        assert second is False
        assert state.is_deleting(comment_id) is True

    def test_delete_allowed_again_after_end(self):
        # Arrange
        state = ThreadViewState()
        comment_id = CommentId(uuid4())
        state.begin_delete(comment_id)

        # Act
        state.end_delete(comment_id)

        # Assert
        assert state.is_deleting(comment_id) is False
        assert state.begin_delete(comment_id) is True


class TestReplyComposer:
    """Tests for the reply composer flag."""

    def test_opening_a_composer_closes_the_other(self):
        # Arrange
        state = ThreadViewState()
        a, b = CommentId(uuid4()), CommentId(uuid4())

        # Act
        state.begin_reply(a)
        state.begin_reply(b)

        # Assert
        assert state.is_replying(a) is False
        assert state.is_replying(b) is True
        assert state.replying_to == b

    def test_end_reply_keeps_collapse_flag(self):
        # Arrange
        state = ThreadViewState()
        comment_id = CommentId(uuid4())
        state.set_collapsed(comment_id, True)
        state.begin_reply(comment_id)

        # Act
        state.end_reply(comment_id)

        # Assert
        assert state.is_collapsed(comment_id) is True
        assert state.replying_to is None


class TestLifecycle:
    """Tests for retain and clear."""

    def test_retain_drops_state_of_removed_comments(self):
        # Arrange
        state = ThreadViewState()
        kept, gone = CommentId(uuid4()), CommentId(uuid4())
        state.set_collapsed(kept, True)
        state.set_collapsed(gone, True)

        # Act
        state.retain([kept])

        # Assert
        assert state.is_collapsed(kept) is True
        assert state.is_collapsed(gone) is False
        assert len(state) == 1

    def test_clear_resets_everything(self):
        # Arrange
        state = ThreadViewState()
        state.set_collapsed(CommentId(uuid4()), True)
        state.begin_delete(CommentId(uuid4()))

        # Act
        state.clear()

        # Assert
        assert len(state) == 0

    def test_get_returns_a_copy(self):
        # Arrange
        state = ThreadViewState()
        comment_id = CommentId(uuid4())
        state.set_collapsed(comment_id, True)

        # Act
        snapshot = state.get(comment_id)
        snapshot.collapsed = False

        # Assert
        assert state.is_collapsed(comment_id) is True
