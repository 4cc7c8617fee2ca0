"""Tests for the in-memory comment tree: lookup order, depth cap, policies."""

import uuid

import pytest

from campushub.core.exceptions import DepthLimitExceeded, NotFoundError, ValidationError
from campushub.domains.comments.entities import COMMENT_POLICIES, CommentNode, CommentTree
from campushub.domains.entities.content import EntityKind

AUTHOR = uuid.uuid4()


def build_chain(tree: CommentTree):
    """Root -> reply -> reply-to-reply."""
    root = tree.add_root(AUTHOR, "root")
    reply = tree.add_reply(root.id, AUTHOR, "reply")
    nested = tree.add_reply(reply.id, AUTHOR, "nested")
    return root, reply, nested


class TestCommentTree:

    def test_reply_is_appended_as_last_child(self):
        tree = CommentTree(max_depth=3)
        root = tree.add_root(AUTHOR, "first")
        first = tree.add_reply(root.id, AUTHOR, "a")
        second = tree.add_reply(root.id, AUTHOR, "b")

        assert [node.id for node in root.replies] == [first.id, second.id]

    def test_replies_down_to_last_level_succeed(self):
        tree = CommentTree(max_depth=3)
        root, reply, nested = build_chain(tree)

        assert tree.find(reply.id) == (reply, 1)
        assert tree.find(nested.id) == (nested, 2)
        assert root.replies[0].replies[0] is nested

    def test_reply_to_deepest_node_is_rejected(self):
        tree = CommentTree(max_depth=3)
        _, _, nested = build_chain(tree)
        before = tree.to_list()

        with pytest.raises(DepthLimitExceeded):
            tree.add_reply(nested.id, AUTHOR, "too deep")

        assert tree.to_list() == before

    def test_unknown_target_leaves_tree_unmodified(self):
        tree = CommentTree(max_depth=3)
        build_chain(tree)
        before = tree.to_list()

        with pytest.raises(NotFoundError):
            tree.add_reply(uuid.uuid4(), AUTHOR, "orphan")

        assert tree.to_list() == before

    def test_find_uses_document_order(self):
        """A duplicated id nested under the first root wins over a later root."""
        duplicate = uuid.uuid4()
        nested = CommentNode(author_id=AUTHOR, content="nested", id=duplicate)
        first = CommentNode(author_id=AUTHOR, content="first", replies=[nested])
        second = CommentNode(author_id=AUTHOR, content="second", id=duplicate)
        tree = CommentTree(roots=[first, second], max_depth=3)

        node, depth = tree.find(duplicate)

        assert node is nested
        assert depth == 1

    def test_walk_is_bounded_by_max_depth(self):
        deep = CommentNode(author_id=uuid.uuid4(), content="beyond the cap")
        leaf = CommentNode(author_id=AUTHOR, content="leaf", replies=[deep])
        tree = CommentTree(roots=[CommentNode(author_id=AUTHOR, content="root", replies=[leaf])], max_depth=2)

        visited = [node.content for node, _ in tree.walk()]

        assert visited == ["root", "leaf"]
        assert deep.author_id not in tree.author_ids()

    def test_flat_tree_rejects_any_reply(self):
        tree = CommentTree(max_depth=1)
        root = tree.add_root(AUTHOR, "flat")

        with pytest.raises(DepthLimitExceeded):
            tree.add_reply(root.id, AUTHOR, "nope")

    def test_serialized_tree_keeps_structure(self):
        tree = CommentTree(max_depth=3)
        root, reply, nested = build_chain(tree)

        restored = CommentTree.from_list(tree.to_list(), max_depth=3)

        assert len(restored) == 3
        assert restored.find(nested.id)[1] == 2
        assert restored.roots[0].created_at == root.created_at


class TestCommentPolicy:

    def test_content_is_stripped(self):
        policy = COMMENT_POLICIES[EntityKind.DISCUSSION]
        assert policy.clean_content("  hello  ", is_reply=False) == "hello"

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_content_is_rejected(self, content):
        with pytest.raises(ValidationError):
            COMMENT_POLICIES[EntityKind.DISCUSSION].clean_content(content, is_reply=False)

    def test_limits_differ_per_entity_and_level(self):
        discussion = COMMENT_POLICIES[EntityKind.DISCUSSION]

        assert discussion.clean_content("x" * 1000, is_reply=False)
        with pytest.raises(ValidationError):
            discussion.clean_content("x" * 501, is_reply=True)
        with pytest.raises(ValidationError):
            COMMENT_POLICIES[EntityKind.PROJECT].clean_content("x" * 501, is_reply=False)
