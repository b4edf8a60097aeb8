from dataclasses import dataclass

from dataknobs_bintree import (
    LeafRecord,
    TreeConfig,
    build_tree,
    compute,
    compute_ancestors,
    count_leaves,
    find_node,
    outline_is_parent_of,
    outline_is_root,
    parse_outline,
)


@dataclass(eq=False)
class Account(LeafRecord):
    code: str = ""
    parent_code: str | None = None
    balance: float = 0.0


def is_root_account(account):
    return account.parent_code is None


def is_parent_account(child, parent):
    return child.parent_code == parent.code


def roll_up(account, children):
    account.balance = sum(child.balance for child in children)


class TestCompute:
    """Test the full bottom-up pass."""

    def test_leaf_counts(self):
        root = build_simple_tree()
        compute(root)
        counts = {name: node_for(root, name).record.leaf_count for name in "abcd"}
        assert counts == {"a": 2, "b": 1, "c": 1, "d": 1}

    def test_leaf_flags(self):
        root = build_simple_tree()
        compute(root)
        flags = {name: node_for(root, name).record.is_leaf for name in "abcd"}
        assert flags == {"a": False, "b": False, "c": True, "d": True}

    def test_callbacks(self):
        root = build_simple_tree()
        leaves = []
        branches = []
        compute(
            root,
            on_leaf=lambda record: leaves.append(record.name),
            on_branch=lambda record, children: branches.append(
                (record.name, [child.name for child in children])
            ),
        )
        # post-order over the binary encoding: d, c, b, a
        assert leaves == ["d", "c"]
        assert branches == [("b", ["d"]), ("a", ["b", "c"])]

    def test_branch_receives_children_list(self):
        root = build_simple_tree()
        seen = []
        compute(root, on_branch=lambda record, children: seen.append(children))
        assert seen[-1] is root.children

    def test_idempotent(self):
        root = build_tree(
            parse_outline("(r (a x y) (b (c z)) w)"), outline_is_root, outline_is_parent_of
        )
        compute(root)
        first = [node_for(root, name).record.leaf_count for name in "raxybczw"]
        compute(root)
        second = [node_for(root, name).record.leaf_count for name in "raxybczw"]
        assert first == second == [4, 2, 1, 1, 1, 1, 1, 1]

    def test_wide_tree(self):
        outline = "(r " + " ".join(f"c{idx}" for idx in range(2000)) + ")"
        root = build_tree(parse_outline(outline), outline_is_root, outline_is_parent_of)
        compute(root)
        assert root.record.leaf_count == 2000

    def test_none_root(self):
        compute(None)

    def test_roll_up(self):
        root = count_leaves(make_accounts(), is_root_account, is_parent_account)
        compute(root, on_branch=roll_up)
        assert root.record.balance == 12.0
        assert root.left.record.balance == 5.0


class TestComputeAncestors:
    """Test the incremental pass."""

    def test_matches_full_pass(self):
        accounts = make_accounts()
        root = count_leaves(accounts, is_root_account, is_parent_account)
        compute(root, on_branch=roll_up)

        leaf = find_node(root, lambda account: account.code == "111")
        leaf.record.balance = 20.0
        compute_ancestors(leaf, on_branch=roll_up)
        incremental = [account.balance for account in accounts]

        compute(root, on_branch=roll_up)
        full = [account.balance for account in accounts]
        assert incremental == full == [27.0, 20.0, 20.0, 7.0]

    def test_refreshes_leaf_counts(self):
        root = build_simple_tree()
        compute(root)
        d = node_for(root, "d")
        b = node_for(root, "b")
        b.record.leaf_count = 42
        root.record.leaf_count = 42
        b.record.is_leaf = True
        root.record.is_leaf = True
        compute_ancestors(d)
        assert (b.record.leaf_count, root.record.leaf_count) == (1, 2)
        assert (b.record.is_leaf, root.record.is_leaf) == (False, False)
        assert d.record.is_leaf

    def test_primary_child_propagates_to_each_ancestor(self):
        root = build_simple_tree()
        compute(root)
        calls = []
        compute_ancestors(
            node_for(root, "d"),
            on_leaf=lambda record: calls.append(("leaf", record.name)),
            on_branch=lambda record, children: calls.append(("branch", record.name)),
        )
        assert calls == [("leaf", "d"), ("branch", "b"), ("branch", "a")]

    def test_sibling_link_is_not_recomputed(self):
        # c hangs off b's right link: b is its sibling, not its parent
        root = build_simple_tree()
        compute(root)
        calls = []
        compute_ancestors(
            node_for(root, "c"),
            on_branch=lambda record, children: calls.append(record.name),
        )
        assert calls == ["a"]

    def test_spliced_sibling_chain(self):
        # encoded chain under r is a, d, c, b
        root = build_tree(parse_outline("(r a b c (d e))"), outline_is_root, outline_is_parent_of)
        compute(root)
        calls = []
        compute_ancestors(
            node_for(root, "b"),
            on_branch=lambda record, children: calls.append(record.name),
        )
        assert calls == ["r"]

        calls.clear()
        compute_ancestors(
            node_for(root, "e"),
            on_branch=lambda record, children: calls.append(record.name),
        )
        assert calls == ["d", "r"]

    def test_branch_node_itself(self):
        root = build_simple_tree()
        compute(root)
        calls = []
        compute_ancestors(
            node_for(root, "b"),
            on_branch=lambda record, children: calls.append(record.name),
        )
        assert calls == ["b", "a"]

    def test_none_node(self):
        compute_ancestors(None)


class TestCountLeaves:
    """Test the build-and-count convenience."""

    def test_counts(self):
        root = count_leaves(parse_outline("(a (b d) c)"), outline_is_root, outline_is_parent_of)
        assert root.record.leaf_count == 2
        assert root.left.record.leaf_count == 1

    def test_lone_root_has_no_leaves(self):
        root = count_leaves(parse_outline("a"), outline_is_root, outline_is_parent_of)
        assert root.record.leaf_count == 0
        assert root.children == []

    def test_lone_root_configured(self):
        config = TreeConfig(lone_root_leaf_count=1)
        root = count_leaves(
            parse_outline("a"), outline_is_root, outline_is_parent_of, config=config
        )
        assert root.record.leaf_count == 1

    def test_empty_input(self):
        assert count_leaves([], outline_is_root, outline_is_parent_of) is None

    def test_duck_typed_records(self):
        class Item:
            def __init__(self, key, parent_key=None):
                self.key = key
                self.parent_key = parent_key
                self.leaf_count = 0
                self.is_leaf = False

        items = [Item("x"), Item("y", "x"), Item("z", "x")]
        root = count_leaves(
            items,
            lambda item: item.parent_key is None,
            lambda child, parent: child.parent_key == parent.key,
        )
        assert root.record.leaf_count == 2
        assert items[1].is_leaf and items[2].is_leaf


def build_simple_tree():
    # (a (b d) c)
    return build_tree(parse_outline("(a (b d) c)"), outline_is_root, outline_is_parent_of)


def node_for(root, name):
    return find_node(root, lambda record: record.name == name)


def make_accounts():
    return [
        Account(code="1"),
        Account(code="11", parent_code="1"),
        Account(code="111", parent_code="11", balance=5.0),
        Account(code="12", parent_code="1", balance=7.0),
    ]
