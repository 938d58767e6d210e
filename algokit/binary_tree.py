"""Binary trees: traversals, views, reconstruction and path problems."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    value: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes in ascending in-order sequence.

    A node's right link is read only after the consumer resumes, so the
    consumer may relink the node's left side and its predecessor's right side.
    """
    stack: list[TreeNode] = []
    cur = root
    while stack or cur is not None:
        if cur is not None:
            stack.append(cur)
            cur = cur.left
        else:
            cur = stack.pop()
            yield cur
            cur = cur.right


def _reverse_inorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    cur = root
    while stack or cur is not None:
        if cur is not None:
            stack.append(cur)
            cur = cur.right
        else:
            cur = stack.pop()
            yield cur
            cur = cur.left


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, node, right order."""
    return [node.value for node in _inorder_nodes(root)]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in node, left, right order."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    values: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def right_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of every level, from the top down."""
    view: list[int] = []
    if root is None:
        return view
    level = deque([root])
    while level:
        view.append(level[-1].value)
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return view


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Return the values seen from above, from the leftmost column to the rightmost."""
    view: deque[int] = deque()
    if root is None:
        return []
    view.append(root.value)
    leftmost = rightmost = 0
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        if column < leftmost:
            leftmost = column
            view.appendleft(node.value)
        if column > rightmost:
            rightmost = column
            view.append(node.value)
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return list(view)


def boundary_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the boundary anticlockwise from the root.

    That is the root, the left edge without its leaf, every leaf from left to
    right, then the right edge without its leaf from the bottom up.
    """
    if root is None:
        return []
    boundary = [root.value]
    if _is_leaf(root):
        return boundary

    node = root.left
    while node is not None and not _is_leaf(node):
        boundary.append(node.value)
        node = node.left if node.left is not None else node.right

    boundary.extend(n.value for n in _inorder_nodes(root) if _is_leaf(n))

    right_edge: list[int] = []
    node = root.right
    while node is not None and not _is_leaf(node):
        right_edge.append(node.value)
        node = node.right if node.right is not None else node.left
    boundary.extend(reversed(right_edge))
    return boundary


def lowest_common_ancestor(root: Optional[TreeNode], a: int, b: int) -> Optional[TreeNode]:
    """Return the lowest node whose subtree holds the values ``a`` and ``b``.

    The first node holding either value ends the search down that branch, so
    when only one value is present its node is returned; ``None`` when neither is.
    """
    if root is None:
        return None
    if root.value in (a, b):
        return root
    left = lowest_common_ancestor(root.left, a, b)
    right = lowest_common_ancestor(root.right, a, b)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def build_tree(inorder: Sequence[int], preorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its in-order and pre-order listings."""
    if len(inorder) != len(preorder):
        raise ValueError("the two traversals must have the same length")
    position = {value: i for i, value in enumerate(inorder)}
    if len(position) != len(inorder):
        raise ValueError("the values must be distinct")
    pending = iter(preorder)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        value = next(pending)
        where = position.get(value)
        if where is None or not start <= where <= end:
            raise ValueError("the traversals do not describe the same tree")
        node = TreeNode(value)
        node.left = build(start, where - 1)
        node.right = build(where + 1, end)
        return node

    return build(0, len(inorder) - 1)


def to_doubly_linked_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree in place into an in-order doubly linked list.

    ``left`` points to the previous node and ``right`` to the next; the head
    is returned.
    """
    head: Optional[TreeNode] = None
    last: Optional[TreeNode] = None
    for node in _inorder_nodes(root):
        if last is None:
            head = node
        else:
            last.right = node
            node.left = last
        last = node
    return head


def count_pairs_with_sum(root1: Optional[TreeNode], root2: Optional[TreeNode], x: int) -> int:
    """Count pairs, one value from each search tree, that add up to ``x``."""
    ascending = _inorder_nodes(root1)
    descending = _reverse_inorder_nodes(root2)
    low = next(ascending, None)
    high = next(descending, None)
    pairs = 0
    while low is not None and high is not None:
        total = low.value + high.value
        if total == x:
            pairs += 1
            low = next(ascending, None)
            high = next(descending, None)
        elif total < x:
            low = next(ascending, None)
        else:
            high = next(descending, None)
    return pairs


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Delete ``key`` so that the tree shrinks from the bottom.

    The last node holding ``key`` in level order takes the value of the
    bottommost, rightmost node, which is then removed. Returns the new root.
    """
    if root is None:
        return None
    if _is_leaf(root):
        return None if root.value == key else root

    parent: dict[TreeNode, TreeNode] = {}
    queue = deque([root])
    key_node: Optional[TreeNode] = None
    last = root
    while queue:
        last = queue.popleft()
        if last.value == key:
            key_node = last
        for child in (last.left, last.right):
            if child is not None:
                parent[child] = last
                queue.append(child)

    if key_node is not None:
        key_node.value, last.value = last.value, key_node.value
        above = parent[last]
        if above.right is last:
            above.right = None
        else:
            above.left = None
    return root


def max_non_adjacent_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of node values with no chosen node next to its parent."""

    def best(node: Optional[TreeNode]) -> tuple[int, int]:
        # (best sum taking this node, best sum leaving it out)
        if node is None:
            return 0, 0
        left_with, left_without = best(node.left)
        right_with, right_without = best(node.right)
        taken = node.value + left_without + right_without
        skipped = max(left_with, left_without) + max(right_with, right_without)
        return taken, skipped

    return max(best(root))


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum along a path between any two nodes; values may be negative."""
    if root is None:
        raise ValueError("the tree must not be empty")

    def walk(node: Optional[TreeNode]) -> tuple[int, Optional[int]]:
        # (best downward branch starting here, best path anywhere below)
        if node is None:
            return 0, None
        left_branch, left_best = walk(node.left)
        right_branch, right_best = walk(node.right)
        through = node.value + max(left_branch, 0) + max(right_branch, 0)
        branch = node.value + max(left_branch, right_branch, 0)
        best = max(b for b in (left_best, right_best, through) if b is not None)
        return branch, best

    _, best = walk(root)
    assert best is not None
    return best


def nodes_at_distance(root: Optional[TreeNode], target: TreeNode, k: int) -> list[int]:
    """Return the values of nodes ``k`` edges away from ``target``, nearest-first by search order."""
    parent: dict[TreeNode, Optional[TreeNode]] = {}
    stack: list[tuple[Optional[TreeNode], Optional[TreeNode]]] = [(root, None)]
    while stack:
        node, above = stack.pop()
        if node is None:
            continue
        parent[node] = above
        stack.append((node.right, node))
        stack.append((node.left, node))

    distance = {target: 0}
    queue = deque([target])
    found: list[int] = []
    while queue:
        node = queue.popleft()
        if distance[node] == k:
            found.append(node.value)
        for neigh in (node.left, node.right, parent.get(node)):
            if neigh is not None and neigh not in distance:
                distance[neigh] = distance[node] + 1
                queue.append(neigh)
    return found


class _Summary(NamedTuple):
    size: int
    low: float
    high: float
    best: int
    is_bst: bool


def largest_bst_size(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the largest subtree that is a search tree."""
    inf = float("inf")

    def summarise(node: Optional[TreeNode]) -> _Summary:
        if node is None:
            return _Summary(0, inf, -inf, 0, True)
        if _is_leaf(node):
            return _Summary(1, node.value, node.value, 1, True)
        left = summarise(node.left)
        right = summarise(node.right)
        size = left.size + right.size + 1
        if left.is_bst and right.is_bst and left.high < node.value < right.low:
            return _Summary(
                size, min(node.value, left.low), max(node.value, right.high), size, True
            )
        return _Summary(size, inf, -inf, max(left.best, right.best), False)

    return summarise(root).best