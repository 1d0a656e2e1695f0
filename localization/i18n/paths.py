"""Dotted path lookup in translation trees."""

from typing import Optional

from localization.i18n.models import Leaf, Node, PluralSet, TreeNode

DEFAULT_DELIMITER = "."


def split_path(path: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split a translation path into its segments.

    Args:
        path: Dotted path (e.g. "errors.notfound").
        delimiter: Segment separator.

    Returns:
        List of segments, empty for an empty path.
    """
    if not path:
        return []
    return path.split(delimiter)


def get_node(
    tree: Optional[Node], path: str, delimiter: str = DEFAULT_DELIMITER
) -> Optional[TreeNode]:
    """Fetch the tree node found at ``path``.

    A segment may step into a PluralSet, selecting one of its forms by key.
    Stepping past a Leaf resolves to nothing.

    Args:
        tree: Root of a language tree, or None.
        path: Dotted path into the tree.
        delimiter: Segment separator.

    Returns:
        The node at ``path``, or None if the path does not resolve.
    """
    segments = split_path(path, delimiter)
    if tree is None or not segments:
        return None

    current: Optional[TreeNode] = tree
    for segment in segments:
        if isinstance(current, (Node, PluralSet)):
            current = current.get(segment)
        else:
            return None
        if current is None:
            return None
    return current


def get_value(
    tree: Optional[Node], path: str, delimiter: str = DEFAULT_DELIMITER
) -> Optional[Leaf | PluralSet]:
    """Fetch the translation value found at ``path``.

    Args:
        tree: Root of a language tree, or None.
        path: Dotted path into the tree.
        delimiter: Segment separator.

    Returns:
        Leaf or PluralSet, or None when the path is missing or names a
        branch rather than a value.
    """
    node = get_node(tree, path, delimiter)
    if isinstance(node, (Leaf, PluralSet)):
        return node
    return None
