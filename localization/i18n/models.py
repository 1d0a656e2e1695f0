"""Translation tree models for the i18n system.

A language's translations form a tree of three node kinds:

- ``Leaf``: a plain translated string.
- ``PluralSet``: an ordered mapping of plural-range specifier -> string.
- ``Node``: a mapping of key -> child node.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple, Union

# Key used when a Leaf is presented as a candidate set. Never parses as a range.
LEAF_CANDIDATE_KEY = "a"


@dataclass(frozen=True)
class Leaf:
    """A plain translation string.

    Attributes:
        text: The translated text, possibly holding ``:name`` placeholders.
    """

    text: str

    def candidates(self) -> Dict[str, str]:
        """Return the leaf as a one-element candidate mapping."""
        return {LEAF_CANDIDATE_KEY: self.text}

    def to_python(self) -> str:
        return self.text


@dataclass
class PluralSet:
    """Selectable plural forms, keyed by plural-range specifier.

    Declaration order is preserved. Keys are opaque until resolution time,
    when they are parsed as ranges (see ``localization.i18n.plurals``).

    Attributes:
        forms: Ordered mapping of specifier (e.g. "1,5", "0", "6,") to text.
    """

    forms: Dict[str, str] = field(default_factory=dict)

    def candidates(self) -> Dict[str, str]:
        """Return the forms checked last-declared first."""
        return dict(reversed(list(self.forms.items())))

    def get(self, key: str) -> Optional[Leaf]:
        """Select a single form by its exact key."""
        if key in self.forms:
            return Leaf(self.forms[key])
        return None

    def to_python(self) -> Dict[str, str]:
        return dict(self.forms)


@dataclass
class Node:
    """A branch of the translation tree.

    Every loaded file produces a Node at its root. Children are Nodes,
    Leaves or PluralSets.

    Attributes:
        children: Mapping of key to child tree node.
    """

    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def get(self, key: str) -> Optional["TreeNode"]:
        return self.children.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def items(self) -> Iterator[Tuple[str, "TreeNode"]]:
        return iter(self.children.items())

    def merged_with(self, existing: Optional["Node"]) -> "Node":
        """Return a new Node holding this node's keys overlaid by ``existing``.

        Keys already present in ``existing`` win on collision, and the whole
        existing subtree is kept (the merge is not recursive).

        Args:
            existing: Previously loaded tree for the same language, if any.

        Returns:
            The merged Node.
        """
        merged = dict(self.children)
        if existing is not None:
            merged.update(existing.children)
        return Node(children=merged)

    def to_python(self) -> Dict[str, Any]:
        """Convert the tree back to plain nested dicts."""
        return {key: child.to_python() for key, child in self.children.items()}

    to_dict = to_python

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> "Node":
        """Build a tree from a nested mapping.

        A mapping holding only scalar values becomes a PluralSet, a mapping
        holding at least one nested mapping (or list) becomes a Node. Lists
        are read as mappings keyed by their index. Non-string scalars are
        stringified. ``None`` values are left out, so their paths resolve
        to nothing.

        Args:
            data: Parsed translation document.

        Returns:
            Root Node of the tree.

        Raises:
            ValueError: If ``data`` is not a mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Translation data must be a mapping, got {type(data).__name__}"
            )
        return cls(
            children={
                str(key): _build_child(value)
                for key, value in data.items()
                if value is not None
            }
        )


TreeNode = Union[Leaf, PluralSet, Node]


def _as_mapping(value: Any) -> Optional[Dict[Any, Any]]:
    if isinstance(value, dict):
        return value
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        # JSON true/false
        return "true" if value else "false"
    return str(value)


def _build_child(value: Any) -> TreeNode:
    mapping = _as_mapping(value)
    if mapping is None:
        return Leaf(_as_text(value))

    mapping = {key: item for key, item in mapping.items() if item is not None}

    if mapping and all(_as_mapping(item) is None for item in mapping.values()):
        return PluralSet(
            forms={str(key): _as_text(item) for key, item in mapping.items()}
        )

    return Node(
        children={str(key): _build_child(item) for key, item in mapping.items()}
    )
