"""Gallery container and randomized insertion."""

import random

from bs4 import BeautifulSoup, Tag


def _top_level_elements(fragment: Tag) -> list[Tag]:
    if isinstance(fragment, BeautifulSoup):
        return [node for node in fragment.contents if isinstance(node, Tag)]
    return [fragment]


class GalleryContainer:
    """Ordered, mutable list of card elements supporting indexed insertion."""

    def __init__(self, element: Tag) -> None:
        self.element = element

    @property
    def children(self) -> list[Tag]:
        """Element children in order (whitespace text nodes excluded)."""
        return [node for node in self.element.contents if isinstance(node, Tag)]

    def __len__(self) -> int:
        return len(self.children)

    def insert(self, index: int, fragment: Tag) -> None:
        """Insert a fragment's elements before the child at ``index``.

        An index equal to the child count appends.

        Raises:
            IndexError: If index is outside ``[0, len(self)]``
        """
        children = self.children
        if not 0 <= index <= len(children):
            raise IndexError(f"Insert position {index} outside [0, {len(children)}]")

        nodes = [node.extract() for node in _top_level_elements(fragment)]
        if index == len(children):
            for node in nodes:
                self.element.append(node)
        else:
            children[index].insert_before(*nodes)


def append_random(
    container: GalleryContainer,
    fragments: list[Tag],
    rng: random.Random | None = None,
) -> None:
    """Insert each fragment at an independently drawn position.

    Each draw is uniform over ``[0, len(container)]`` using the count at
    that moment, so earlier insertions shape later ones. This is not a
    uniform shuffle over the whole batch.
    """
    rng = rng or random.Random()
    for fragment in fragments:
        container.insert(rng.randint(0, len(container)), fragment)
