"""Progressive image loading as an explicit state machine.

A feature image starts on a local placeholder. Each load-complete signal
advances to the next better source that exists, so the viewer never sees
a resolution downgrade and no source is requested twice.
"""

from enum import Enum

from ..gatherers.models import Image


class ImageState(Enum):
    """Image slot states, ordered from worst to best."""

    PLACEHOLDER = "placeholder"
    LOW_RES = "low-res"
    HIGH_RES = "high-res"


class ProgressiveImage:
    """Per-slot loader with a transition table precomputed from the image.

    Example:
        >>> loader = ProgressiveImage(Image(high_res_src="full.png"), "/default.png")
        >>> loader.src
        '/default.png'
        >>> loader.on_load()
        'full.png'
        >>> loader.on_load() is None
        True
    """

    def __init__(self, image: Image, placeholder: str) -> None:
        self._sources: dict[ImageState, str] = {ImageState.PLACEHOLDER: placeholder}
        if image.low_res_src:
            self._sources[ImageState.LOW_RES] = image.low_res_src
        if image.high_res_src:
            self._sources[ImageState.HIGH_RES] = image.high_res_src

        # Enum order is quality order; skipping absent tiers keeps it monotonic
        order = [state for state in ImageState if state in self._sources]
        self.transitions: dict[ImageState, ImageState] = dict(zip(order, order[1:]))
        self.state = ImageState.PLACEHOLDER

    @property
    def src(self) -> str:
        """Source currently shown."""
        return self._sources[self.state]

    @property
    def is_terminal(self) -> bool:
        return self.state not in self.transitions

    def on_load(self) -> str | None:
        """Handle a load-complete signal for the current source.

        Returns:
            The next source to load, or None when already at the best one
        """
        next_state = self.transitions.get(self.state)
        if next_state is None:
            return None
        self.state = next_state
        return self.src
