from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import Any

import cytoolz as cz

from ._errors import InvalidConfigurationError


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for iteralgebra.

    Replace it through `set_config()`; instances are immutable.
    """

    repr_max_items: int = 20
    """How many elements a `SequenceView` repr shows before eliding the rest."""
    check_stale_groups: bool = True
    """Raise `StaleGroupError` when a groupby group is read after its parent advanced."""

    def __post_init__(self) -> None:
        if not isinstance(self.repr_max_items, int) or isinstance(self.repr_max_items, bool):
            msg = f"repr_max_items must be an int, got {self.repr_max_items!r}"
            raise InvalidConfigurationError(msg)
        if not isinstance(self.check_stale_groups, bool):
            msg = f"check_stale_groups must be a bool, got {self.check_stale_groups!r}"
            raise InvalidConfigurationError(msg)
        if self.repr_max_items < 0:
            msg = f"repr_max_items must be non-negative, got {self.repr_max_items}"
            raise InvalidConfigurationError(msg)

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render at most `repr_max_items` elements of **data**, comma separated.

        Only `repr_max_items + 1` elements are pulled, so unbounded data can be rendered.

        Args:
            data (Iterable[Any]): The elements to render.

        Returns:
            str: The rendered elements, with a trailing `...` if some were elided.

        Example:
        ```python
        >>> from iteralgebra import Config
        >>> Config(repr_max_items=3).iter_repr(range(10))
        '0, 1, 2, ...'
        >>> Config(repr_max_items=3).iter_repr("ab")
        "'a', 'b'"

        ```
        """
        # rendered before the next element is pulled: groups stay valid while shown
        head = [repr(item) for item in cz.itertoolz.take(self.repr_max_items + 1, data)]
        shown = ", ".join(head[: self.repr_max_items])
        if len(head) > self.repr_max_items:
            return f"{shown}, ..." if shown else "..."
        return shown


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the active `Config` with a copy carrying **changes**.

    Args:
        **changes (Any): Field values to override.

    Returns:
        Config: The previous configuration, handy to restore it afterwards.

    Raises:
        InvalidConfigurationError: If a name in **changes** is not a `Config` field, or a value is invalid.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> previous = ia.set_config(repr_max_items=2)
    >>> ia.count()
    SequenceView(0, 1, ...)
    >>> _ = ia.set_config(repr_max_items=previous.repr_max_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    unknown = changes.keys() - {field.name for field in fields(Config)}
    if unknown:
        msg = f"unknown configuration fields: {sorted(unknown)}"
        raise InvalidConfigurationError(msg)
    _CONFIG = replace(_CONFIG, **changes)
    return previous
