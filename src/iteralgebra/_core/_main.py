from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the whole view to **func** and return its result.

        Reads left to right at the end of a chain of adaptors: `v.into(f)` is `f(v)`.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the view first.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view(range(5)).into(sum)
        10
        >>> ia.view("abc").into("-".join)
        'a-b-c'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** on the view for its side effects, then return the view unchanged.

        Views are restartable, so **func** may iterate the view without consuming it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Receives the view first; its result is discarded.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            Self: The same view.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 2, 3]).inspect(print).collect()
        SequenceView(1, 2, 3)
        [1, 2, 3]

        ```
        """
        func(self, *args, **kwargs)
        return self

