from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Literal, overload

import cytoolz as cz

from ._core import Pipeable, get_config
from ._cursor import Cursor, End, Unbounded, bounds, copy_end, reached, walk
from ._types import NO_INITIAL, NoInitial

if TYPE_CHECKING:
    from ._types import Group


class SequenceView[T](Pipeable, Iterable[T]):
    """A lazy sequence: a begin cursor paired with an end marker.

    This is the uniform return type of every adaptor, and a valid input to every adaptor, which is what makes them compose.

    A `SequenceView` is restartable: `begin()` and `end()` always hand out fresh copies of the same pair,
    so iterating it twice yields the same elements, unlike a Python iterator.

    Views over infinite sequences end with `UNBOUNDED`: take care to bound them (e.g. with `islice()`) before collecting.

    Args:
        begin (Cursor[T]): Cursor on the first element.
        end (End[T]): End cursor, or `UNBOUNDED`.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> evens = ia.view(range(10)).filter(lambda x: x % 2 == 0)
    >>> evens
    SequenceView(0, 2, 4, 6, 8)
    >>> evens.collect()
    [0, 2, 4, 6, 8]
    >>> evens.collect(tuple)
    (0, 2, 4, 6, 8)

    ```
    """

    __slots__ = ("_begin", "_end")

    def __init__(self, begin: Cursor[T], end: End[T]) -> None:
        self._begin = begin
        self._end = end

    def begin(self) -> Cursor[T]:
        """Return a fresh copy of the begin cursor.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> v = ia.view("abc")
        >>> v.begin().equals(v.begin())
        True
        >>> v.end().equals(v.end())
        True

        ```
        """
        return self._begin.copy()

    def end(self) -> End[T]:
        """Return a fresh copy of the end cursor, or `UNBOUNDED`."""
        return copy_end(self._end)

    def is_unbounded(self) -> bool:
        """Return `True` if the view is known never to end.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.count().is_unbounded()
        True
        >>> ia.view([1, 2]).is_unbounded()
        False

        ```
        """
        return isinstance(self._end, Unbounded)

    def is_empty(self) -> bool:
        """Return `True` if the begin cursor already sits at the end.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([]).is_empty()
        True
        >>> ia.cycle([]).is_empty()
        True
        >>> ia.count().is_empty()
        False

        ```
        """
        return reached(self._begin, self._end)

    def __iter__(self) -> Iterator[T]:
        return walk(self._begin, self._end)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def collect[C](self, collector: Callable[[Iterable[T]], C] = list) -> C:  # type: ignore[assignment]
        """Drive the view to its end and gather the elements with **collector**.

        **Warning** ⚠️
            Never returns on an unbounded view.

        Args:
            collector (Callable[[Iterable[T]], C]): Collection type or function. Defaults to `list`.

        Returns:
            C: The collected elements.
        """
        return collector(self)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> SequenceView[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> SequenceView[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> SequenceView[U]:
        """Create a view from any `Iterable`, or from unpacked values.

        Prefer `view()`, as this method involves extra checks.

        Args:
            data (Iterable[U] | U): Iterable to view, or a single value.
            *more_data (U): Additional values to include if **data** is not an `Iterable`.

        Returns:
            SequenceView[U]: A view over the provided data.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.SequenceView.from_(1, 2, 3)
        SequenceView(1, 2, 3)
        >>> ia.SequenceView.from_([4, 5])
        SequenceView(4, 5)

        ```
        """
        if cz.itertoolz.isiterable(data):
            return view(data)  # type: ignore[arg-type]
        return view((data, *more_data))  # type: ignore[arg-type]

    def accumulate[S](
        self,
        init: S | NoInitial = NO_INITIAL,
        func: Callable[[S, T], S] = operator.add,
    ) -> SequenceView[S]:
        """Running fold of the view. See `accumulate()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 2, 3, 4, 5]).accumulate(0).collect()
        [1, 3, 6, 10, 15]
        >>> ia.view([1, 2, 3, 4]).accumulate(1, lambda a, b: a * b).collect()
        [1, 2, 6, 24]
        >>> ia.view([3, 1, 4]).accumulate(func=max).collect()
        [3, 3, 4]

        ```
        """
        from ._adaptors import accumulate

        return accumulate(self, init, func)

    def chain(self, *others: Iterable[T]) -> SequenceView[T]:
        """Concatenate **others** after this view. See `chain()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 2]).chain((), "ab").collect()
        [1, 2, 'a', 'b']

        ```
        """
        from ._adaptors import chain

        return chain(self, *others)

    def compress(self, selectors: Iterable[object]) -> SequenceView[T]:
        """Keep elements whose selector is truthy. See `compress()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("ABCDEF").compress([1, 0, 1, 0, 1, 1]).collect()
        ['A', 'C', 'E', 'F']

        ```
        """
        from ._adaptors import compress

        return compress(self, selectors)

    def cycle(self) -> SequenceView[T]:
        """Replay the view forever. See `cycle()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("AB").cycle().islice(5).collect()
        ['A', 'B', 'A', 'B', 'A']

        ```
        """
        from ._adaptors import cycle

        return cycle(self)

    def dropwhile(self, predicate: Callable[[T], object]) -> SequenceView[T]:
        """Skip the leading elements satisfying **predicate**. See `dropwhile()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 4, 6, 4, 1]).dropwhile(lambda x: x < 5).collect()
        [6, 4, 1]

        ```
        """
        from ._adaptors import dropwhile

        return dropwhile(predicate, self)

    def takewhile(self, predicate: Callable[[T], object]) -> SequenceView[T]:
        """Keep the leading elements satisfying **predicate**. See `takewhile()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 4, 6, 4, 1]).takewhile(lambda x: x < 5).collect()
        [1, 4]

        ```
        """
        from ._adaptors import takewhile

        return takewhile(predicate, self)

    def filter(self, predicate: Callable[[T], object] | None = None) -> SequenceView[T]:
        """Keep the elements satisfying **predicate**, or the truthy ones. See `filter()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view(range(10)).filter(lambda x: x % 3 == 0).collect()
        [0, 3, 6, 9]
        >>> ia.view([0, 1, "", "a", None]).filter().collect()
        [1, 'a']

        ```
        """
        from ._adaptors import filter as filter_

        return filter_(predicate, self)

    def filterfalse(
        self, predicate: Callable[[T], object] | None = None
    ) -> SequenceView[T]:
        """Keep the elements failing **predicate**, or the falsy ones. See `filterfalse()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view(range(10)).filterfalse(lambda x: x % 2).collect()
        [0, 2, 4, 6, 8]

        ```
        """
        from ._adaptors import filterfalse

        return filterfalse(predicate, self)

    def starmap[R](self, func: Callable[..., R]) -> SequenceView[R]:
        """Apply **func** to each element unpacked as arguments. See `starmap()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([(2, 5), (3, 2), (10, 3)]).starmap(pow).collect()
        [32, 9, 1000]

        ```
        """
        from ._adaptors import starmap

        return starmap(func, self)

    @overload
    def islice(self, stop: int | None, /) -> SequenceView[T]: ...
    @overload
    def islice(
        self, start: int | None, stop: int | None, step: int | None = ..., /
    ) -> SequenceView[T]: ...
    def islice(self, *args: int | None) -> SequenceView[T]:
        """Select positions of the view, like slicing a list. See `islice()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> letters = ia.view("ABCDEFG")
        >>> letters.islice(2).collect()
        ['A', 'B']
        >>> letters.islice(2, 4).collect()
        ['C', 'D']
        >>> letters.islice(2, None).collect()
        ['C', 'D', 'E', 'F', 'G']
        >>> letters.islice(0, None, 2).collect()
        ['A', 'C', 'E', 'G']

        ```
        """
        from ._adaptors import islice

        return islice(self, *args)

    def groupby[K](self, key: Callable[[T], K] | None = None) -> SequenceView[Group[K, T]]:
        """Split the view into runs of elements sharing a key. See `groupby()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> [(k, g.collect("".join)) for k, g in ia.view("AAABBBCCD").groupby()]
        [('A', 'AAA'), ('B', 'BBB'), ('C', 'CC'), ('D', 'D')]

        ```
        """
        from ._adaptors import groupby

        return groupby(self, key)

    def product(self, *others: Iterable[Any], repeat: int = 1) -> SequenceView[tuple[Any, ...]]:
        """Cartesian product of this view with **others**. See `product()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("ab").product([0, 1]).collect()
        [('a', 0), ('a', 1), ('b', 0), ('b', 1)]
        >>> ia.view([0, 1]).product(repeat=2).collect()
        [(0, 0), (0, 1), (1, 0), (1, 1)]

        ```
        """
        from ._adaptors import product

        return product(self, *others, repeat=repeat)

    @overload
    def permutations(self, r: Literal[2]) -> SequenceView[tuple[T, T]]: ...
    @overload
    def permutations(self, r: Literal[3]) -> SequenceView[tuple[T, T, T]]: ...
    @overload
    def permutations(self, r: int | None = None) -> SequenceView[tuple[T, ...]]: ...
    def permutations(self, r: int | None = None) -> SequenceView[tuple[T, ...]]:
        """Successive **r**-length arrangements of the view. See `permutations()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view([1, 2, 3]).permutations(2).collect()
        [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)]

        ```
        """
        from ._adaptors import permutations

        return permutations(self, r)

    @overload
    def combinations(self, r: Literal[2]) -> SequenceView[tuple[T, T]]: ...
    @overload
    def combinations(self, r: Literal[3]) -> SequenceView[tuple[T, T, T]]: ...
    @overload
    def combinations(self, r: int) -> SequenceView[tuple[T, ...]]: ...
    def combinations(self, r: int) -> SequenceView[tuple[T, ...]]:
        """Successive **r**-length combinations of the view. See `combinations()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view(range(4)).combinations(3).collect()
        [(0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3)]

        ```
        """
        from ._adaptors import combinations

        return combinations(self, r)

    @overload
    def combinations_with_replacement(self, r: Literal[2]) -> SequenceView[tuple[T, T]]: ...
    @overload
    def combinations_with_replacement(
        self, r: Literal[3]
    ) -> SequenceView[tuple[T, T, T]]: ...
    @overload
    def combinations_with_replacement(self, r: int) -> SequenceView[tuple[T, ...]]: ...
    def combinations_with_replacement(self, r: int) -> SequenceView[tuple[T, ...]]:
        """Successive **r**-length combinations allowing repeated elements. See `combinations_with_replacement()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("ABC").combinations_with_replacement(2).collect()
        [('A', 'A'), ('A', 'B'), ('A', 'C'), ('B', 'B'), ('B', 'C'), ('C', 'C')]

        ```
        """
        from ._adaptors import combinations_with_replacement

        return combinations_with_replacement(self, r)

    def tee(self, n: int = 2) -> tuple[SequenceView[T], ...]:
        """Split the view into **n** independent views. See `tee()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> a, b = ia.view(iter([1, 2, 3])).tee()
        >>> a.collect(), b.collect()
        ([1, 2, 3], [1, 2, 3])

        ```
        """
        from ._adaptors import tee

        return tee(self, n)

    def zip(self, *others: Iterable[Any]) -> SequenceView[tuple[Any, ...]]:
        """Aggregate this view with **others**, stopping at the shortest. See `zip()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("ABCD").zip("xy").collect()
        [('A', 'x'), ('B', 'y')]

        ```
        """
        from ._adaptors import zip as zip_

        return zip_(self, *others)

    def zip_longest(
        self, *others: Iterable[Any], fillvalue: object = None
    ) -> SequenceView[tuple[Any, ...]]:
        """Aggregate this view with **others**, stopping at the longest. See `zip_longest()`.

        Example:
        ```python
        >>> import iteralgebra as ia
        >>> ia.view("ABCD").zip_longest("xy", fillvalue="-").collect()
        [('A', 'x'), ('B', 'y'), ('C', '-'), ('D', '-')]

        ```
        """
        from ._adaptors import zip_longest

        return zip_longest(self, *others, fillvalue=fillvalue)


def view[T](data: Iterable[T]) -> SequenceView[T]:
    """View any iterable as a `SequenceView`.

    - A `SequenceView` is returned as is.
    - A `Sequence` (`list`, `tuple`, `str`, `range`, ...) is traversed by index, without copying.
    - Any other iterable is read lazily, and the elements read so far are cached so the view stays restartable.

    Args:
        data (Iterable[T]): The backing sequence.

    Returns:
        SequenceView[T]: A view over **data**.

    Example:
    ```python
    >>> import iteralgebra as ia
    >>> ia.view([1, 2, 3])
    SequenceView(1, 2, 3)
    >>> squares = ia.view(x * x for x in range(4))
    >>> squares.collect(), squares.collect()
    ([0, 1, 4, 9], [0, 1, 4, 9])

    ```
    """
    match data:
        case SequenceView():
            return data
        case _:
            return SequenceView(*bounds(data))


def empty() -> SequenceView[Any]:
    """Return a view with no elements."""
    return view(())
