"""
Weibull quantile over a nested field of each element, written back in place
"""
from __future__ import annotations

import numbers
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Optional, Tuple

from weibull_quantile.transformers.base import InvalidOptionError, PathLookupError
from weibull_quantile.transformers.partial import partial
from weibull_quantile.utils.type_inference import to_number

_MISSING = object()
_SCALARS = (numbers.Number, str, bytes, bytearray, type(None))


def _as_index(segment: str) -> Optional[int]:
    try:
        return int(segment)
    except ValueError:
        return None


class Path:
    """A key path such as ``"x.1"`` parsed once into its segments.

    Segments address mapping keys, sequence indices or object attributes,
    depending on the container met at each level.
    """

    def __init__(self, path: str, sep: str = "."):
        if not isinstance(path, str):
            raise InvalidOptionError(f"Path must be a string, got {type(path).__name__}", option="path")
        if not isinstance(sep, str) or not sep:
            raise InvalidOptionError("Path separator must be a non-empty string", option="sep")
        self.raw = path
        self.sep = sep
        self.segments: Tuple[str, ...] = tuple(path.split(sep))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __repr__(self) -> str:
        return f"Path({self.raw!r}, sep={self.sep!r})"

    def _key(self, node: Any, segment: str, depth: int) -> Any:
        if isinstance(node, Mapping):
            if segment in node:
                return segment
            index = _as_index(segment)
            if index is not None and index in node:
                return index
            return segment
        if isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray)):
            index = _as_index(segment)
            if index is None:
                raise self._error(f"segment `{segment}` is not an index into a sequence", depth)
            return index
        if isinstance(node, _SCALARS):
            raise self._error(f"cannot descend into {type(node).__name__} with `{segment}`", depth)
        return segment

    def _read(self, node: Any, key: Any) -> Any:
        if isinstance(node, Mapping):
            return node.get(key, _MISSING)
        if isinstance(node, Sequence):
            try:
                return node[key]
            except IndexError:
                return _MISSING
        return getattr(node, key, _MISSING)

    def _error(self, reason: str, depth: int) -> PathLookupError:
        prefix = self.sep.join(self.segments[: depth + 1])
        return PathLookupError(
            f"Unable to resolve path `{self.raw}` at `{prefix}`: {reason}",
            option="path",
        )

    def locate(self, obj: Any) -> Tuple[Any, Any]:
        """Walk to the leaf's container. Returns ``(container, key)``."""
        node = obj
        last = len(self.segments) - 1
        for depth, segment in enumerate(self.segments[:-1]):
            value = self._read(node, self._key(node, segment, depth))
            if value is _MISSING:
                raise self._error("missing intermediate value", depth)
            node = value

        key = self._key(node, self.segments[-1], last)
        if isinstance(node, Mapping) and not isinstance(node, MutableMapping):
            raise self._error("mapping is read-only", last)
        if isinstance(node, Sequence):
            if not isinstance(node, MutableSequence):
                raise self._error("sequence is read-only", last)
            if key < -len(node):
                raise self._error(f"index {key} out of range", last)
        return node, key

    def get(self, container: Any, key: Any) -> Any:
        """Leaf value, or NaN when the leaf is absent."""
        value = self._read(container, key)
        return float("nan") if value is _MISSING else value

    def set(self, container: Any, key: Any, value: Any) -> None:
        """Write the leaf. Lists grow with NaN padding when `key` is past the end."""
        if isinstance(container, MutableSequence) and key >= len(container):
            container.extend([float("nan")] * (key - len(container) + 1))
        if isinstance(container, (MutableMapping, MutableSequence)):
            container[key] = value
        else:
            setattr(container, key, value)


def quantile(arr: Any, lam: float, k: float, path: Any, sep: str = ".") -> Any:
    """
    Evaluate the Weibull quantile function for the value at `path` inside
    each element and overwrite that value with the result. Returns `arr`.

    Every path is resolved before the first write, so an unresolvable
    element leaves the whole input untouched.
    """
    if len(arr) == 0:
        return arr
    if not isinstance(path, Path):
        path = Path(path, sep)

    fcn = partial(lam, k)
    leaves = [path.locate(e) for e in arr]
    for container, key in leaves:
        path.set(container, key, fcn(to_number(path.get(container, key))))
    return arr
