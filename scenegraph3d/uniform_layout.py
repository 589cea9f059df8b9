"""Member offsets of a uniform block under the std140 packing rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

STD140_ALIGN = 16

Members = Union[Mapping[str, int], Iterable[tuple[str, int]]]


@dataclass(frozen=True)
class UniformLayout:
    """Byte offset and size of each member, and the block's padded size."""

    offsets: dict[str, int] = field(default_factory=dict)
    sizes: dict[str, int] = field(default_factory=dict)
    total_size: int = 0


def std140_layout(members: Members) -> UniformLayout:
    """Lay out ``members`` (name and byte size, in order) in 16-byte rows.

    A member that fits in what is left of the current row goes there;
    otherwise the row is padded and the member starts a new one.
    The total size is padded to a whole row.
    """
    items = members.items() if isinstance(members, Mapping) else members
    offsets: dict[str, int] = {}
    sizes: dict[str, int] = {}
    left = STD140_ALIGN
    offset = 0

    for name, size in items:
        if size < 0:
            raise ValueError(f"member {name!r} has negative size {size}")
        sizes[name] = size

        if size < left:
            offsets[name] = offset
            left -= size
            offset += size
            continue

        if left != STD140_ALIGN:
            offset += left
            left = STD140_ALIGN

        offsets[name] = offset
        full_rows, remainder = divmod(size, STD140_ALIGN)
        offset += full_rows * STD140_ALIGN + remainder
        left -= remainder

    if left < STD140_ALIGN:
        offset += left

    return UniformLayout(offsets=offsets, sizes=sizes, total_size=offset)