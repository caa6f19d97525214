import logging
import random
from typing import Any, Iterable, MutableSequence, Sequence, TypeVar

from tputils.utils.object_utils import require_not_none

logger = logging.getLogger(__name__)

T = TypeVar('T')

INDEX_NOT_FOUND = -1


def _same_type(array: Sequence, items: Iterable) -> Sequence:
    # Slicing keeps the concrete type (and the typecode of array.array)
    result = array[:0]
    if hasattr(result, 'extend'):
        result.extend(items)
        return result
    return type(result)(items)


def is_empty(array: Sequence) -> bool:
    require_not_none(array, 'array')
    return len(array) == 0


def is_none_or_empty(array: Sequence | None) -> bool:
    return array is None or len(array) == 0


def is_not_empty(array: Sequence | None) -> bool:
    return not is_none_or_empty(array)


def add(array: Sequence | None, *elements) -> Sequence:
    if array is None:
        array = []
    if not elements:
        return array
    return _same_type(array, [*array, *elements])


def add_at(array: Sequence | None, index: int, elements: Sequence) -> Sequence | None:
    if not elements:
        return array

    if array is None:
        if index != 0:
            raise IndexError(f'Index: {index}, Length: 0')
        return list(elements)

    length = len(array)
    if index < 0 or index > length:
        raise IndexError(f'Index: {index}, Length: {length}')

    return _same_type(array, [*array[:index], *elements, *array[index:]])


def insert(array: Sequence | None, index: int, element) -> Sequence | None:
    return add_at(array, index, [element])


def _remove_one(array: Sequence, index: int) -> Sequence:
    length = len(array)
    if index < 0 or index >= length:
        raise IndexError(f'Index: {index}, Length: {length}')
    return _same_type(array, [*array[:index], *array[index + 1 :]])


def remove_at(array: Sequence | None, *indexes: int) -> Sequence | None:
    if is_none_or_empty(array):
        return array

    # Every removal shortens the sequence, later indexes move left by one
    for removed, index in enumerate(indexes):
        array = _remove_one(array, index - removed)
    return array


def remove(array: Sequence | None, *elements) -> Sequence | None:
    if is_none_or_empty(array):
        return array

    for element in elements:
        array = remove_at(array, *indexes_of(array, element))
    return array


def reverse(array: MutableSequence | None, start_index: int = 0, end_index: int | None = None):
    if is_none_or_empty(array):
        return

    if end_index is None:
        end_index = len(array)

    i = max(start_index, 0)
    j = min(len(array), end_index) - 1
    while j > i:
        array[i], array[j] = array[j], array[i]
        i += 1
        j -= 1


def swap(array: MutableSequence | None, offset1: int, offset2: int, length: int = 1):
    """Exchange ``length`` consecutive elements starting at ``offset1`` with
    those starting at ``offset2``.

    Out of range offsets are clamped instead of rejected: negative offsets
    become 0 and ``length`` is cut so neither block runs past the end. The
    call does nothing when the sequence is empty, when either offset is past
    the end or when both offsets point to the same block.
    """
    if is_none_or_empty(array):
        return

    size = len(array)
    if offset1 >= size or offset2 >= size:
        return

    offset1 = max(offset1, 0)
    offset2 = max(offset2, 0)
    if offset1 == offset2:
        return

    length = min(length, size - offset1, size - offset2)
    for i in range(length):
        a, b = offset1 + i, offset2 + i
        array[a], array[b] = array[b], array[a]


def shift(
    array: MutableSequence | None,
    offset: int,
    start_index: int | None = None,
    end_index: int | None = None,
):
    """Rotate ``array[start_index:end_index]`` in place by ``offset``.

    The element at ``start_index + k`` ends at
    ``start_index + (k + offset) % n``, so positive offsets move elements
    towards the end. Without bounds the whole sequence is rotated and a
    ``None`` sequence raises ``TypeError``. With bounds every input is
    accepted: indexes are clamped and ranges shorter than two elements are
    left alone.

    The rotation repeatedly swaps the shorter of the two blocks into its
    final place and keeps working on what remains, using O(1) extra space
    and O(n) element swaps.
    """
    if start_index is None and end_index is None:
        if is_empty(array):
            return
        start_index, end_index = 0, len(array)
    elif start_index is None:
        start_index = 0
    elif end_index is None:
        end_index = len(array) if array is not None else 0

    if is_none_or_empty(array):
        return

    size = len(array)
    if start_index >= size - 1 or end_index <= 0:
        return

    start_index = max(start_index, 0)
    end_index = min(end_index, size)

    n = end_index - start_index
    if n <= 1:
        return

    offset %= n

    while n > 1 and offset > 0:
        complement = n - offset
        if offset > complement:
            # The front block lands in its final place at the tail
            swap(array, start_index, start_index + n - complement, complement)
            n = offset
            offset -= complement
        elif offset == complement:
            swap(array, start_index, start_index + complement, offset)
            break
        else:
            swap(array, start_index, start_index + complement, offset)
            start_index += offset
            n = complement


def shuffle(array: MutableSequence, rng: random.Random | None = None):
    require_not_none(array, 'array')

    if rng is None:
        logger.debug('No random generator given, using the module level one')
        rng = random
    for i in range(len(array), 1, -1):
        swap(array, i - 1, rng.randrange(i), 1)


def subarray(array: Sequence | None, start_index: int, end_index: int) -> Sequence | None:
    if array is None:
        return None

    start_index = max(start_index, 0)
    end_index = min(end_index, len(array))

    if end_index - start_index <= 0:
        return array[:0]
    return array[start_index:end_index]


def index_of(array: Sequence | None, element, from_index: int = 0) -> int:
    if array is None or element is None:
        return INDEX_NOT_FOUND

    for i in range(max(from_index, 0), len(array)):
        if array[i] == element:
            return i
    return INDEX_NOT_FOUND


def last_index_of(array: Sequence | None, element) -> int:
    if array is None or element is None:
        return INDEX_NOT_FOUND

    for i in range(len(array) - 1, -1, -1):
        if array[i] == element:
            return i
    return INDEX_NOT_FOUND


def indexes_of(array: Sequence | None, element, from_index: int = 0) -> list[int]:
    if array is None or element is None:
        return []
    return [
        i for i in range(max(from_index, 0), len(array)) if array[i] == element
    ]


def contains(array: Sequence | None, element) -> bool:
    return index_of(array, element) != INDEX_NOT_FOUND


def not_contains(array: Sequence | None, element) -> bool:
    return not contains(array, element)


def contains_all(array: Sequence | None, *elements) -> bool:
    if array is None:
        return False
    return all(contains(array, e) for e in elements)


def contains_any(array: Sequence | None, *elements) -> bool:
    if array is None:
        return False
    return any(contains(array, e) for e in elements)


def contains_none(array: Sequence | None, *elements) -> bool:
    return not contains_any(array, *elements)


def contains_duplicates(array: Sequence | None) -> bool:
    if array is None:
        return False

    seen: list[Any] = []
    for element in array:
        # Unhashable elements are compared by equality
        if element in seen:
            return True
        seen.append(element)
    return False


def none_to_empty(array: Sequence[T] | None) -> Sequence[T]:
    return [] if array is None else array


def empty_to_none(array: Sequence[T] | None) -> Sequence[T] | None:
    return None if is_none_or_empty(array) else array


def to_string_array(array: Sequence | None) -> list[str] | None:
    if array is None:
        return None
    return [str(element) for element in array]
