from collections import Counter
from typing import Callable, Collection, Hashable, Iterable, Iterator, MutableMapping, TypeVar

from tputils.utils.object_utils import require_not_none

K = TypeVar('K')
V = TypeVar('V')
E = TypeVar('E', bound=Hashable)
T = TypeVar('T')


def is_none_or_empty(collection: Collection | None) -> bool:
    return collection is None or len(collection) == 0


def is_not_empty(collection: Collection | None) -> bool:
    return not is_none_or_empty(collection)


def add_to_map_value(
    mapping: MutableMapping[K, V],
    collection_factory: Callable[[], V],
    key: K,
    *values,
) -> MutableMapping[K, V]:
    """Replace ``mapping[key]`` with a fresh collection holding the old
    values followed by ``values``."""
    require_not_none(mapping, 'mapping')
    require_not_none(collection_factory, 'collection_factory')

    merged = collection_factory()
    _extend(merged, mapping.get(key, ()))
    _extend(merged, values)
    mapping[key] = merged
    return mapping


def _extend(target, items: Iterable):
    if hasattr(target, 'extend'):
        target.extend(items)
    else:
        target.update(items)


def combine(collection_factory: Callable[[], V], *collections: Iterable) -> V:
    result = require_not_none(collection_factory, 'collection_factory')()
    for collection in collections:
        _extend(result, collection)
    return result


def merge_maps(*mappings: dict[K, V] | None) -> dict[K, V] | None:
    """Merge left to right, earlier mappings win on shared keys."""
    if not mappings:
        return None

    result = mappings[0]
    for mapping in mappings[1:]:
        result = _merge_two(result, mapping)
    return result


def _merge_two(dominant: dict[K, V] | None, recessive: dict[K, V] | None) -> dict[K, V] | None:
    if dominant is None:
        return recessive
    if recessive is None:
        return dominant

    result = dict(dominant)
    for key in subtract(recessive.keys(), intersection(dominant.keys(), recessive.keys())):
        result[key] = recessive[key]
    return result


def cardinality_map(collection: Iterable[E]) -> dict[E, int]:
    return dict(Counter(require_not_none(collection, 'collection')))


def intersection(*collections: Iterable[T]) -> list[T]:
    if not collections:
        raise TypeError('at least one collection is required')

    result = list(require_not_none(collections[0], 'collection'))
    for collection in collections[1:]:
        # Matched by equality, elements may be unhashable
        remaining = list(require_not_none(collection, 'collection'))
        kept = []
        for element in result:
            if element in remaining:
                remaining.remove(element)
                kept.append(element)
        result = kept
    return result


def subtract(*collections: Iterable[T]) -> list[T]:
    if not collections:
        raise TypeError('at least one collection is required')

    result = list(require_not_none(collections[0], 'collection'))
    for collection in collections[1:]:
        # Each occurrence removes at most one matching element
        for element in require_not_none(collection, 'collection'):
            if element in result:
                result.remove(element)
    return result


def iterator_to_list(it: Iterator[V]) -> list[V]:
    return list(require_not_none(it, 'it'))


def contains_all(collection: Collection, *elements) -> bool:
    require_not_none(collection, 'collection')
    return all(element in collection for element in elements)


def contains_any(collection: Collection, *elements) -> bool:
    return len(intersection(collection, elements)) > 0


def contains_none(collection: Collection, *elements) -> bool:
    return not contains_any(collection, *elements)


def contains_duplicates(collection: Collection | None) -> bool:
    if collection is None:
        return False

    seen = []
    for element in collection:
        if element in seen:
            return True
        seen.append(element)
    return False
