import re
from typing import Callable, Iterable

EMPTY = ''
SPACE = ' '
TAB = '\t'
DEFAULT_ABBREV_MARKER = '...'

EMAIL_PATTERN = re.compile(r'^[\w\-.]{1,64}@[^\W_]{2,255}\.[a-z]{2,}$', re.IGNORECASE)
URL_PATTERN = re.compile(r'^(https?|ftp)://[^\s/$.?#].\S*$', re.IGNORECASE)


def is_none_or_empty(cs: str | None) -> bool:
    return cs is None or len(cs) == 0


def is_not_empty(cs: str | None) -> bool:
    return not is_none_or_empty(cs)


def is_none_or_blank(cs: str | None) -> bool:
    return is_none_or_empty(cs) or cs.isspace()


def is_not_blank(cs: str | None) -> bool:
    return not is_none_or_blank(cs)


def is_lower_case(cs: str | None) -> bool:
    return is_not_empty(cs) and all(c.islower() for c in cs)


def is_upper_case(cs: str | None) -> bool:
    return is_not_empty(cs) and all(c.isupper() for c in cs)


def is_mixed_case(cs: str | None) -> bool:
    return is_not_empty(cs) and not is_lower_case(cs) and not is_upper_case(cs)


def is_alphabetic(cs: str | None) -> bool:
    return is_not_empty(cs) and cs.isalpha()


def is_alphabetic_space(cs: str | None) -> bool:
    return is_not_empty(cs) and all(c.isalpha() or c.isspace() for c in cs)


def is_alphanumeric(cs: str | None) -> bool:
    return is_not_empty(cs) and all(c.isalpha() or c.isdecimal() for c in cs)


def is_alphanumeric_space(cs: str | None) -> bool:
    return is_not_empty(cs) and all(
        c.isalpha() or c.isdecimal() or c.isspace() for c in cs
    )


def is_numeric(cs: str | None) -> bool:
    return is_not_empty(cs) and cs.isdecimal()


def is_numeric_space(cs: str | None) -> bool:
    return is_not_empty(cs) and all(c.isdecimal() or c.isspace() for c in cs)


def is_email(cs: str | None) -> bool:
    return is_not_empty(cs) and EMAIL_PATTERN.match(cs) is not None


def is_url(cs: str | None) -> bool:
    return is_not_empty(cs) and URL_PATTERN.match(cs) is not None


def _all_of(predicate: Callable[[str | None], bool]) -> Callable[..., bool]:
    def check(*css: str | None) -> bool:
        return all(predicate(cs) for cs in css)

    return check


def _any_of(predicate: Callable[[str | None], bool]) -> Callable[..., bool]:
    def check(*css: str | None) -> bool:
        return any(predicate(cs) for cs in css)

    return check


def _each_of(predicate: Callable[[str | None], bool]) -> Callable[..., list[bool]]:
    def check(*css: str | None) -> list[bool]:
        return [predicate(cs) for cs in css]

    return check


all_none_or_empty = _all_of(is_none_or_empty)
any_none_or_empty = _any_of(is_none_or_empty)
each_none_or_empty = _each_of(is_none_or_empty)
all_not_empty = _all_of(is_not_empty)
any_not_empty = _any_of(is_not_empty)
each_not_empty = _each_of(is_not_empty)
all_none_or_blank = _all_of(is_none_or_blank)
any_none_or_blank = _any_of(is_none_or_blank)
each_none_or_blank = _each_of(is_none_or_blank)
all_not_blank = _all_of(is_not_blank)
any_not_blank = _any_of(is_not_blank)
each_not_blank = _each_of(is_not_blank)
all_lower_case = _all_of(is_lower_case)
any_lower_case = _any_of(is_lower_case)
each_lower_case = _each_of(is_lower_case)
all_upper_case = _all_of(is_upper_case)
any_upper_case = _any_of(is_upper_case)
each_upper_case = _each_of(is_upper_case)
all_mixed_case = _all_of(is_mixed_case)
any_mixed_case = _any_of(is_mixed_case)
each_mixed_case = _each_of(is_mixed_case)
all_alphabetic = _all_of(is_alphabetic)
any_alphabetic = _any_of(is_alphabetic)
each_alphabetic = _each_of(is_alphabetic)
all_alphabetic_space = _all_of(is_alphabetic_space)
any_alphabetic_space = _any_of(is_alphabetic_space)
each_alphabetic_space = _each_of(is_alphabetic_space)
all_alphanumeric = _all_of(is_alphanumeric)
any_alphanumeric = _any_of(is_alphanumeric)
each_alphanumeric = _each_of(is_alphanumeric)
all_alphanumeric_space = _all_of(is_alphanumeric_space)
any_alphanumeric_space = _any_of(is_alphanumeric_space)
each_alphanumeric_space = _each_of(is_alphanumeric_space)
all_numeric = _all_of(is_numeric)
any_numeric = _any_of(is_numeric)
each_numeric = _each_of(is_numeric)
all_numeric_space = _all_of(is_numeric_space)
any_numeric_space = _any_of(is_numeric_space)
each_numeric_space = _each_of(is_numeric_space)
all_email = _all_of(is_email)
any_email = _any_of(is_email)
each_email = _each_of(is_email)
all_url = _all_of(is_url)
any_url = _any_of(is_url)
each_url = _each_of(is_url)


def require_non_empty(cs: str | None, message: str | None = None) -> str:
    if is_none_or_empty(cs):
        raise ValueError(message or 'value cannot be None or empty')
    return cs


def require_non_empty_else(cs: str | None, default: str | None) -> str | None:
    return cs if is_not_empty(cs) else default


def require_non_blank(cs: str | None, message: str | None = None) -> str:
    if cs is None:
        raise TypeError('value cannot be None')
    if is_none_or_blank(cs):
        raise ValueError(message or 'value cannot be blank')
    return cs


def require_non_blank_else(cs: str | None, default: str | None) -> str | None:
    return cs if is_not_blank(cs) else default


def abbreviate(
    cs: str | None,
    max_width: int,
    offset: int = 0,
    marker: str = DEFAULT_ABBREV_MARKER,
) -> str | None:
    """Shorten ``cs`` to at most ``max_width`` characters using ``marker``.

    ``offset`` is the left edge the caller wants to keep visible; when it is
    far enough from the start the result is marked on both sides, e.g.
    ``abbreviate('abcdefghijklmno', 10, offset=5) == '...fghi...'``.
    """
    if is_not_empty(cs) and marker == EMPTY and max_width > 0:
        return cs[:max_width]
    if any_none_or_empty(cs, marker):
        return cs

    marker_length = len(marker)
    min_width = marker_length + 1
    min_width_with_offset = marker_length + marker_length + 1

    if max_width < min_width:
        raise ValueError(f'Minimum abbreviation width is {min_width}')

    length = len(cs)
    if length <= max_width:
        return cs

    offset = min(offset, length)
    if length - offset < max_width - marker_length:
        offset = length - (max_width - marker_length)

    if offset <= marker_length + 1:
        return cs[: max_width - marker_length] + marker

    if max_width < min_width_with_offset:
        raise ValueError(
            f'Minimum abbreviation width with offset is {min_width_with_offset}'
        )

    if offset + max_width - marker_length < length:
        return marker + abbreviate(cs[offset:], max_width - marker_length, marker=marker)
    return marker + cs[length - (max_width - marker_length) :]


def abbreviate_middle(cs: str | None, middle: str | None, length: int) -> str | None:
    if any_none_or_empty(cs, middle) or length >= len(cs) or length < len(middle) + 2:
        return cs

    target = length - len(middle)
    start_offset = target // 2 + target % 2
    end_offset = len(cs) - target // 2
    return cs[:start_offset] + middle + cs[end_offset:]


def append_if_missing(cs: str | None, suffix: str | None, *suffixes: str) -> str | None:
    if cs is None or is_none_or_empty(suffix) or cs.endswith(suffix):
        return cs
    if any(cs.endswith(s) for s in suffixes):
        return cs
    return cs + suffix


def repeat(ch: str, times: int) -> str:
    if times <= 0:
        return EMPTY
    return ch * times


def _padding(pad: str, pads: int) -> str:
    return (pad * (pads // len(pad) + 1))[:pads]


def left_pad(cs: str | None, size: int, pad: str = SPACE) -> str | None:
    if cs is None:
        return None
    if is_none_or_empty(pad):
        pad = SPACE

    pads = size - len(cs)
    if pads <= 0:
        return cs
    return _padding(pad, pads) + cs


def right_pad(cs: str | None, size: int, pad: str = SPACE) -> str | None:
    if cs is None:
        return None
    if is_none_or_empty(pad):
        pad = SPACE

    pads = size - len(cs)
    if pads <= 0:
        return cs
    return cs + _padding(pad, pads)


def center(cs: str | None, size: int, pad: str = SPACE) -> str | None:
    if cs is None or size <= 0:
        return cs

    length = len(cs)
    pads = size - length
    if pads <= 0:
        return cs

    cs = left_pad(cs, length + pads // 2, pad)
    return right_pad(cs, size, pad)


def chomp(cs: str | None) -> str | None:
    if is_none_or_empty(cs):
        return cs
    if cs.endswith('\r\n'):
        return cs[:-2]
    if cs[-1] in '\r\n':
        return cs[:-1]
    return cs


def chop(cs: str | None) -> str | None:
    if cs is None:
        return None
    if len(cs) < 2:
        return EMPTY
    if cs.endswith('\r\n'):
        return cs[:-2]
    return cs[:-1]


def contains_all(cs: str | None, *searches: str) -> bool:
    if is_none_or_empty(cs):
        return False
    return all(s in cs for s in searches)


def contains_any(cs: str | None, *searches: str) -> bool:
    if is_none_or_empty(cs):
        return False
    return any(s in cs for s in searches)


def contains_none(cs: str | None, *searches: str) -> bool:
    return not contains_any(cs, *searches)


def contains_only(cs: str | None, *valid: str) -> bool:
    if is_none_or_empty(cs):
        return False
    return all(any(ch in v for v in valid) for ch in cs)


def contains_whitespace(cs: str | None) -> bool:
    if is_none_or_empty(cs):
        return False
    return any(ch.isspace() for ch in cs)


def count_matches(cs: str, sub: str) -> int:
    if cs is None or sub is None:
        raise TypeError('cs and sub cannot be None')
    if sub == EMPTY:
        return 0
    return cs.count(sub)


def count_each_match(cs: str, *subs: str) -> list[int]:
    return [count_matches(cs, sub) for sub in subs]


def replace(cs: str | None, search: str | Iterable[str], replacement: str) -> str | None:
    if cs is None or not search:
        return cs

    searches = [search] if isinstance(search, str) else search
    for s in searches:
        cs = cs.replace(s, replacement)
    return cs


def capitalize(cs: str | None) -> str | None:
    if is_none_or_empty(cs):
        return cs
    return cs[0].title() + cs[1:]


def reverse(cs: str | None) -> str | None:
    if is_none_or_empty(cs):
        return cs
    return cs[::-1]


def join(delimiter, elements: Iterable | None) -> str:
    if delimiter is None or elements is None:
        return EMPTY
    return str(delimiter).join(str(e) for e in elements)
