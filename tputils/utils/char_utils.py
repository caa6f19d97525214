LF = '\n'
CR = '\r'
NUL = '\0'


def _require_char(ch: str):
    if ch is None:
        raise TypeError('ch cannot be None')
    if len(ch) != 1:
        raise ValueError(f'Expected a single character, got {ch!r}')


def compare(x: str, y: str) -> int:
    _require_char(x)
    _require_char(y)
    return ord(x) - ord(y)


def is_ascii(ch: str) -> bool:
    _require_char(ch)
    return ord(ch) < 128


def is_ascii_alpha_lower(ch: str) -> bool:
    _require_char(ch)
    return 'a' <= ch <= 'z'


def is_ascii_alpha_upper(ch: str) -> bool:
    _require_char(ch)
    return 'A' <= ch <= 'Z'


def is_ascii_alpha(ch: str) -> bool:
    return is_ascii_alpha_upper(ch) or is_ascii_alpha_lower(ch)


def is_ascii_numeric(ch: str) -> bool:
    _require_char(ch)
    return '0' <= ch <= '9'


def is_ascii_alphanumeric(ch: str) -> bool:
    return is_ascii_alpha(ch) or is_ascii_numeric(ch)


def is_ascii_control(ch: str) -> bool:
    _require_char(ch)
    return ch < ' ' or ord(ch) == 127


def is_ascii_printable(ch: str) -> bool:
    _require_char(ch)
    return ' ' <= ch < '\x7f'


def to_int_value(ch: str | None, default: int | None = None) -> int:
    if ch is None or len(ch) != 1 or not is_ascii_numeric(ch):
        if default is not None:
            return default
        raise ValueError(f"The character {ch!r} is not in the range '0' - '9'")
    return ord(ch) - ord('0')
