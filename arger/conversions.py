"""
Text → value conversions used by the result accessor.

Every cell stores its value as text (the default's textual form or the raw token
that followed an option). convert() turns that text back into the requested type
and returns a Failure instead of raising when the text is malformed.

Built-in converters
- str   → identity
- bool  → true/yes/on/1 and false/no/off/0 (case-insensitive)
- int   → decimal integers (surrounding whitespace ignored)
- float → anything float() accepts
Any other callable is used as a converter as-is; ValueError and TypeError raised
by it are turned into a Failure.
"""
from .faults import Failure
from .utils import Unset

TRUTHY = frozenset({"true", "yes", "on", "1"})
FALSY = frozenset({"false", "no", "off", "0"})


def _boolean(text):
    match text.strip().lower():
        case value if value in TRUTHY:
            return True
        case value if value in FALSY:
            return False
        case _:
            raise ValueError("expected one of %s" % ", ".join(sorted(TRUTHY | FALSY)))


def _integer(text):
    return int(text.strip(), 10)


_converters = {
    str: str,
    bool: _boolean,
    int: _integer,
    float: float,
}


def convert(text, type=str, /):
    """
    convert stored text to `type`, or return a Failure.

    parameters
    - text: str
      the stored textual value.
    - type: type | Callable[[str], T]
      a built-in (str, bool, int, float) or any converter callable.

    raises
    - TypeError when `type` is not callable (caller bug, not malformed input).
    """
    if not isinstance(text, str):
        raise TypeError("convert() first argument must be a string")
    if not callable(type):
        raise TypeError("convert() second argument must be callable")
    converter = _converters.get(type, type)
    try:
        return converter(text)
    except (ValueError, TypeError) as exception:
        return Failure(text, type, reason=str(exception) or Unset)


__all__ = (
    "convert",
)
