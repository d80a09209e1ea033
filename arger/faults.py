"""
Arger faults (errors, warnings and outcomes) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault kind the parser
  reports. Each code renders a short human-readable description via describe().
- ParserException: base type carrying message + read-only options (code, context,
  hint, program, colorful). Faults are built like exceptions but are *returned*
  inside an Outcome; the parser never raises them.
- ParserWarning: soft diagnostics emitted through the warnings module.
- Failure: falsy value returned by the result accessor when a stored text cannot
  be converted to the requested type.
- Outcome: truthy/falsy result of registration and parsing, carrying the fault.
- report(): ready-made error callback printing "Error [<kind>] <context>" to stderr.

Integration
- Callers usually check the Outcome; the error callback (kind, context) is an
  additional side channel and never influences control flow.
- Rendering uses rich; styles can be overridden with a __styles__ mapping in __main__.
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .utils import Unset, UnsetType, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes reported through the error callback (stable identifiers).

    grouping (by phase)
    - registration (101xx)
      • DUPLICATE_DEFINITION
    - parsing (102xx)
      • EXPECTED_VALUE, MISSING_REQUIRED_ARGUMENT
    - result access (103xx)
      • INCORRECT_ARGUMENT_TYPE
    """
    # --- registration ---
    DUPLICATE_DEFINITION      = 10101

    # --- parsing ---
    EXPECTED_VALUE            = 10201
    MISSING_REQUIRED_ARGUMENT = 10202

    # --- result access ---
    INCORRECT_ARGUMENT_TYPE   = 10301

    def describe(self):
        """
        return the short human-readable description of this code.
        """
        return _descriptions.get(self, "Unknown error")

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_descriptions = {
    FaultCode.DUPLICATE_DEFINITION: "Duplicate definition",
    FaultCode.MISSING_REQUIRED_ARGUMENT: "Missing required argument",
    FaultCode.INCORRECT_ARGUMENT_TYPE: "Incorrect argument type",
    FaultCode.EXPECTED_VALUE: "Expected value",
}


def _palette(defaults, /):
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


class ParserException(Exception):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | UnsetType)
        super().__init__(coalesce(message, ""))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options["code"]

    @property
    def context(self):
        return self.options.get("context", "")

    def __str__(self):
        return "%s: %s" % (self.code.describe(), coalesce(self.message, self.context))

    def __rich__(self):
        styles = _palette({
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })
        colorful = self.options.get("colorful", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            return Text(str(fragment), styler(style))

        prog = getattr(__import__("__main__"), "__prog__", self.options.get("program") or "arger")

        header = Text.assemble(
            "[ ",
            text(prog, "prog-name"),
            " — ",
            text(self.code.normalize(), "code"),
            " | ",
            text(self.code.describe(), "error-title"),
            " ]"
        )
        renders = [header, text(coalesce(self.message, self.context), "error-message")]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
        return Group(*renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateDefinitionError(ParserException): ...
class ExpectedValueError(ParserException): ...
class MissingRequiredArgumentError(ParserException): ...
class IncorrectArgumentTypeError(ParserException): ...


class ParserWarning(Warning):
    def __init__(self, message, /, **options):
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)


class ReservedAliasWarning(ParserWarning): ...
class LateRegistrationWarning(ParserWarning): ...


class Failure:
    """
    falsy result of a conversion that could not be performed.

    the result accessor hands this back instead of raising so malformed input
    stays observable: callers test it with `if not value` or isinstance().

    attributes
    - alias: the alias the value was requested through (may be empty for direct conversions).
    - text: the stored text that failed to convert.
    - type: the requested type/converter.
    - reason: short explanation (the converter's error message when available).
    """
    __slots__ = ("alias", "text", "type", "reason")

    def __init__(self, text, type, /, *, alias="", reason=Unset):
        self.alias = alias
        self.text = text
        self.type = type
        self.reason = coalesce(reason, "cannot convert %r to %s" % (text, getattr(type, "__name__", repr(type))))

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return NotImplemented
        return (self.alias, self.text, self.type) == (other.alias, other.text, other.type)

    def __hash__(self):
        return hash((Failure, self.alias, self.text, self.type))

    def __replace__(self, **overrides):
        return Failure(
            overrides.get("text", self.text),
            overrides.get("type", self.type),
            alias=overrides.get("alias", self.alias),
            reason=overrides.get("reason", self.reason),
        )

    def __repr__(self):
        return "Failure(alias=%r, text=%r, reason=%r)" % (self.alias, self.text, self.reason)


class Outcome:
    """
    result of a registration or parse call.

    truthiness
    - bool(outcome) is True on success and False when a fault was recorded, so the
      boolean contract `if not parser.parse(argv): ...` keeps working.

    attributes
    - fault: the ParserException describing the failure, or None.
    - helped: True when the automatic help was rendered during the parse.
    """
    __slots__ = ("fault", "helped")

    def __init__(self, fault=None, /, *, helped=False):
        self.fault = fault
        self.helped = helped

    def __bool__(self):
        return self.fault is None

    def __repr__(self):
        if self.fault is None:
            return "Outcome(ok, helped=%r)" % self.helped
        return "Outcome(%s, helped=%r)" % (self.fault.code.name, self.helped)


def report(kind, context, /):
    """
    default-style error callback: print "Error [<description>] <context>" to stderr.

    usage
        parser.set_error_callback(report)

    the callback only reports; terminating the process is left to the caller.
    """
    if not isinstance(kind, FaultCode):
        raise TypeError("report() first argument must be a fault-code")
    console.print(Text.assemble("Error [", kind.describe(), "] ", str(context)), highlight=False)


def refine(fault, /, **options):
    """
    return a copy of a fault with extra options merged in (program name, colors, ...).
    """
    return copy.replace(fault, **options)


__all__ = (
    "FaultCode",
    "ParserException",
    "DuplicateDefinitionError",
    "ExpectedValueError",
    "MissingRequiredArgumentError",
    "IncorrectArgumentTypeError",
    "ParserWarning",
    "ReservedAliasWarning",
    "LateRegistrationWarning",
    "Failure",
    "Outcome",
    "report",
    "refine",
)
