"""
Arger parser: register definitions, parse argv-like tokens, read typed results.

What this module provides
- Parser: owns the definition registry (ordered), the alias index (alias →
  definition), the parse engine and the result accessor.
  • register_argument(...) / register_flag(...): declare value-bearing options
    and presence-only flags under one or more aliases.
  • parse(tokens): match exact tokens against aliases, store values, collect
    unmatched tokens and check required definitions.
  • get(alias, type): convert the stored text of a definition to a typed value.
  • print_help(): render usage and the option table with rich.

Core ideas
- Tokens are matched verbatim: no "--name=value", no combined short flags.
- Faults are values: every operation that can fail returns an Outcome whose
  truthiness is the success flag and whose `fault` describes the failure. The
  optional error callback receives (FaultCode, context) as a side channel and
  never alters control flow.
- Termination is always the caller's decision; the post-help callback is the
  hook for it when automatic help is on.

Quick start
    import sys
    from arger import Parser, report

    parser = Parser(lambda: sys.exit(0))
    parser.set_error_callback(report)
    parser.register_flag(("-v", "--verbose"), "chatty output", False)
    parser.register_argument(("-n", "--name"), "who to greet", "world", required=True)

    if not parser.parse(sys.argv):
        sys.exit(1)
    print("hello", parser.get("--name"), parser.get("-v", bool))
"""
import copy
import warnings
from collections import defaultdict, deque
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .conversions import convert
from .definitions import Definition
from .faults import *
from .utils import *

HELP_ALIASES = ("-h", "--help")


class Parser:
    """
    Exact-token command-line parser.

    Parameters
    - post_help: Callable[[], None] | None (positional-only)
      invoked once each time the automatic help is rendered. Callers typically
      exit from here; otherwise parsing continues with the next token.
    - auto_help: bool
      when True, "-h" and "--help" render the help instead of being matched.
    - colorful: bool
      style help and fault renderings with the palette (see print_help).
    - console: rich.console.Console
      where help is printed; defaults to a stdout console.
    """

    def __init__(self, post_help=None, /, *, auto_help=True, colorful=False, console=Unset):
        if post_help is not None and not callable(post_help):
            raise TypeError("post-help callback must be callable")
        if not isinstance(console, Console | UnsetType):
            raise TypeError("console must be a rich console")

        self._post_help = post_help
        self._error_callback = None
        self._auto_help = bool(auto_help)
        self._colorful = bool(colorful)
        self._console = coalesce(console, Console())

        self._definitions = []
        self._aliases = {}
        self._unmatched = []
        self._program = ""
        self._parsed = False

    definitions = mirror("definitions")

    @property
    def aliases(self):
        """
        read-only mapping of every registered alias to its definition.
        """
        return MappingProxyType(self._aliases)

    @property
    def auto_help(self):
        return self._auto_help

    def set_auto_help(self, enabled):
        """
        enable or disable automatic help on "-h" / "--help".

        when disabled, those tokens go through the alias index like any other
        token and the caller renders help with print_help() when it wants to.
        """
        self._auto_help = bool(enabled)

    def set_error_callback(self, callback):
        """
        install the error callback `callback(kind: FaultCode, context: str)`, or
        remove it with None.
        """
        if callback is not None and not callable(callback):
            raise TypeError("error callback must be callable")
        self._error_callback = callback

    def trigger(self, fault, /, **options):
        """
        record a fault: decorate it with the parser context, notify the error
        callback and hand back the failing Outcome.
        """
        fault = refine(fault, program=self._program, colorful=self._colorful)
        if self._error_callback is not None:
            self._error_callback(fault.code, fault.context)
        return Outcome(fault, **options)

    def register_argument(self, aliases, description="", default="", required=False):
        """
        declare a value-bearing option: each match consumes the following token.

        returns a falsy Outcome (DuplicateDefinitionError) when any alias is
        already registered; nothing is registered in that case.
        """
        return self._register(aliases, description, default, required, False)

    def register_flag(self, aliases, description="", default=False, required=False):
        """
        declare a presence-only flag: a match stores "true" and consumes nothing else.
        """
        return self._register(aliases, description, default, required, True)

    def _register(self, aliases, description, default, required, flag):
        definition = Definition(aliases, description, default, flag=flag, required=required)

        # check every alias before indexing any of them
        for alias in definition.aliases:
            if alias in self._aliases:
                return self.trigger(DuplicateDefinitionError(
                    "alias %r is already defined by %r" % (alias, self._aliases[alias].label),
                    code=FaultCode.DUPLICATE_DEFINITION,
                    context=alias,
                    hint="drop %r from one of the declarations" % alias,
                ))

        if self._parsed:
            warnings.warn(LateRegistrationWarning(
                "%r registered after parsing started; earlier results ignore it" % definition.label,
                definition=definition,
            ), stacklevel=3)

        if self._auto_help and (reserved := [alias for alias in definition.aliases if alias in HELP_ALIASES]):
            warnings.warn(ReservedAliasWarning(
                "%s shadowed by the automatic help; disable it to match %s" % (
                    ", ".join(map(repr, reserved)), "it" if len(reserved) == 1 else "them"
                ),
                definition=definition,
            ), stacklevel=3)

        self._definitions.append(definition)
        self._aliases.update(dict.fromkeys(definition.aliases, definition))
        return Outcome()

    def parse(self, tokens):
        """
        parse argv-like tokens (program name first).

        phases
        - setup: reset every cell, clear unmatched tokens, capture the program name.
        - scan: left to right over the tokens after the program name
          • help token (auto-help on): render help, call post-help, continue.
          • unknown token: appended to the unmatched list.
          • flag: stores "true".
          • option: consumes the next token verbatim as its value; when there is
            none the parse aborts with ExpectedValueError.
        - check: the first required definition still pending aborts with
          MissingRequiredArgumentError (one report per parse).

        returns
        - Outcome: truthy on success; `helped` tells whether help was rendered.
        """
        if isinstance(tokens, str):
            raise TypeError("parse() argument must be an iterable of strings, not a string")
        tokens = deque(tokens)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() tokens must be strings")

        self._parsed = True
        self._unmatched.clear()
        for definition in self._definitions:
            definition.cell.reset()

        self._program = tokens.popleft() if tokens else ""
        helped = False

        while tokens:
            token = tokens.popleft()

            if self._auto_help and token in HELP_ALIASES:
                self.print_help()
                helped = True
                if self._post_help is not None:
                    self._post_help()
                continue

            try:
                definition = self._aliases[token]
            except KeyError:
                self._unmatched.append(token)
                continue

            if definition.flag:
                definition.cell.mark("true")
                continue

            if not tokens:
                return self.trigger(ExpectedValueError(
                    "option %r expects a value but the input ended" % token,
                    code=FaultCode.EXPECTED_VALUE,
                    context=token,
                    hint="pass a value right after it (for example: %s <value>)" % token,
                ), helped=helped)

            # the value token is stored verbatim and never looked up
            definition.cell.mark(tokens.popleft())

        for definition in self._definitions:
            if definition.cell.pending:
                return self.trigger(MissingRequiredArgumentError(
                    "required %s %r was not given" % ("flag" if definition.flag else "argument", definition.label),
                    code=FaultCode.MISSING_REQUIRED_ARGUMENT,
                    context=definition.label,
                    hint="add one of: %s" % ", ".join(definition.aliases),
                ), helped=helped)

        return Outcome(helped=helped)

    def get(self, alias, type=str):
        """
        convert the value stored for `alias` to `type`.

        returns
        - None when the alias was never registered.
        - the converted value on success.
        - a falsy Failure when the stored text does not convert; the error
          callback is notified with INCORRECT_ARGUMENT_TYPE and the alias.
        """
        try:
            definition = self._aliases[alias]
        except KeyError:
            return None

        value = convert(definition.cell.text, type)
        if isinstance(value, Failure):
            value = copy.replace(value, alias=alias)
            self.trigger(IncorrectArgumentTypeError(
                "value %r of %r is not a valid %s" % (
                    value.text, alias, getattr(type, "__name__", "value")
                ),
                code=FaultCode.INCORRECT_ARGUMENT_TYPE,
                context=alias,
                hint=value.reason,
            ))
        return value

    def is_found(self, alias):
        """
        required tracking for the definition behind `alias`: None when not
        required (or unknown), False while pending, True once matched.
        """
        try:
            return self._aliases[alias].cell.found
        except KeyError:
            return None

    def get_program_name(self):
        return self._program

    def get_unmatched_args(self):
        return list(self._unmatched)

    def print_help(self):
        """
        Render usage and the option table to the parser's console.

        Layout
            Usage: <program> [options]

            Options:

            <aliases> <TAB>desc:<description><TAB>default:<default|<none>><TAB><required|optional>

        Palette keys
        - usage-label, program-name, options-label
        - option-name, flag-name, description, default, no-default, required, optional

        Customization
        - Define a mapping named __styles__ in __main__ to override any palette entry.
        - When colorful is False, styling is suppressed.
        """
        styles = defaultdict(str, {
            # === Head sections ===
            "usage-label": "bold #00E6FF",  # CYAN → signature info color
            "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "options-label": "bold #FFFFFF",  # Pure white header

            # === Names ===
            "option-name": "bold #00E6FF",  # CYAN for options
            "flag-name": "bold #22C55E",  # GREEN for flags

            # === Details ===
            "description": "#9CA3AF",  # Muted gray
            "default": "bold #FFD600",  # AMBER for defaults
            "no-default": "#737373 italic",
            "required": "bold #EF4444",
            "optional": "#737373",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self._colorful else ""

        def text(fragment, style=""):
            return Text(str(fragment), styler(style))

        renders = [
            Text.assemble(text("Usage:", "usage-label"), " ", text(self._program, "program-name"), " [options]\n"),
            Text.assemble(text("Options:", "options-label"), "\n"),
        ]

        for definition in self._definitions:
            names = Text(" ").join(
                text(alias, "flag-name" if definition.flag else "option-name") for alias in definition.aliases
            )
            default = text(definition.default, "default") if definition.default else text("<none>", "no-default")
            marker = text("<required>", "required") if definition.required else text("<optional>", "optional")
            renders.append(Text.assemble(
                names, " ",
                "\tdesc:", text(definition.description, "description"),
                "\tdefault:", default,
                "\t", marker,
                "\n",
            ))

        self._console.print(Group(*renders), highlight=False)


__all__ = (
    "Parser",
    "HELP_ALIASES",
)
