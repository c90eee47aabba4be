"""Chain builders for multi-step expression forms.

``case``, ``match`` and ``let`` take an open-ended list of operand pairs, so
they are assembled through small builder objects and only turned into an
``Expression`` by their terminal method. Builders are immutable: each step
returns a new builder, which makes a partially built chain safe to reuse.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from styleforge.expressions.errors import BindingsError
from styleforge.expressions.expression import Expression, forge_value


Pair: TypeAlias = tuple[object, object]
MatchKey: TypeAlias = str | int | float


_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)", re.ASCII)


def normalize_match_key(key: object) -> object:
    """Coerce numeric-looking string keys to numbers.

    Plain ASCII decimals with an optional sign become numbers: ``"2"`` and
    ``"2.0"`` become ``2``, ``".5"`` becomes ``0.5``. Any other string is
    kept as is, as are integers too long to convert. Non-string keys pass
    through unchanged.
    """
    if not isinstance(key, str):
        return key
    if _DECIMAL_PATTERN.fullmatch(key) is None:
        return key
    if "." not in key:
        try:
            return int(key)
        except ValueError:
            return key
    number = float(key)
    if not math.isfinite(number):
        return key
    if number.is_integer():
        return int(number)
    return number


@dataclass(frozen=True, slots=True)
class ConditionalBuilder:
    """Accumulates ``when``/``then`` pairs for a ``case`` expression."""

    conditions: tuple[Pair, ...] = ()

    def when(self, condition: object) -> ConditionalThenBuilder:
        """Start another condition pair."""
        return ConditionalThenBuilder(self, condition)

    def else_(self, value: object) -> Expression:
        """Terminate the chain with a default value."""
        return Expression([*self.build().forge(), forge_value(value)])

    def build(self) -> Expression:
        """Build the ``case`` expression without a default value."""
        forged: list[object] = ["case"]
        for condition, result in self.conditions:
            forged.append(forge_value(condition))
            forged.append(forge_value(result))
        return Expression(forged)

    def forge(self) -> list[object]:
        return self.build().forge()


@dataclass(frozen=True, slots=True)
class ConditionalThenBuilder:
    """Holds a pending condition until its result is supplied."""

    builder: ConditionalBuilder
    condition: object

    def then(self, value: object) -> ConditionalBuilder:
        """Attach the result for the pending condition."""
        return ConditionalBuilder((*self.builder.conditions, (self.condition, value)))


@dataclass(frozen=True, slots=True)
class MatchBuilder:
    """Accumulates keyed branches for a ``match`` expression."""

    subject: object
    conditions: tuple[Pair, ...] = ()

    def branch(self, key: MatchKey, value: object) -> MatchBuilder:
        """Add one branch."""
        return MatchBuilder(self.subject, (*self.conditions, (normalize_match_key(key), value)))

    def branches(self, branches: Mapping[object, object]) -> MatchFallbackBuilder:
        """Add all branches of a mapping in its iteration order."""
        added = tuple((normalize_match_key(key), value) for key, value in branches.items())
        return MatchFallbackBuilder(MatchBuilder(self.subject, (*self.conditions, *added)))

    def fallback(self, value: object) -> Expression:
        """Terminate the chain with the value used when no branch matches."""
        return Expression([*self.build().forge(), forge_value(value)])

    def build(self) -> Expression:
        """Build the ``match`` expression without a fallback."""
        forged: list[object] = ["match", forge_value(self.subject)]
        for key, result in self.conditions:
            forged.append(key)
            forged.append(forge_value(result))
        return Expression(forged)

    def forge(self) -> list[object]:
        return self.build().forge()


@dataclass(frozen=True, slots=True)
class MatchFallbackBuilder:
    """Final step of ``match(...).branches(...)``, only accepts the fallback."""

    builder: MatchBuilder

    def fallback(self, value: object) -> Expression:
        return self.builder.fallback(value)


@dataclass(frozen=True, slots=True)
class VarBindings:
    """Additional bindings returned from a functional ``let`` callback.

    Create instances through ``var(mapping)`` or ``bind_var(mapping)``.
    """

    bindings: Mapping[str, object]


LetCallback: TypeAlias = Callable[[Mapping[str, object]], VarBindings]


def _binding_pairs(bindings: Mapping[str, object]) -> list[object]:
    forged: list[object] = []
    for name, value in bindings.items():
        forged.append(name)
        forged.append(forge_value(value))
    return forged


@dataclass(frozen=True, slots=True)
class LetBuilder:
    """Holds ``let`` bindings until the body expression is supplied."""

    bindings: Mapping[str, object]

    def in_(self, body: object) -> Expression:
        """Terminate the chain with the body evaluated in the binding scope."""
        return Expression(["let", *_binding_pairs(self.bindings), forge_value(body)])

    def forge_with(self, callback: LetCallback) -> Expression:
        """Forge the functional form: extra bindings computed by ``callback``.

        The body is a reference to the last additional binding, or to the
        last initial binding when the callback added none.
        """
        result = callback(MappingProxyType(dict(self.bindings)))
        if not isinstance(result, VarBindings):
            raise BindingsError(
                f"expected bindings wrapper from let callback, got {type(result).__name__}"
            )
        additional = result.bindings
        names = list(additional) or list(self.bindings)
        result_name = names[-1] if names else None
        return Expression(
            [
                "let",
                *_binding_pairs(self.bindings),
                *_binding_pairs(additional),
                ["var", result_name],
            ]
        )
