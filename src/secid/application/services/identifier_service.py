# src/secid/application/services/identifier_service.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Identifier facade service.

Purpose:
    Single coordination surface over the identifier registry: detection,
    validity checks, parsing under an ambiguity policy, strict parsing,
    extraction from free text, and per-family explanations.

Responsibilities:
    * Resolve caller-supplied family keys eagerly, so unknown keys fail before
      any matching work.
    * Apply the ``first`` / ``raise`` / ``all`` ambiguity policies.
    * Translate "nothing matched" into the error taxonomy for strict parsing.

Layer:
    application/services

Notes:
    The service holds no per-call state; it is safe to share one instance
    across threads once the registry is fully populated.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from secid.application.schemas.dto.identifiers import ExplainCandidateDTO, ExplainResultDTO
from secid.domain.entities.base import SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import OnAmbiguous
from secid.domain.exceptions.identifiers import (
    AmbiguousMatchError,
    InvalidFormatError,
    error_class_for,
)
from secid.domain.services.identifier_registry import (
    FamilyClass,
    IdentifierRegistry,
    TypeKey,
    build_default_registry,
)
from secid.domain.value_objects.match import Match
from secid.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

TypesArg = Iterable[TypeKey] | TypeKey | None
ParseResult = SecurityIdentifier | list[SecurityIdentifier] | None


def _trimmed(raw: object) -> str:
    return "" if raw is None else str(raw).strip()


class IdentifierService:
    """Facade over detection, parsing, scanning and explanation.

    Args:
        registry: Family registry; defaults to the thirteen built-in families.
        default_on_ambiguous: Policy used when ``parse`` is called without one.
    """

    def __init__(
        self,
        registry: IdentifierRegistry | None = None,
        *,
        default_on_ambiguous: OnAmbiguous | str = OnAmbiguous.FIRST,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._default_on_ambiguous = OnAmbiguous.coerce(default_on_ambiguous)

    @property
    def registry(self) -> IdentifierRegistry:
        """Registry this service coordinates."""
        return self._registry

    # ------------------------------------------------------------------ #
    # Lookup                                                             #
    # ------------------------------------------------------------------ #

    def get_type(self, key: TypeKey) -> FamilyClass:
        """Return the family class registered under ``key``.

        Raises:
            UnknownIdentifierTypeError: If ``key`` is unknown.
        """
        return self._registry.get(key)

    def identifiers(self) -> tuple[FamilyClass, ...]:
        """Registered families in registration order."""
        return self._registry.families

    # ------------------------------------------------------------------ #
    # Detection                                                          #
    # ------------------------------------------------------------------ #

    def detect(self, raw: object, types: TypesArg = None) -> tuple[IdentifierType, ...]:
        """Return the families ``raw`` validates under, most specific first."""
        families = self._resolve(types)
        return self._registry.detector().detect(raw, families)

    def is_valid(self, raw: object, types: TypesArg = None) -> bool:
        """True if ``raw`` validates under any (allowed) family."""
        return bool(self.detect(raw, types))

    # ------------------------------------------------------------------ #
    # Parsing                                                            #
    # ------------------------------------------------------------------ #

    def parse(
        self,
        raw: object,
        types: TypesArg = None,
        *,
        on_ambiguous: OnAmbiguous | str | None = None,
    ) -> ParseResult:
        """Parse ``raw`` into an identifier instance under an ambiguity policy.

        Args:
            raw: Candidate string.
            types: Optional family key or keys to restrict matching to.
            on_ambiguous: ``first`` (most specific match or ``None``),
                ``raise`` (fail when several families match) or ``all`` (list
                of every match). Defaults to the service's configured policy.

        Returns:
            The matched instance, ``None``, or a list under ``all``.

        Raises:
            UnknownIdentifierTypeError: If ``types`` names an unknown family.
            AmbiguousMatchError: Under ``raise`` when several families match.
            ValueError: If ``on_ambiguous`` names no policy.
        """
        policy = self._policy(on_ambiguous)
        families = self._resolve(types)
        candidates = self._registry.detector().candidates(raw, families)

        if policy is OnAmbiguous.ALL:
            return candidates
        if not candidates:
            logger.debug(
                "secid.parse.not_found",
                extra={"extra": {"input": _trimmed(raw), "types": self._type_names(families)}},
            )
            return None
        if policy is OnAmbiguous.RAISE and len(candidates) > 1:
            names = [c.type.value for c in candidates]
            logger.debug(
                "secid.parse.ambiguous",
                extra={"extra": {"input": _trimmed(raw), "candidates": names}},
            )
            raise AmbiguousMatchError(
                f'Ambiguous identifier "{_trimmed(raw)}" matches multiple types: '
                f"{', '.join(names)}",
                candidates=names,
                details={"input": _trimmed(raw)},
            )
        return candidates[0]

    def parse_strict(
        self,
        raw: object,
        types: TypesArg = None,
        *,
        on_ambiguous: OnAmbiguous | str | None = None,
    ) -> SecurityIdentifier | list[SecurityIdentifier]:
        """Like :meth:`parse` but raise when nothing matches.

        With a single restricted family the error kind and message come from
        that family's first validation error; otherwise an
        :class:`InvalidFormatError` names the input and the families tried.

        Raises:
            InvalidFormatError: No family matched.
            InvalidCheckDigitError: The single restricted family reported a
                check-digit failure.
            InvalidStructureError: The single restricted family reported a
                structural failure.
            AmbiguousMatchError: Under ``raise`` when several families match.
        """
        result = self.parse(raw, types, on_ambiguous=on_ambiguous)
        if result is not None and result != []:
            return result

        families = self._resolve(types)
        text = _trimmed(raw)
        if families is not None and len(families) == 1:
            instance = families[0](raw)
            first = instance.errors.first
            if first is not None:
                raise error_class_for(first.code)(
                    f'{families[0].metadata.short_name} "{text}" is invalid: {first.message}',
                    details={"input": text, "types": self._type_names(families)},
                )
        if families is None:
            message = f'No matching identifier type found for "{text}"'
        else:
            message = (
                f'No matching identifier type found for "{text}" '
                f"(types: {', '.join(self._type_names(families))})"
            )
        raise InvalidFormatError(
            message, details={"input": text, "types": self._type_names(families)}
        )

    # ------------------------------------------------------------------ #
    # Text scanning                                                      #
    # ------------------------------------------------------------------ #

    def scan(self, text: str | None, types: TypesArg = None) -> Iterator[Match]:
        """Lazily yield identifier matches found in ``text``.

        Raises:
            UnknownIdentifierTypeError: Immediately, if ``types`` is invalid.
        """
        families = self._resolve(types)
        return self._registry.scanner().scan(text, families)

    def extract(self, text: str | None, types: TypesArg = None) -> list[Match]:
        """Return every identifier match found in ``text``."""
        return list(self.scan(text, types))

    # ------------------------------------------------------------------ #
    # Diagnostics                                                        #
    # ------------------------------------------------------------------ #

    def explain(self, raw: object, types: TypesArg = None) -> ExplainResultDTO:
        """Validate ``raw`` against every (allowed) family and report each outcome."""
        families = self._resolve(types)
        text = _trimmed(raw)
        return ExplainResultDTO(
            input=text,
            candidates=[
                ExplainCandidateDTO.from_identifier(family(text))
                for family in (self._registry.families if families is None else families)
            ],
        )

    # ------------------------------------------------------------------ #
    # Internals                                                          #
    # ------------------------------------------------------------------ #

    def _resolve(self, types: TypesArg) -> tuple[FamilyClass, ...] | None:
        if types is None:
            return None
        return self._registry.resolve(types)

    def _policy(self, on_ambiguous: OnAmbiguous | str | None) -> OnAmbiguous:
        if on_ambiguous is None:
            return self._default_on_ambiguous
        return OnAmbiguous.coerce(on_ambiguous)

    @staticmethod
    def _type_names(families: Iterable[FamilyClass] | None) -> list[str]:
        if families is None:
            return []
        return [f.metadata.type.value for f in families]
