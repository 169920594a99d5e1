"""Version range model."""

from __future__ import annotations

from dataclasses import dataclass

from ..versions import SemverError, Version, coerce

UNDEFINED_DISPLAY = "Undefined Range"


class InvalidRangeError(ValueError):
    """Raised when range bounds cannot describe a valid interval."""


class UndefinedRangeError(RuntimeError):
    """Raised when an operation is attempted on the undefined range."""


def _coerce_bound(value: Version | str | None, name: str) -> Version | None:
    if value is None:
        return None
    try:
        return coerce(value)
    except SemverError as exc:
        raise InvalidRangeError(f"Invalid {name} version: {exc}") from exc


@dataclass(frozen=True)
class VersionRange:
    """Immutable interval of semantic versions.

    Either bound may be None, meaning the range is open on that side. Each
    bound carries its own inclusivity flag. The defaults describe the common
    "inclusive minimum, exclusive maximum" convention.

    Raises InvalidRangeError when both bounds are None, when the minimum is
    greater than the maximum, or when equal bounds are not both inclusive.
    """

    minimum: Version | None
    maximum: Version | None = None
    minimum_inclusive: bool = True
    maximum_inclusive: bool = False

    def __post_init__(self) -> None:
        minimum = _coerce_bound(self.minimum, "minimum")
        maximum = _coerce_bound(self.maximum, "maximum")
        if minimum is None and maximum is None:
            raise InvalidRangeError("Minimum and maximum versions cannot both be None")
        if minimum is not None and maximum is not None:
            if minimum > maximum:
                raise InvalidRangeError(
                    f"Minimum version {minimum} cannot be greater than maximum version {maximum}"
                )
            if minimum == maximum and not (self.minimum_inclusive and self.maximum_inclusive):
                raise InvalidRangeError(
                    f"For the same minimum and maximum version ({minimum}), both must be inclusive"
                )
        object.__setattr__(self, "minimum", minimum)
        object.__setattr__(self, "maximum", maximum)

    @classmethod
    def exact(cls, version: Version | str) -> VersionRange:
        """Return a range matching exactly ``version``."""
        if version is None:
            raise InvalidRangeError("Exact version cannot be None")
        return cls(version, version, True, True)

    @classmethod
    def all_inclusive(cls, minimum: Version | str, maximum: Version | str) -> VersionRange:
        if minimum is None or maximum is None:
            raise InvalidRangeError("Both minimum and maximum versions are required")
        return cls(minimum, maximum, True, True)

    @classmethod
    def inclusive_min_exclusive_max(
        cls, minimum: Version | str, maximum: Version | str
    ) -> VersionRange:
        """Return ``[minimum, maximum)``.

        Equal bounds are rejected since the range could never be satisfied;
        use ``exact`` for a single version.
        """
        if minimum is None or maximum is None:
            raise InvalidRangeError("Both minimum and maximum versions are required")
        if _coerce_bound(minimum, "minimum") == _coerce_bound(maximum, "maximum"):
            raise InvalidRangeError(
                "For the same minimum and maximum versions, both must be inclusive"
            )
        return cls(minimum, maximum, True, False)

    @classmethod
    def undefined(cls) -> VersionRange:
        """Return the range with no bounds at all.

        This is the zero value of the type. It never comes out of the
        constructor, and every membership query on it raises.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "minimum", None)
        object.__setattr__(instance, "maximum", None)
        object.__setattr__(instance, "minimum_inclusive", True)
        object.__setattr__(instance, "maximum_inclusive", False)
        return instance

    def is_undefined(self) -> bool:
        return self.minimum is None and self.maximum is None

    def is_exact(self) -> bool:
        return self.minimum is not None and self.minimum == self.maximum

    def contains(self, version: Version | str) -> bool:
        """Return True when ``version`` lies within this range.

        Raises:
            ValueError: If ``version`` is None or not a valid version string.
            UndefinedRangeError: If this is the undefined range.
        """
        if version is None:
            raise ValueError("Version to check cannot be None")
        if self.is_undefined():
            raise UndefinedRangeError(
                "This VersionRange instance is undefined. "
                "Use one of the provided constructors to create a valid instance."
            )
        v = coerce(version)

        satisfies_minimum = (
            self.minimum is None
            or (self.minimum_inclusive and v >= self.minimum)
            or v > self.minimum
        )
        satisfies_maximum = (
            self.maximum is None
            or (self.maximum_inclusive and v <= self.maximum)
            or v < self.maximum
        )
        return satisfies_minimum and satisfies_maximum

    def __contains__(self, version: object) -> bool:
        return self.contains(version)  # type: ignore[arg-type]

    def __str__(self) -> str:
        if self.is_undefined():
            return UNDEFINED_DISPLAY

        parts: list[str] = []
        if self.minimum is not None:
            parts += [str(self.minimum), "<=" if self.minimum_inclusive else "<"]
        parts.append("v")
        if self.maximum is not None:
            parts += ["<=" if self.maximum_inclusive else "<", str(self.maximum)]
        return " ".join(parts)

    def to_interval_notation(self) -> str:
        """Render in bracket interval notation, e.g. ``[1.0.0,2.0.0)``."""
        if self.is_undefined():
            raise UndefinedRangeError("The undefined range has no interval notation")
        if self.is_exact():
            return f"[{self.minimum}]"

        opening = "[" if self.minimum_inclusive else "("
        closing = "]" if self.maximum_inclusive else ")"
        lower = "" if self.minimum is None else str(self.minimum)
        upper = "" if self.maximum is None else str(self.maximum)
        return f"{opening}{lower},{upper}{closing}"

    def to_dict(self) -> dict[str, object]:
        return {
            "minimum": None if self.minimum is None else str(self.minimum),
            "maximum": None if self.maximum is None else str(self.maximum),
            "minimumInclusive": self.minimum_inclusive,
            "maximumInclusive": self.maximum_inclusive,
            "display": str(self),
        }


UNDEFINED = VersionRange.undefined()


def in_range(version: Version | str, version_range: VersionRange) -> bool:
    """Check ``version`` against ``version_range``.

    Raises:
        ValueError: If ``version`` is None.
        UndefinedRangeError: If ``version_range`` is None or undefined.
    """
    if version is None:
        raise ValueError("Version to check cannot be None")
    if version_range is None or version_range.is_undefined():
        raise UndefinedRangeError("Cannot check a version against an undefined range")
    return version_range.contains(version)
