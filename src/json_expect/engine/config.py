"""AssertConfig and PropertyComparison for Verifier configuration.

AssertConfig is a frozen (immutable) dataclass holding the comparison
options.  PropertyComparison selects how expected property names are looked
up in the actual document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class PropertyComparison(StrEnum):
    """How expected property names are matched against actual property names.

    - CASE_SENSITIVE: Exact name match.
    - IGNORE_CASE:    Case-insensitive match (``str.lower``); more than one
                      matching actual property is reported as ambiguous.
    """

    CASE_SENSITIVE = auto()
    IGNORE_CASE = auto()


@dataclass(frozen=True, slots=True)
class AssertConfig:
    """Immutable configuration for a comparison run.

    Attributes:
        property_comparison: How property names are looked up.
        match_length: When True, an expected array and the actual array must
            have the same number of elements; a mismatch is reported once and
            no element is compared.  Default True.
        check_property_type: When True, an expected array must be compared
            against an actual JSON array; a mismatch is reported as a type
            error.  When False, a non-array actual counts as an empty array.
            Only the array branch is affected; literals always require a
            compatible type.  Default True.
    """

    property_comparison: PropertyComparison = PropertyComparison.CASE_SENSITIVE
    match_length: bool = True
    check_property_type: bool = True

    def __post_init__(self) -> None:
        try:
            comparison = PropertyComparison(self.property_comparison)
        except ValueError:
            msg = (
                "property_comparison must be one of "
                f"{[m.value for m in PropertyComparison]}, got {self.property_comparison!r}"
            )
            raise ValueError(msg) from None
        object.__setattr__(self, "property_comparison", comparison)
        if not isinstance(self.match_length, bool):
            msg = f"match_length must be a bool, got {self.match_length!r}"
            raise ValueError(msg)
        if not isinstance(self.check_property_type, bool):
            msg = f"check_property_type must be a bool, got {self.check_property_type!r}"
            raise ValueError(msg)
