"""Enumerations for fedreturn."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    HOH = "HEAD_OF_HOUSEHOLD"
    QW = "QUALIFYING_WIDOW"

    @classmethod
    def _missing_(cls, value):
        # Saved documents may carry lower-case values.
        if isinstance(value, str):
            upper = value.upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None

    @property
    def is_married(self) -> bool:
        """True for both married statuses (selects the married addend)."""
        return self in (FilingStatus.MFJ, FilingStatus.MFS)

    @property
    def is_joint(self) -> bool:
        """True only when spouse amounts count on this return."""
        return self is FilingStatus.MFJ
