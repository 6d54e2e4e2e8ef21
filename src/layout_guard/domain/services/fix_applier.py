"""Applies non-overlapping fixes to a text in one pass."""

from collections.abc import Iterable

from layout_guard.domain.entities import Fix, FixOutcome, Violation


class FixApplier:
    """
    Sorts fixes by range start and applies every fix that does not overlap
    an earlier one. Skipped fixes are left for the next lint/fix pass.
    """

    @staticmethod
    def select(fixes: Iterable[Fix]) -> tuple[list[Fix], int]:
        """Return the non-overlapping subset (in order) and how many were dropped."""
        ordered = sorted(fixes, key=lambda f: (f.range.start, f.range.end))
        selected: list[Fix] = []
        skipped = 0
        for fix in ordered:
            if selected and (
                fix.range.overlaps(selected[-1].range)
                or fix.range.start < selected[-1].range.end
            ):
                skipped += 1
                continue
            selected.append(fix)
        return selected, skipped

    @staticmethod
    def apply(text: str, fixes: Iterable[Fix]) -> FixOutcome:
        selected, skipped = FixApplier.select(fixes)
        result = text
        for fix in reversed(selected):
            result = result[: fix.range.start] + fix.text + result[fix.range.end:]
        return FixOutcome(text=result, applied=len(selected), skipped=skipped)

    @staticmethod
    def apply_violations(text: str, violations: Iterable[Violation]) -> FixOutcome:
        return FixApplier.apply(text, [v.fix for v in violations if v.fix is not None])
