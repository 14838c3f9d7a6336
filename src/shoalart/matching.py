from dataclasses import dataclass

import numpy as np

from shoalart.features import SIGNATURE_LENGTH, dct_4x8_signature, dct_8x8_signature


@dataclass(frozen=True)
class Match:
    char: str
    full_width: bool
    distance: float


class CandidateSet:
    """Glyphs of one display width, with their signatures stacked for a linear scan."""

    def __init__(self, entries, full_width: bool = False):
        entries = list(entries)
        self.full_width = full_width
        self.chars = [char for char, _ in entries]
        self.signatures = np.array([sig for _, sig in entries], dtype=np.float64).reshape(-1, SIGNATURE_LENGTH)

    def __len__(self) -> int:
        return len(self.chars)

    def nearest(self, signature) -> tuple[str, float]:
        """Return (char, squared distance) of the closest candidate; ties go to the earliest."""
        if not self.chars:
            raise ValueError("Empty candidate set")
        diff = self.signatures - np.asarray(signature, dtype=np.float64)
        distances = np.einsum("ij,ij->i", diff, diff)
        idx = int(np.argmin(distances))
        return self.chars[idx], float(distances[idx])


def best_match(block: np.ndarray, half: CandidateSet, full: CandidateSet, wider: bool) -> Match:
    """Pick the best glyph for a normalized block across both candidate sets.

    Full-width glyphs are only considered when ``wider`` is set (a whole 8x8
    window is available). Full-width candidates are scored first, so they win
    exact ties.
    """
    best = None
    if wider and len(full):
        char, dist = full.nearest(dct_8x8_signature(block))
        best = Match(char, True, dist)
    if len(half):
        char, dist = half.nearest(dct_4x8_signature(block))
        if best is None or dist < best.distance:
            best = Match(char, False, dist)
    if best is None:
        raise ValueError("No candidates to match against")
    return best
