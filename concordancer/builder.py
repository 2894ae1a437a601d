"""Single-pass concordance construction.

Responsibilities:
- Consume whitespace-delimited tokens strictly in order.
- Accumulate per-word count, first position and gap sum in O(1) per token.
- Finalize average distances once the stream is exhausted.

Only kept words consume a position slot: tokens that normalize to an empty
string and ignored words leave the running index unchanged.

Average distance keeps a deliberate asymmetry: words seen more than twice get
`gap_sum // (count - 1)`, words seen once or twice keep the raw gap sum.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .models.datatypes import BuildStats, Concordance, WordStat
from .text.normalizer import normalize_word, normalize_words


@dataclass(slots=True)
class _WordTally:
    """Mutable accumulator for one word during a build pass."""

    word: str
    count: int
    first_position: int
    last_position: int
    distance_sum: int = 0

    def finalize(self) -> WordStat:
        """Freeze the tally into a `WordStat` with its average distance."""

        avg_distance = self.distance_sum
        if self.count > 2:
            avg_distance //= self.count - 1
        return WordStat(
            word=self.word,
            count=self.count,
            first_position=self.first_position,
            avg_distance=avg_distance,
        )


class ConcordanceBuilder:
    """Build a concordance from a token sequence, skipping ignored words."""

    def __init__(
        self,
        ignore_words: Iterable[str] = (),
        normalizer: Callable[[str], str] = normalize_word,
    ) -> None:
        """Initialize builder with an ignore list and a token normalizer."""

        self._normalizer = normalizer
        self._ignore_words = normalize_words(ignore_words, normalizer)
        self.stats = BuildStats()

    @property
    def ignore_words(self) -> frozenset[str]:
        """Return the normalized ignore-set used for membership tests."""

        return self._ignore_words

    def build(self, tokens: Iterable[str]) -> Concordance:
        """Consume `tokens` to exhaustion and return the finalized concordance.

        Records are emitted in first-appearance order. `stats` is replaced with
        the bookkeeping of this pass.
        """

        tallies: dict[str, _WordTally] = {}
        position = 0
        tokens_read = 0
        discarded = 0
        ignored = 0

        for token in tokens:
            tokens_read += 1
            word = self._normalizer(token)
            if not word:
                discarded += 1
                continue
            if word in self._ignore_words:
                ignored += 1
                continue

            tally = tallies.get(word)
            if tally is None:
                tallies[word] = _WordTally(
                    word=word,
                    count=1,
                    first_position=position,
                    last_position=position,
                )
            else:
                tally.count += 1
                tally.distance_sum += position - tally.last_position
                tally.last_position = position
            position += 1

        self.stats = BuildStats(
            tokens_read=tokens_read,
            tokens_kept=position,
            tokens_discarded=discarded,
            tokens_ignored=ignored,
            unique_words=len(tallies),
        )
        return [tally.finalize() for tally in tallies.values()]


def build_concordance(
    tokens: Iterable[str],
    ignore_words: Iterable[str] = (),
) -> Concordance:
    """Build a concordance from tokens with the default normalizer."""

    return ConcordanceBuilder(ignore_words=ignore_words).build(tokens)
