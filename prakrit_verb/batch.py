"""
Batch conjugation of verb roots read from a file, one root per line.

Every root is conjugated for each (tense/mood, voice, dialect) combination
configured on the processor. Blank lines and lines starting with '#' are
skipped. A line that cannot be conjugated is recorded as a LineError and
the batch carries on.

Usage:
    processor = BatchProcessor().with_all_tenses().with_all_dialects()
    report = processor.process_file(Path("roots.txt"))
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from prakrit_verb.conjugations import conjugate
from prakrit_verb.encoding import normalize_input
from prakrit_verb.errors import ConjugationError
from prakrit_verb.models import (
    BatchReport, ConjugationResult, Dialect, LineError, Mood, Tense, Voice,
)
from prakrit_verb.settings import COMMENT_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenseMood:
    """A tense paired with the mood to conjugate it in."""
    tense: Tense
    mood: Mood = Mood.INDICATIVE

    @property
    def label(self) -> str:
        if self.mood == Mood.IMPERATIVE:
            return "imperative"
        return self.tense.value


ALL_TENSE_MOODS: Tuple[TenseMood, ...] = (
    TenseMood(Tense.PRESENT, Mood.INDICATIVE),
    TenseMood(Tense.PAST, Mood.INDICATIVE),
    TenseMood(Tense.FUTURE, Mood.INDICATIVE),
    TenseMood(Tense.PRESENT, Mood.IMPERATIVE),
)

ALL_VOICES: Tuple[Voice, ...] = (Voice.ACTIVE, Voice.PASSIVE)

ALL_DIALECTS: Tuple[Dialect, ...] = (Dialect.MAHARASTRI, Dialect.SHAURASENI, Dialect.MAGADHI)

# (line number, root) pairs to conjugate
_Entry = Tuple[int, str]


class BatchProcessor:
    """
    Conjugates many roots over a cartesian product of settings.

    Defaults to present indicative, active voice, Maharastri.

    Args:
        seed: Base seed. Each (line, combination) gets its own random
            stream derived from it, so results do not depend on ``workers``.
            None draws fresh randomness for every call.
        workers: Number of threads used to conjugate lines in parallel.
    """

    def __init__(
        self,
        tense_moods: Optional[Sequence[TenseMood]] = None,
        voices: Optional[Sequence[Voice]] = None,
        dialects: Optional[Sequence[Dialect]] = None,
        seed: Optional[int] = None,
        workers: int = 1,
    ):
        self.tense_moods: List[TenseMood] = [TenseMood(Tense.PRESENT, Mood.INDICATIVE)]
        self.voices: List[Voice] = [Voice.ACTIVE]
        self.dialects: List[Dialect] = [Dialect.MAHARASTRI]
        self.seed = seed
        self.workers = max(1, workers)

        self.with_tense_moods(tense_moods or [])
        self.with_voices(voices or [])
        self.with_dialects(dialects or [])

    # ------------------------------------------------------------------
    # Configuration (empty sequences keep the current setting)
    # ------------------------------------------------------------------

    def with_tense_moods(self, tense_moods: Sequence[TenseMood]) -> "BatchProcessor":
        if tense_moods:
            self.tense_moods = list(tense_moods)
        return self

    def with_voices(self, voices: Sequence[Voice]) -> "BatchProcessor":
        if voices:
            self.voices = [Voice(v) for v in voices]
        return self

    def with_dialects(self, dialects: Sequence[Dialect]) -> "BatchProcessor":
        if dialects:
            self.dialects = [Dialect(d) for d in dialects]
        return self

    def with_all_tenses(self) -> "BatchProcessor":
        """Present, past, future and imperative."""
        return self.with_tense_moods(ALL_TENSE_MOODS)

    def with_all_voices(self) -> "BatchProcessor":
        return self.with_voices(ALL_VOICES)

    def with_all_dialects(self) -> "BatchProcessor":
        return self.with_dialects(ALL_DIALECTS)

    def combinations(self) -> List[Tuple[TenseMood, Voice, Dialect]]:
        """All (tense/mood, voice, dialect) combinations, in output order."""
        return [
            (tense_mood, voice, dialect)
            for tense_mood in self.tense_moods
            for voice in self.voices
            for dialect in self.dialects
        ]

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------

    def _rng(self, line_number: int, index: int) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{line_number}:{index}")

    def conjugate_verb(self, verb_root: str, line_number: int = 0) -> List[ConjugationResult]:
        """
        Conjugate one root for every configured combination.

        Raises:
            ConjugationError: If the root cannot be conjugated.
        """
        results = []
        for index, (tense_mood, voice, dialect) in enumerate(self.combinations()):
            results.append(conjugate(
                verb_root,
                tense_mood.tense,
                tense_mood.mood,
                voice,
                dialect,
                rng=self._rng(line_number, index),
            ))
        return results

    def _process_entry(self, entry: _Entry) -> Union[List[ConjugationResult], LineError]:
        line_number, text = entry
        try:
            return self.conjugate_verb(normalize_input(text), line_number)
        except ConjugationError as e:
            logger.warning(f"Line {line_number}: {text!r}: {e}")
            return LineError(line_number=line_number, verb_root=text, error_message=str(e))

    def process_lines(self, lines: Iterable[str]) -> BatchReport:
        """Conjugate every root in ``lines`` (line numbers start at 1)."""
        entries: List[_Entry] = []
        for line_number, line in enumerate(lines, start=1):
            text = line.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue
            entries.append((line_number, text))

        logger.info(f"Conjugating {len(entries)} roots x {len(self.combinations())} "
                    f"combinations with {self.workers} worker(s)")

        if self.workers == 1 or len(entries) < 2:
            outcomes = [self._process_entry(entry) for entry in entries]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                outcomes = list(executor.map(self._process_entry, entries))

        report = BatchReport()
        for outcome in outcomes:
            if isinstance(outcome, LineError):
                report.errors.append(outcome)
            else:
                report.results.extend(outcome)

        logger.info(f"Batch finished: {len(report.results)} conjugations, "
                    f"{len(report.errors)} errors")
        return report

    def process_file(self, path: Union[str, Path]) -> BatchReport:
        """
        Conjugate every root in a UTF-8 text file.

        Raises:
            OSError: If the file cannot be read.
        """
        path = Path(path)
        logger.info(f"Reading roots from {path}")
        with path.open(encoding="utf-8") as f:
            return self.process_lines(f)
