"""In-memory career store.

Ranking mixes a keyword score with a character-hash pseudo embedding. The
embedding is only a cheap stand-in for a real one; callers must not rely on
the exact ordering it produces.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from career_advisor.context.records import ContextRecord
from career_advisor.context.seed import SEED_CAREERS

logger = logging.getLogger(__name__)

EMBEDDING_DIMS = 1536
VECTOR_WEIGHT = 0.7
KEYWORD_WEIGHT = 0.3
SEARCH_MODES = {"hybrid", "keyword"}


def hash_embedding(text: str, dims: int = EMBEDDING_DIMS) -> list[float]:
    vector = [0.0] * dims
    for i, ch in enumerate(text.lower()):
        vector[i % dims] += ord(ch) / 256

    magnitude = math.sqrt(sum(v * v for v in vector))
    if magnitude > 0:
        return [v / magnitude for v in vector]
    return vector


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    if not a or not b or len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    if norm == 0:
        return 0.0
    return dot / norm


def keyword_score(query: str, record: ContextRecord) -> float:
    q = query.strip().lower()
    if not q:
        return 0.0
    title = record.title.lower()
    description = record.description.lower()
    skills = " ".join(s.lower() for s in record.required_skills)
    transitions = " ".join(s.lower() for s in record.common_transitions)

    score = 0.0
    if q in title:
        score += 0.8
    if q in description:
        score += 0.4
    if q in skills:
        score += 0.3
    if q in transitions:
        score += 0.2

    for word in q.split():
        word = word.strip(".,!?;:\"'()")
        if len(word) > 3:
            if word in title:
                score += 0.2
            if word in skills:
                score += 0.1

    return min(score, 1.0)


def _record_text(record: ContextRecord) -> str:
    return f"{record.title} {record.description} {' '.join(record.required_skills)}"


class CareerStore:
    """Linear-scan search over a small set of career records."""

    def __init__(
        self,
        records: Iterable[ContextRecord],
        mode: str = "hybrid",
        limit: int = 3,
        min_score: float = 0.1,
    ) -> None:
        if mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode: {mode}")
        if limit < 1:
            raise ValueError("limit must be at least 1.")
        self._records = list(records)
        self._mode = mode
        self._limit = limit
        self._min_score = min_score
        # Record embeddings never change, so compute them once.
        self._embeddings: Optional[list[list[float]]] = None

    @classmethod
    def default(cls, mode: str = "hybrid") -> "CareerStore":
        return cls(SEED_CAREERS, mode=mode)

    @classmethod
    def from_json(cls, path: Union[str, Path], mode: str = "hybrid") -> "CareerStore":
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        raw = data.get("careers") if isinstance(data, dict) else data
        if not isinstance(raw, list):
            raise ValueError(f"{path}: expected a list of careers.")
        records = [ContextRecord.from_dict(item) for item in raw]
        logger.info("Loaded %d careers from %s", len(records), path)
        return cls(records, mode=mode)

    @property
    def records(self) -> list[ContextRecord]:
        return list(self._records)

    def _record_embeddings(self) -> list[list[float]]:
        if self._embeddings is None:
            self._embeddings = [hash_embedding(_record_text(r)) for r in self._records]
        return self._embeddings

    def search(self, query: str) -> list[ContextRecord]:
        query = (query or "").strip()
        if not query or not self._records:
            return []

        if self._mode == "keyword":
            scores = [keyword_score(query, r) for r in self._records]
        else:
            q_vec = hash_embedding(query)
            scores = [
                VECTOR_WEIGHT * cosine_similarity(q_vec, vec) + KEYWORD_WEIGHT * keyword_score(query, r)
                for r, vec in zip(self._records, self._record_embeddings())
            ]

        ranked = sorted(zip(scores, range(len(scores))), key=lambda p: (-p[0], p[1]))
        results = [
            self._records[i].with_score(round(score, 4))
            for score, i in ranked[: self._limit]
            if score > self._min_score
        ]
        logger.debug("Career search %r -> %s", query, [r.title for r in results])
        return results
