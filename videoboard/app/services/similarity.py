"""
Keyword-overlap search for likely duplicate suggestions.

Advisory only: paraphrased titles are missed and short shared words can
produce false hits. Submission never depends on the result.
"""

import logging
import re
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from videoboard.app.core.config import settings
from videoboard.app.models.suggestion import Suggestion
from videoboard.app.services.lifecycle import VISIBLE_STATUSES, list_suggestions

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "how", "what", "why", "when", "where", "who", "which", "this",
    "that", "these", "those", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "can", "your", "you", "use", "using", "make", "get",
    "into",
})

MIN_TOKEN_LENGTH = 3
EXACT_MATCH_SCORE = 10
PARTIAL_MATCH_SCORE = 3

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def tokenize(text: str, query: bool = True) -> list[str]:
    """
    Split text into lowercase alphanumeric tokens.

    Query tokens additionally drop short words and stop words.
    """
    words = [w for w in _NON_WORD.sub("", text.lower()).split() if w]
    if not query:
        return words
    return [w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS]


def score_title(query_tokens: Sequence[str], title: str) -> int:
    """Score a title against query tokens: 10 per exact hit, 3 per partial hit."""
    title_tokens = tokenize(title, query=False)
    title_set = set(title_tokens)

    score = 0
    for token in query_tokens:
        if token in title_set:
            score += EXACT_MATCH_SCORE
        elif any(token in word or word in token for word in title_tokens):
            score += PARTIAL_MATCH_SCORE
    return score


def rank_similar(
    title: str,
    candidates: Sequence[Suggestion],
    limit: int | None = None,
    min_score: int | None = None,
) -> list[Suggestion]:
    """Return candidates scoring at least ``min_score``, best first."""
    limit = settings.similarity_max_results if limit is None else limit
    min_score = settings.similarity_min_score if min_score is None else min_score

    query_tokens = tokenize(title)
    if not query_tokens:
        return []

    scored = [(score_title(query_tokens, s.title), s) for s in candidates]
    matches = [pair for pair in scored if pair[0] >= min_score]
    # sorted() is stable, so ties keep the candidate order
    matches = sorted(matches, key=lambda pair: pair[0], reverse=True)
    return [s for _, s in matches[:limit]]


async def find_similar(db: AsyncSession, title: str) -> list[Suggestion]:
    """
    Find visible suggestions whose titles overlap with ``title``.

    Returns an empty list without querying when the title has no usable keywords.
    """
    if not tokenize(title):
        return []

    candidates = await list_suggestions(db, statuses=VISIBLE_STATUSES)
    matches = rank_similar(title, candidates)

    logger.debug(f"[SIMILAR] {len(matches)} match(es) among {len(candidates)} for {title!r}")
    return matches
