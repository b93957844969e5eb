"""Heuristic research angles and follow-up prompts derived from ranked results."""

import re
from collections import Counter
from typing import Iterable, Sequence

from signal_scout.models import PlatformId, Result
from signal_scout.platforms.registry import platform_label

MAX_SUGGESTIONS = 5
THEME_SAMPLE_SIZE = 12
MIN_THEME_FREQUENCY = 2
MIN_OBJECTION_MENTIONS = 2

_TOKEN_RE = re.compile(r"[a-z0-9][a-z0-9+#'-]*[a-z0-9+#]|[a-z0-9]")

STOPWORDS = frozenset(
    """
    a about above after again against all also am an and any are as at be because been before
    being below between both but by can could did do does doing down during each few for from
    further get got had has have having he her here hers him his how i if in into is it its just
    like me more most my no nor not now of off on once only or other our out over own same she
    should so some such than that the their them then there these they this those through to too
    under until up very via vs was we were what when where which while who whom why will with
    would you your yours new one two using use used make way ways thing things really much many
    show ask tell via don't can't i'm it's you're here's what's how's year years day days
    """.split()
)

# Ordered by preference when mention counts tie
OBJECTION_TERMS: tuple[tuple[str, str], ...] = (
    ("pricing", r"\b(pric(e|es|ing|ey)|expensive|cost(s|ly)?)\b"),
    ("complexity", r"\b(complex(ity)?|complicated|confusing|hard to)\b"),
    ("privacy", r"\b(privacy|tracking|surveillance)\b"),
    ("trust", r"\b(trust|scam(s|my)?|hype|overhyped)\b"),
    ("reliability", r"\b(bug(s|gy)?|broken|unreliable|outage(s)?|slow)\b"),
    ("frustration", r"\b(frustrat\w*|annoy\w*|hate|struggl\w*)\b"),
)

ANGLE_FRAMINGS: tuple[str, ...] = (
    "Underserved segment: who needs {query} but is ignored by current solutions?",
    "Pricing objection: what would make {query} an easy yes for budget-conscious buyers?",
    "Switching trigger: what pushes people to abandon their current approach to {query}?",
    "Community-led distribution: where do {query} enthusiasts already gather and share wins?",
    "Contrarian take: what does the crowd get wrong about {query}?",
)

PROMPT_FALLBACKS: tuple[str, ...] = (
    "Which specific sub-niche of {query} shows the strongest engagement right now?",
    "What questions about {query} keep getting asked without a good answer?",
    "Who would pay to solve the biggest {query} pain point this month, and why?",
)


def _tokens(text: str) -> list[str]:
    return _TOKEN_RE.findall(text.lower())


def _content_tokens(text: str, excluded: frozenset[str]) -> list[str]:
    return [
        t for t in _tokens(text)
        if len(t) > 2 and t not in STOPWORDS and t not in excluded and not t.isdigit()
    ]


def _result_text(result: Result) -> str:
    return f"{result.title} {result.excerpt}"


def extract_themes(query: str, results: Sequence[Result], limit: int = 3) -> list[str]:
    """
    Find recurring phrases in the top results.

    Counts each phrase once per result (document frequency). Two-word
    phrases are preferred over single words; ties break alphabetically.
    """
    excluded = frozenset(_tokens(query))
    bigram_df: Counter[str] = Counter()
    unigram_df: Counter[str] = Counter()

    for result in results[:THEME_SAMPLE_SIZE]:
        tokens = _content_tokens(_result_text(result), excluded)
        unigram_df.update(set(tokens))
        bigram_df.update({f"{a} {b}" for a, b in zip(tokens, tokens[1:]) if a != b})

    def frequent(counter: Counter[str]) -> list[str]:
        ranked = sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
        return [phrase for phrase, df in ranked if df >= MIN_THEME_FREQUENCY]

    themes: list[str] = []
    for phrase in frequent(bigram_df):
        if len(themes) >= limit:
            break
        themes.append(phrase)
    covered = {word for phrase in themes for word in phrase.split()}
    for word in frequent(unigram_df):
        if len(themes) >= limit:
            break
        if word not in covered:
            themes.append(word)
    return themes


def detect_objection(results: Sequence[Result]) -> str | None:
    """Return the most-mentioned objection category, if it recurs."""
    corpus = " ".join(_result_text(r) for r in results[:THEME_SAMPLE_SIZE]).lower()
    best: tuple[int, str] | None = None
    for name, pattern in OBJECTION_TERMS:
        mentions = len(re.findall(pattern, corpus))
        if mentions >= MIN_OBJECTION_MENTIONS and (best is None or mentions > best[0]):
            best = (mentions, name)
    return best[1] if best else None


def _bounded(candidates: Iterable[str], fallbacks: Iterable[str]) -> list[str]:
    """De-duplicate while preserving order, top up from fallbacks, cap the length."""
    out: list[str] = []
    for item in list(candidates) + list(fallbacks):
        if item and item not in out:
            out.append(item)
        if len(out) >= MAX_SUGGESTIONS:
            break
    return out


def recommend_angles(query: str, results: Sequence[Result], themes: Sequence[str]) -> list[str]:
    angles = [
        f"Zoom in on \"{theme}\": map who is discussing it alongside {query} and why it keeps surfacing"
        for theme in themes[:2]
    ]
    if results:
        top = results[0]
        angles.append(
            f"Reverse-engineer the top signal on {platform_label(top.platform)}: "
            f"\"{top.title}\" (score {top.score})"
        )
    framings = [framing.format(query=query) for framing in ANGLE_FRAMINGS]
    return _bounded(angles, framings)


def suggest_prompts(
    query: str,
    results: Sequence[Result],
    themes: Sequence[str],
    platforms: Sequence[PlatformId] = (),
) -> list[str]:
    prompts: list[str] = []

    represented = {r.platform for r in results}
    for platform in platforms:
        if platform not in represented:
            prompts.append(
                f"Why is {platform_label(platform)} quiet on {query}? "
                "Try a narrower or adjacent keyword there."
            )

    objection = detect_objection(results)
    if objection:
        prompts.append(
            f"What is behind the recurring {objection} concerns in {query} discussions, "
            "and who is already addressing them?"
        )

    if themes:
        prompts.append(f"How are people combining {query} with {themes[0]}, and what is still missing?")

    if results:
        top = results[0]
        prompts.append(f"What made \"{top.title}\" resonate, and can that hook be reused for {query}?")

    fallbacks = [prompt.format(query=query) for prompt in PROMPT_FALLBACKS]
    return _bounded(prompts, fallbacks)


def synthesize(
    query: str,
    ranked_results: Sequence[Result],
    platforms: Sequence[PlatformId] = (),
) -> tuple[list[str], list[str]]:
    """
    Derive recommended angles and follow-up prompts.

    Pure and deterministic for the same inputs. Each list holds between
    3 and 5 items; with no results both fall back to query-only framings.

    Args:
        query: The validated research topic
        ranked_results: Results in final ranked order
        platforms: Platforms that were attempted, used to spot coverage gaps

    Returns:
        Tuple of (recommended_angles, next_prompts)
    """
    themes = extract_themes(query, ranked_results)
    angles = recommend_angles(query, ranked_results, themes)
    prompts = suggest_prompts(query, ranked_results, themes, platforms)
    return angles, prompts
