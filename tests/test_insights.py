"""Tests for heuristic angle and prompt synthesis."""

import pytest

from signal_scout.models import PlatformId
from signal_scout.services.insights import detect_objection, extract_themes, synthesize

from conftest import make_result


@pytest.fixture
def corpus():
    return [
        make_result(
            PlatformId.REDDIT,
            "1",
            "Micro investing apps are too expensive",
            "Fees on micro investing platforms eat returns; the pricing feels predatory.",
        ),
        make_result(
            PlatformId.HACKERNEWS,
            "2",
            "Show HN: open source micro investing dashboard",
            "Built because every micro investing tool had expensive subscriptions.",
        ),
        make_result(PlatformId.REDDIT, "3", "Round-up savings for students", "Round-up savings changed my habits."),
    ]


def test_empty_results_still_yield_bounded_suggestions():
    angles, prompts = synthesize("ai tutors", [])

    assert 3 <= len(angles) <= 5
    assert 3 <= len(prompts) <= 5
    assert all("ai tutors" in angle for angle in angles)


def test_empty_results_are_deterministic():
    assert synthesize("ai tutors", []) == synthesize("ai tutors", [])


def test_suggestions_are_unique_and_bounded(corpus):
    angles, prompts = synthesize("gen z fintech", corpus, [PlatformId.REDDIT, PlatformId.HACKERNEWS])

    for items in (angles, prompts):
        assert 3 <= len(items) <= 5
        assert len(set(items)) == len(items)


def test_themes_prefer_recurring_phrases(corpus):
    themes = extract_themes("gen z fintech", corpus)

    assert themes == ["micro investing", "expensive"]
    # repeated within a single post only
    assert "round-up savings" not in themes


def test_themes_exclude_query_words(corpus):
    themes = extract_themes("micro investing", corpus)
    assert all("micro" not in theme and "investing" not in theme for theme in themes)


def test_recurring_objection_is_detected(corpus):
    assert detect_objection(corpus) == "pricing"


def test_single_mention_is_not_an_objection():
    results = [make_result(PlatformId.DEVTO, "1", "Is it expensive?")]
    assert detect_objection(results) is None


def test_quiet_platform_becomes_a_prompt(corpus):
    _, prompts = synthesize("gen z fintech", corpus, [PlatformId.REDDIT, PlatformId.DEVTO])

    assert any("Dev.to" in prompt for prompt in prompts)
    assert not any("Why is Reddit quiet" in prompt for prompt in prompts)


def test_angles_reference_detected_theme(corpus):
    angles, _ = synthesize("gen z fintech", corpus)
    assert any("micro investing" in angle for angle in angles)
