"""Keyword classifier: ordering, urgency mapping, totality (no LLM)."""
import pytest

from pawsbot.classifier import (
    CONFIDENCE_BY_CATEGORY,
    Category,
    Urgency,
    classify,
    mentions_emergency,
)


@pytest.mark.parametrize(
    "text, category, urgency",
    [
        ("My dog is bleeding from his paw", Category.EMERGENCY, Urgency.CRITICAL),
        ("URGENT my cat swallowed something", Category.EMERGENCY, Urgency.CRITICAL),
        ("I think my puppy was poisoned", Category.EMERGENCY, Urgency.CRITICAL),
        ("My dog ate rat poison", Category.EMERGENCY, Urgency.CRITICAL),
        ("my cat swallowed some poison", Category.EMERGENCY, Urgency.CRITICAL),
        ("My dog is vomiting", Category.HEALTH, Urgency.HIGH),
        ("She has a fever and seems lethargic", Category.HEALTH, Urgency.HIGH),
        ("my dog keeps coughing", Category.HEALTH, Urgency.HIGH),
        ("There is blood in his stool", Category.HEALTH, Urgency.HIGH),
        ("My puppy keeps biting", Category.BEHAVIOR, Urgency.MEDIUM),
        ("Crate training tips?", Category.BEHAVIOR, Urgency.MEDIUM),
        ("How much food should my kitten get", Category.NUTRITION, Urgency.LOW),
        ("Is a raw diet good for dogs", Category.NUTRITION, Urgency.LOW),
        ("What is a good name for a hamster", Category.GENERAL, Urgency.LOW),
    ],
)
def test_classify_categories(text, category, urgency):
    result = classify(text)
    assert result.category is category
    assert result.urgency is urgency
    assert result.confidence == CONFIDENCE_BY_CATEGORY[category]


def test_emergency_beats_nutrition():
    result = classify("I'm worried about my dog's diet, this feels like an emergency")
    assert result.category is Category.EMERGENCY
    assert result.urgency is Urgency.CRITICAL


def test_health_beats_behavior_and_nutrition():
    assert classify("He stopped training and has no appetite because of the pain").category is Category.HEALTH


def test_case_insensitive():
    assert classify("SEIZURE").category is Category.EMERGENCY
    assert classify("Barking All Night").category is Category.BEHAVIOR


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_or_missing_input_is_general(text):
    result = classify(text)
    assert result.category is Category.GENERAL
    assert result.urgency is Urgency.LOW


def test_classify_is_idempotent():
    m = "my cat is choking on a toy"
    assert classify(m) == classify(m)


def test_specific_categories_outrank_general_confidence():
    general = CONFIDENCE_BY_CATEGORY[Category.GENERAL]
    for category, score in CONFIDENCE_BY_CATEGORY.items():
        if category is not Category.GENERAL:
            assert score > general


def test_mentions_emergency():
    assert mentions_emergency("This is an EMERGENCY")
    assert mentions_emergency("my dog can't breathe")
    assert not mentions_emergency("what should I name my parrot")
    assert not mentions_emergency(None)
