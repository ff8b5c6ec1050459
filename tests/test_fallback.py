"""Static fallbacks: vet guidance everywhere, poison-control line on emergency text."""
import pytest

from pawsbot.fallback import (
    CALLER_EMERGENCY_FALLBACK,
    CALLER_GENERAL_FALLBACK,
    GENERAL_FALLBACK,
    HEALTH_FALLBACK,
    NUTRITION_FALLBACK,
    caller_fallback,
    fallback,
)
from pawsbot.prompts import EMERGENCY_RESPONSE, POISON_CONTROL


@pytest.mark.parametrize("category", ["emergency", "health", "behavior", "nutrition", "general"])
def test_every_block_mentions_a_vet(category):
    assert "vet" in fallback(category, "boom").lower()


def test_emergency_blocks_carry_poison_control():
    assert POISON_CONTROL in fallback("emergency")
    assert POISON_CONTROL in EMERGENCY_RESPONSE
    assert POISON_CONTROL in CALLER_EMERGENCY_FALLBACK


def test_toxic_food_warning_carries_poison_control():
    assert "toxic" in NUTRITION_FALLBACK
    assert POISON_CONTROL in fallback("nutrition", "x")


def test_health_fallback_says_call_your_vet():
    assert fallback("health", "quota exceeded") == HEALTH_FALLBACK
    assert "call your vet" in HEALTH_FALLBACK.lower()


def test_unknown_category_uses_general_block():
    assert fallback("grooming") == GENERAL_FALLBACK


def test_raw_error_is_not_shown():
    assert "SECRET_TRACE" not in fallback("nutrition", "SECRET_TRACE")


def test_caller_fallback_keys_on_emergency_language():
    assert caller_fallback("urgent! my dog collapsed") == CALLER_EMERGENCY_FALLBACK
    assert caller_fallback("how do I brush my cat") == CALLER_GENERAL_FALLBACK
    assert "vet" in CALLER_GENERAL_FALLBACK.lower()
