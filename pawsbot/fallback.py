"""Static replies used when generation fails or the whole pipeline fails.

Every block tells the user when to contact a veterinarian. Anything emergency-flavored
carries the poison-control line verbatim.
"""
from pawsbot.classifier import Category, mentions_emergency
from pawsbot.log_config import log_fallback
from pawsbot.prompts import EMERGENCY_RESPONSE, POISON_CONTROL_LINE

HEALTH_FALLBACK = """🏥 I'm having trouble accessing my full knowledge right now, but health concerns are important!

**General Health Red Flags:**
• Loss of appetite for 24+ hours
• Persistent vomiting or diarrhea
• Difficulty breathing
• Extreme lethargy
• Signs of pain

📞 **When in doubt, call your vet!** It's always better to be safe."""

BEHAVIOR_FALLBACK = """🎓 Training takes patience! Here are some universal tips:

• **Positive reinforcement** works best
• **Consistency** from all family members
• **Short training sessions** (5-10 minutes)
• **High-value treats** for motivation
• **Never punish** - redirect instead

🩺 Sudden aggression or anxiety can have a medical cause, so call your vet if the behavior appeared suddenly.

🏆 Every pet learns at their own pace!"""

NUTRITION_FALLBACK = f"""🍽️ Nutrition basics while I'm offline:

• **Fresh water** always available
• **Age-appropriate** pet food
• **Regular feeding schedule**
• **Avoid** chocolate, onions, grapes, xylitol
• **Portion control** based on size/activity

⚠️ Always consult your vet for dietary changes, and call your vet or the {POISON_CONTROL_LINE} right away if your pet ate something toxic."""

GENERAL_FALLBACK = """🐾 I'm temporarily offline, but here's what you can do:

• 📱 Ask our community for advice
• 🔍 Browse our knowledge base
• 📞 Contact your vet for health concerns
• 🆘 Call an emergency vet for urgent issues

I'll be back soon with better answers! 🤖"""

CALLER_EMERGENCY_FALLBACK = f"""🚨 I'm experiencing technical difficulties, but this seems urgent!

**IMMEDIATE ACTION REQUIRED:**
• Contact your emergency veterinarian NOW
• Call animal poison control if you suspect poisoning - {POISON_CONTROL_LINE}
• Keep your pet calm and safe
• Do not give human medications"""

CALLER_GENERAL_FALLBACK = """🤖 I'm having some technical difficulties right now, but I don't want to leave you without help! While I'm getting back online, you can:

• 📱 Post your question in our community
• 📞 Contact your veterinarian for health concerns
• 🆘 Call an emergency vet for urgent situations

I'll be back online soon! 🐾"""

FALLBACK_BY_CATEGORY = {
    Category.EMERGENCY: EMERGENCY_RESPONSE,
    Category.HEALTH: HEALTH_FALLBACK,
    Category.BEHAVIOR: BEHAVIOR_FALLBACK,
    Category.NUTRITION: NUTRITION_FALLBACK,
    Category.GENERAL: GENERAL_FALLBACK,
}


def fallback(category: str, raw_error: str = "") -> str:
    """Static reply for a topic whose generation failed. Unknown categories get the general block."""
    try:
        key = Category(category)
    except ValueError:
        key = Category.GENERAL
    log_fallback(key.value, raw_error)
    return FALLBACK_BY_CATEGORY[key]


def caller_fallback(message: str) -> str:
    """Reply for a run that failed outright, keyed only on the raw message."""
    if mentions_emergency(message):
        return CALLER_EMERGENCY_FALLBACK
    return CALLER_GENERAL_FALLBACK
