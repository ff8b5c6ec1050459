"""Topic prompts, response wrappers, and the fixed emergency script."""
from typing import Any

from pawsbot.utils import clip, describe_pet, describe_post

POISON_CONTROL = "(888) 426-4435"
POISON_CONTROL_LINE = f"Pet Poison Helpline: {POISON_CONTROL}"

# ═══════════════════════════════════════════════════════════════════════════════
# EMERGENCY : fixed script, never generated
# ═══════════════════════════════════════════════════════════════════════════════

EMERGENCY_RESPONSE = f"""🚨 **EMERGENCY DETECTED** 🚨

This appears to be an urgent situation. Here's what you should do IMMEDIATELY:

🏥 **SEEK EMERGENCY VET CARE NOW**
• Call your emergency vet clinic right away
• If no emergency clinic is available, call the {POISON_CONTROL_LINE}
• Keep your pet calm and warm
• Do NOT give human medications

⚡ **While getting help:**
• Monitor breathing and consciousness
• Keep airways clear
• Apply gentle pressure to bleeding wounds
• Note all symptoms and when they started

🚗 **Transport safely:**
• Use a blanket as a stretcher for large pets
• Keep head elevated if conscious
• Drive carefully - your pet needs you safe too

This is NOT a substitute for professional emergency care. GET VETERINARY HELP IMMEDIATELY."""

# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH : veterinary tone
# ═══════════════════════════════════════════════════════════════════════════════

HEALTH_SYSTEM = (
    "You are a professional veterinary AI assistant. Provide helpful advice but always emphasize "
    "the need for professional veterinary care for health concerns. Be empathetic and informative. "
    "Never give a definitive diagnosis."
)

HEALTH_INSTRUCTIONS = """Please provide:
1. Immediate care advice
2. When to see a vet
3. Warning signs to watch for
4. Reassurance and support

Always emphasize professional veterinary care for health issues."""

HEALTH_HEADER = "🏥 **Pet Health Guidance**"

HEALTH_FOOTER = """⚠️ **Important Reminder:**
This advice doesn't replace professional veterinary care. For any health concerns, please consult with your veterinarian who can properly examine and diagnose your pet.

🔔 Would you like me to help you find emergency vet services in your area?"""

# ═══════════════════════════════════════════════════════════════════════════════
# BEHAVIOR : positive-reinforcement tone
# ═══════════════════════════════════════════════════════════════════════════════

BEHAVIOR_SYSTEM = (
    "You are a professional animal behavior consultant. Provide practical, positive "
    "reinforcement-based training advice. Be encouraging and supportive. Never recommend punishment."
)

BEHAVIOR_INSTRUCTIONS = """Please provide:
1. Understanding the behavior
2. Positive training techniques
3. What NOT to do
4. Timeline expectations
5. When to seek professional help

Focus on positive reinforcement and patience."""

BEHAVIOR_HEADER = "🎓 **Pet Behavior Guidance**"

BEHAVIOR_FOOTER = """💡 **Remember:**
• Consistency is key - everyone in the household should use the same approach
• Positive reinforcement works better than punishment
• Be patient - behavior change takes time
• Consider a professional trainer, and a vet check for sudden behavior changes

🤔 Do you have any specific questions about implementing these techniques?"""

# ═══════════════════════════════════════════════════════════════════════════════
# NUTRITION : safety-first tone
# ═══════════════════════════════════════════════════════════════════════════════

NUTRITION_SYSTEM = (
    "You are a pet nutrition expert. Provide safe, scientifically-backed nutrition advice for pets. "
    "Always emphasize the importance of consulting with veterinarians for dietary changes."
)

NUTRITION_INSTRUCTIONS = """Please provide:
1. Nutritional guidance
2. Safe food recommendations
3. Foods to avoid
4. Portion guidelines
5. When to consult a vet about diet

Emphasize safety and professional consultation."""

NUTRITION_HEADER = "🍽️ **Pet Nutrition Guidance**"

NUTRITION_FOOTER = """⚠️ **Safety First:**
• Always introduce new foods gradually
• Consult your vet before major dietary changes
• Every pet is different - what works for one may not work for another

🥗 Would you like specific feeding schedule recommendations for your pet's age and size?"""

# ═══════════════════════════════════════════════════════════════════════════════
# GENERAL : warm generalist tone, sees recent conversation
# ═══════════════════════════════════════════════════════════════════════════════

GENERAL_SYSTEM = (
    "You are PawsBot, a friendly and knowledgeable pet care assistant for the PawsConnect community. "
    "Provide helpful, warm, and informative responses about general pet care topics. "
    "Use emojis appropriately and maintain a caring tone. Recommend a veterinarian whenever health is involved."
)

GENERAL_INSTRUCTIONS = "Please provide a helpful, friendly response about pet care."

GENERAL_HEADER = "🐾"

GENERAL_FOOTER = "💬 Is there anything else you'd like to know about pet care?"

# Characters of each past bot reply quoted back as conversation context.
HISTORY_SNIPPET_CHARS = 100


# ═══════════════════════════════════════════════════════════════════════════════
# Prompt builders
# ═══════════════════════════════════════════════════════════════════════════════

def _context_lines(context: dict[str, Any] | None) -> list[str]:
    return [line for line in (describe_pet(context), describe_post(context)) if line]


def format_recent_history(history: list[dict[str, Any]] | None, turns: int) -> str:
    """Last `turns` exchanges as 'User: ... / Bot: ...' lines, '' when there are none."""
    if not history or turns <= 0:
        return ""
    recent = history[-turns:]
    return "\n".join(
        f"User: {entry['user_message']}\nBot: {clip(entry['bot_response'], HISTORY_SNIPPET_CHARS)}"
        for entry in recent
    )


def build_user_prompt(
    label: str,
    message: str,
    instructions: str,
    context: dict[str, Any] | None = None,
    history: list[dict[str, Any]] | None = None,
    history_turns: int = 0,
) -> str:
    parts = [f'{label}: "{message}"']
    extra = _context_lines(context)
    if extra:
        parts.append("\n".join(extra))
    recent = format_recent_history(history, history_turns)
    if recent:
        parts.append(f"Recent conversation context:\n{recent}")
    parts.append(instructions)
    return "\n\n".join(parts)


def wrap_response(header: str, body: str, footer: str, inline_header: bool = False) -> str:
    if inline_header:
        return f"{header} {body}\n\n{footer}"
    return f"{header}\n\n{body}\n\n{footer}"


# ═══════════════════════════════════════════════════════════════════════════════
# Caller-level helper prompts (emergency check, answer summaries)
# ═══════════════════════════════════════════════════════════════════════════════

def emergency_check_message(symptoms: str, pet_info: dict[str, Any] | None = None) -> str:
    message = f"URGENT: Emergency assessment needed! Symptoms: {symptoms}"
    if pet_info:
        message += (
            "\n\nPet Details:"
            f"\n- Type: {pet_info.get('type') or 'Not specified'}"
            f"\n- Age: {pet_info.get('age') or 'Not specified'}"
            f"\n- Breed: {pet_info.get('breed') or 'Not specified'}"
            f"\n- Weight: {pet_info.get('weight') or 'Not specified'}"
        )
    return message + "\n\nPlease assess urgency and provide immediate guidance!"


def summary_message(answers: list) -> str:
    joined = "\n\n".join(
        f"Answer {i}: {a.get('content', a) if isinstance(a, dict) else a}"
        for i, a in enumerate(answers, start=1)
    )
    return (
        "Please summarize these community answers about a pet care question:\n\n"
        f"{joined}\n\n"
        "Provide a concise, helpful summary highlighting the main consensus and key advice."
    )
