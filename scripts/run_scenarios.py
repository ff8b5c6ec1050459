#!/usr/bin/env python3
"""Run the PawsBot demo scenarios and print each reply with its classification."""
import asyncio
import os
import sys

# Project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv

load_dotenv()

from pawsbot.backend import build_backend
from pawsbot.graph import PawsBot

SCENARIOS = [
    {
        "name": "Scenario 1: Emergency",
        "user_input": "My dog ate rat poison and is bleeding from the gums",
        "hint": "Static emergency script with the poison-control line; no generation.",
    },
    {
        "name": "Scenario 2: Health",
        "user_input": "My cat has been vomiting since this morning",
        "hint": "Veterinary guidance plus the see-a-vet reminder.",
    },
    {
        "name": "Scenario 3: Behavior",
        "user_input": "My puppy keeps biting everyone's hands",
        "hint": "Positive-reinforcement training advice.",
    },
    {
        "name": "Scenario 4: Nutrition",
        "user_input": "How much food should a 10 week old kitten get?",
        "hint": "Safety-first feeding advice; consult the vet before big changes.",
    },
    {
        "name": "Scenario 5: General",
        "user_input": "What's a good name for a grey rabbit?",
        "hint": "Warm general answer with a follow-up question.",
    },
    {
        "name": "Scenario 6: Priority tie-break",
        "user_input": "I'm worried about my dog's diet, this feels like an emergency",
        "hint": "Emergency wins over nutrition.",
    },
]


async def run() -> None:
    backend = build_backend()
    if backend is None:
        print("No GOOGLE_API_KEY or GEMINI_API_KEY set; running with offline fallbacks.", file=sys.stderr)
    bot = PawsBot(backend)
    for s in SCENARIOS:
        print("\n" + "=" * 60)
        print(s["name"])
        print("=" * 60)
        print("You:", s["user_input"])
        print("Expected:", s["hint"])
        result = await bot.process_message("scenario-runner", s["user_input"])
        print(f"PawsBot [{result['category']} / {result['urgency']} / success={result['success']}]:")
        print(result["response"])
    print("\n" + "=" * 60)
    print("Done. Review responses above against expected behavior.")


def main():
    asyncio.run(run())


if __name__ == "__main__":
    main()
