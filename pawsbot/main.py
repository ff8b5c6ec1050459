"""CLI chat entrypoint. Load env, build the engine, run an async REPL with the cleanup sweep in the background."""
import asyncio
import sys
import time

from dotenv import load_dotenv

from pawsbot.backend import build_backend
from pawsbot.graph import PawsBot
from pawsbot.log_config import log_session_summary, setup_logging

load_dotenv()
setup_logging()

BANNER = """
=== PawsBot Pet Care Assistant ===

What to type:
  - Your pet question in plain English (e.g. "My cat keeps vomiting", "How much should I feed my puppy?").
  - Type /quit (or 'quit', 'exit', 'q') to end the chat.

Examples:
  "My dog ate chocolate and is having a seizure"
  "Why does my dog keep barking at night?"
  "What treats are safe for a rabbit?"

---
"""

CLI_USER_ID = "cli-user"
QUIT_COMMANDS = ("/quit", "quit", "exit", "q")


def is_quit(text: str) -> bool:
    return text.strip().lower() in QUIT_COMMANDS


def _format_meta(result: dict) -> str:
    meta = f"[{result.get('category')} | urgency={result.get('urgency')}"
    if "confidence" in result:
        meta += f" | confidence={result['confidence']:.2f}"
    return meta + "]"


async def chat() -> None:
    backend = build_backend()
    if backend is None:
        print("[WARN] No GOOGLE_API_KEY or GEMINI_API_KEY set; replies will use offline guidance only.", file=sys.stderr)
    bot = PawsBot(backend)
    print(BANNER)
    timings = []
    async with bot.sweeper():
        while True:
            try:
                user_input = (await asyncio.to_thread(input, "You: ")).strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye.")
                break
            if not user_input:
                continue
            if is_quit(user_input):
                print("Goodbye.")
                break
            t0 = time.perf_counter()
            result = await bot.process_message(CLI_USER_ID, user_input)
            timings.append(time.perf_counter() - t0)
            print("PawsBot:", result["response"] or "(No response)")
            print(_format_meta(result))
    if timings:
        log_session_summary(len(timings), sum(timings) / len(timings))


def main():
    asyncio.run(chat())


if __name__ == "__main__":
    main()
