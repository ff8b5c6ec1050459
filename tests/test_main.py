"""CLI helpers (no REPL loop, no LLM)."""
import pytest

from pawsbot.main import is_quit


@pytest.mark.parametrize("text", ["/quit", "/QUIT", " /quit ", "quit", "exit", "q"])
def test_quit_commands_end_the_chat(text):
    assert is_quit(text)


@pytest.mark.parametrize("text", ["", "my dog is quite sick", "/quitting time", "queue"])
def test_other_input_is_a_chat_message(text):
    assert not is_quit(text)
