"""
PawsBot conversation engine.

This package contains:
- classifier: keyword classification (category, urgency, confidence)
- store: per-user conversation state + cleanup sweep
- prompts / handlers: topic prompts and handler nodes
- fallback: static replies when generation or the whole run fails
- backend: Gemini generation backend
- graph: compiled LangGraph + the PawsBot engine
"""
