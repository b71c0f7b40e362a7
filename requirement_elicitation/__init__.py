"""Conversational requirement elicitation: Gemini chat with a rule-based fallback."""

__version__ = "0.1.0"
