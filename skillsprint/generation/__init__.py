"""Roadmap text generation: prompt, model client and response parsing."""
