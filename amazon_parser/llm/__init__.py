"""
Model clients.

Modules:
    ollama_client - OllamaClient for a local or remote Ollama server
"""

from .ollama_client import OllamaClient

__all__ = ['OllamaClient']
