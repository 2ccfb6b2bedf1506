"""
Amazon Product Parser

Turns a raw Amazon product page into a structured product record,
using a local Ollama model as the extraction engine.

Modules:
    models      - Data models (ExtractedText, Roll, ProductRecord)
    common      - Shared utilities (config loader, logging, text helpers)
    fetching    - Amazon page fetching and ASIN helpers
    llm         - Ollama HTTP client
    extraction  - Section extraction, prompt, completion, resolving, validation
    pipeline    - End-to-end parse orchestration
"""

__version__ = "1.0.0"
