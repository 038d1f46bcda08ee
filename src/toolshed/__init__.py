"""
Toolshed package.

Provides:
- Random string generation with configurable character classes
- Text translation through a generative-language HTTP API
- A small FastAPI service exposing both tools
"""
