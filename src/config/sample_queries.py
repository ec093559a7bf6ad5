"""Default query library for the admin test console, grouped by category."""

from typing import Dict, List

DEFAULT_SAMPLE_QUERIES: Dict[str, List[str]] = {
    "platform": [
        "How do I check my wallet balance?",
        "Where can I find the calculator?",
        "How do I join the live trading room?",
        "What are premium signals?",
        "How do I access the academy?",
        "How do I use the trading journal?",
        "Where is the economic calendar?",
    ],
    "trading": [
        "What is risk management?",
        "How do I calculate lot size?",
        "What is risk reward ratio?",
        "How to control trading emotions?",
        "How do I trade gold?",
        "Why should I use a stop loss?",
        "What is position sizing?",
    ],
    "general": [
        "Hello!",
        "What can you help me with?",
        "How do I contact support?",
        "Good morning",
    ],
    "edge": [
        "asdfghjkl",
        "What's your favorite color?",
        "Can you order pizza?",
        "Tell me a joke",
    ],
}
