"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import os
import sys
from pathlib import Path

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Lambda environment variables used by handlers
os.environ.setdefault("INTERACTIONS_TABLE", "test-interactions-table")
os.environ.setdefault("KB_TABLE", "ai_knowledge_base")
os.environ.setdefault("MATCH_THRESHOLD", "8.0")

boto3.setup_default_session(region_name="eu-west-2")


@pytest.fixture
def knowledge_base():
    """Small knowledge base whose keywords do not overlap by accident."""
    from models.knowledge import KnowledgeEntry

    return [
        KnowledgeEntry(
            id="kb-1",
            intent="Check wallet balance",
            category="platform",
            keywords=["wallet", "balance", "funds"],
            answer="Open Wallet from the sidebar to see your balance.",
            priority=8,
        ),
        KnowledgeEntry(
            id="kb-2",
            intent="Risk management basics",
            category="trading",
            keywords=["risk management", "risk", "stop loss"],
            answer="Never risk more than 1-2% of your account per trade.",
            priority=7,
        ),
        KnowledgeEntry(
            id="kb-3",
            intent="Position sizing",
            category="trading",
            keywords=["position sizing", "lot size", "calculator"],
            answer="Use the position size calculator under Tools.",
            priority=6,
        ),
        KnowledgeEntry(
            id="kb-4",
            intent="Greeting",
            category="general",
            keywords=["hello", "good morning", "greetings"],
            answer="Hi! How can I help you today?",
            priority=3,
        ),
        KnowledgeEntry(
            id="kb-5",
            intent="Archived promo",
            category="general",
            keywords=["promo", "wallet"],
            answer="This promotion has ended.",
            priority=10,
            active=False,
        ),
    ]
