from __future__ import annotations

from pathlib import Path
from typing import List
import sys

import pytest

# Ensure project root is on sys.path for absolute imports
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from csvtree import classify_rows, group_rows


@pytest.fixture(scope="session")
def root_dir() -> Path:
    return ROOT


@pytest.fixture(scope="session")
def sample_csv() -> Path:
    return ROOT / "sample_data" / "conversation.csv"


@pytest.fixture
def conversation_rows() -> List[List[str]]:
    return [
        ["Conversation", "greeting", "", "", ""],
        ["Topics", "", "", "", ""],
        ["", "", "", "", ""],
        ["", "Weather", "sunny", "", ""],
        ["", "Replies", "", "", ""],
        ["", "", "", "", ""],
        ["", "", "Reply", "yes", ""],
        ["", "", "Keywords", "hot, warm,sunny", ""],
        ["", "", "", "", ""],
        ["", "", "Reply", "no", ""],
        ["", "", "", "", ""],
        ["", "Sports", "football", "", ""],
    ]


@pytest.fixture
def conversation_records(conversation_rows):
    return group_rows(classify_rows(conversation_rows))
