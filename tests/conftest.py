"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Tuple

from fptour_app.transactions import Transaction, sample_transactions


SAMPLE_HTML = """<!DOCTYPE html>
<html>
  <head><title>Antibubble</title></head>
  <body>
    <nav>
      <a href="/index.html">Home</a>
      <a href="https://example.com/about">About</a>
    </nav>
    <p>Read the <a href="docs/guide.html">guide</a> or <a name="anchor">jump</a>.</p>
  </body>
</html>
"""


@pytest.fixture
def transactions() -> Tuple[Transaction, ...]:
    """Sample transactions in booking order."""
    return sample_transactions()


@pytest.fixture
def more_transactions() -> Tuple[Transaction, ...]:
    """A longer list with ties on both date and amount."""
    return (
        Transaction(date(2024, 8, 1), "Globex", Decimal("300.00")),
        Transaction(date(2024, 8, 5), "Initech", Decimal("1200.00")),
        Transaction(date(2024, 8, 1), "Acme", Decimal("300.00")),
        Transaction(date(2024, 8, 5), "Globex", Decimal("4100.50")),
        Transaction(date(2024, 8, 3), "Initech", Decimal("0.00")),
    )


@pytest.fixture
def sample_html() -> str:
    """Markup with four anchors, three of them with href."""
    return SAMPLE_HTML


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    """Sample markup written to a temporary file."""
    path = tmp_path / "index.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path
