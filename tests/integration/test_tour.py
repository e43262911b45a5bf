"""Integration tests for the tour driver"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import yaml

from fptour_app.config.defaults import get_default_config
from fptour_app.sources.http_source import HttpDocumentSource
from fptour_app.transactions import Transaction
from fptour_app.tour import TourReport, TourRunner, run_tour
from fptour_app.utils.files import write_all_text


class TestTourTransactions:
    """Test the transaction demonstration"""

    def test_sample_run(self):
        """Test the report over the sample transactions"""
        report = run_tour()

        assert isinstance(report, TourReport)
        assert report.first_match == Transaction(date(2024, 8, 2), "Acme", Decimal("2400.00"))
        assert report.missing_match is None
        assert report.total == Decimal("5700.00")
        assert report.average == Decimal("1900.00")
        assert [t.amount for t in report.large] == [Decimal("2400.00"), Decimal("1800.00")]
        assert [(t.date, t.customer_id) for t in report.newest_first] == [
            (date(2024, 8, 3), "LoonyTunes"),
            (date(2024, 8, 3), "Acme"),
            (date(2024, 8, 2), "Acme"),
        ]
        assert [t.date for t in report.large_newest_first] == [date(2024, 8, 3), date(2024, 8, 2)]
        assert report.totals_by_customer == {"Acme": Decimal("4200.00"), "LoonyTunes": Decimal("1500.00")}
        assert report.document_source is None

    def test_empty_transactions(self):
        """Test lookups and averages degrade without crashing the run"""
        report = TourRunner().run(transactions=())

        assert report.first_match is None
        assert report.total == Decimal("0")
        assert report.average is None
        assert "empty" in report.empty_average_error
        assert report.large == ()

    def test_contact_messages(self):
        """Test one message per contact method"""
        messages = run_tour().messages

        assert len(messages) == 4
        assert messages[0].startswith("Posting:")
        assert messages[3].startswith("SMS messaging")


class TestTourDocuments:
    """Test the document demonstration"""

    def test_file_source(self, html_file):
        """Test links from a local file"""
        report = run_tour(html_source=str(html_file))

        assert report.document_error is None
        assert report.link_targets == ("/index.html", "https://example.com/about", "docs/guide.html")
        assert report.document_title == "Antibubble"

    def test_missing_file(self, tmp_path):
        """Test a missing file is reported, not raised"""
        report = run_tour(html_source=str(tmp_path / "missing.html"))

        assert report.link_targets == ()
        assert "File system error" in report.document_error
        assert report.document_title is None

    @patch.object(HttpDocumentSource, "fetch_text")
    def test_url_source(self, mock_fetch, sample_html):
        """Test links from a URL"""
        mock_fetch.return_value = sample_html

        report = run_tour(html_source="https://www.antibubble.org/index.html")

        assert len(report.link_targets) == 3

    def test_malformed_url(self):
        """Test an unparseable URL is reported, not raised"""
        report = run_tour(html_source="http://[broken")

        assert report.link_targets == ()
        assert "Invalid URL" in report.document_error

    def test_saved_markup_round_trip(self, tmp_path, sample_html):
        """Test markup saved to disk resolves to the same links"""
        path = write_all_text(tmp_path / "saved" / "index.html", sample_html)

        report = run_tour(html_source=path.as_uri())

        assert len(report.link_targets) == 3


class TestTourConfiguration:
    """Test configuration-driven runs"""

    def test_settings_file_source(self, tmp_path, html_file):
        """Test html_source and min_amount from settings.yaml"""
        (tmp_path / "settings.yaml").write_text(yaml.safe_dump({
            "tour": {"html_source": str(html_file), "min_amount": 2000},
        }))

        report = TourRunner.from_config_dir(tmp_path).run()

        assert len(report.link_targets) == 3
        assert [t.amount for t in report.large] == [Decimal("2400.00")]

    def test_invalid_settings_rejected(self, tmp_path):
        """Test validation errors stop runner construction"""
        with pytest.raises(ValueError, match="timeout_seconds"):
            TourRunner.from_config_dir(tmp_path, overrides={"source": {"timeout_seconds": -1}})

    def test_explicit_config(self):
        """Test passing a typed config"""
        runner = TourRunner(get_default_config())
        assert runner.run().total == Decimal("5700.00")
