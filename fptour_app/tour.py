"""
Tour driver.

Runs the transaction, document and contact demonstrations in order, logging
each result, and collects the outcomes into a TourReport.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .contacts import SMS, Address, Email, PhoneNumber, PostalMail, VoiceMail, send_message
from .errors import EmptyAggregateError, NotFoundError
from .logging.config import get_logger
from .sources import create_source, hrefs, links
from .transactions import (
    Pipeline,
    Transaction,
    average_by,
    customer_totals,
    find,
    large_transactions,
    pipe,
    sample_transactions,
    sort_by_descending,
    sum_by,
    try_find,
    where,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class TourReport:
    """Everything the tour computed."""
    first_match: Optional[Transaction] = None
    missing_match: Optional[Transaction] = None
    total: Decimal = Decimal("0")
    average: Optional[Decimal] = None
    empty_average_error: Optional[str] = None
    large: tuple[Transaction, ...] = ()
    newest_first: tuple[Transaction, ...] = ()
    large_newest_first: tuple[Transaction, ...] = ()
    totals_by_customer: dict[str, Decimal] = field(default_factory=dict)
    document_source: Optional[str] = None
    document_title: Optional[str] = None
    document_error: Optional[str] = None
    link_targets: tuple[str, ...] = ()
    messages: tuple[str, ...] = ()


class TourRunner:
    """Drives the demonstrations with one configuration."""

    def __init__(self, config: Optional[DefaultConfig] = None) -> None:
        self.config = config or get_default_config()
        self.logger = logger

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> "TourRunner":
        """Load settings.yaml plus overrides, validate, and build a runner."""
        loader = ConfigLoader.create(config_dir)
        merged = loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError("; ".join(error_msgs))

        return cls(loader.load(overrides))

    def run(
        self,
        transactions: Optional[tuple[Transaction, ...]] = None,
        html_source: Optional[str] = None
    ) -> TourReport:
        """Run every demonstration and return the collected report."""
        if transactions is None:
            transactions = sample_transactions()
        html_source = html_source or self.config.tour.html_source

        values: dict[str, Any] = self.run_transactions(transactions)
        if html_source:
            values.update(self.run_document(html_source))
        values["messages"] = self.run_contacts()

        return TourReport(**values)

    def run_transactions(self, transactions: tuple[Transaction, ...]) -> dict[str, Any]:
        """Lookups, aggregates, filtering and sorting over the transactions."""
        params = self.config.tour
        values: dict[str, Any] = {}

        try:
            values["first_match"] = pipe(
                transactions,
                find(lambda t: t.customer_id == params.lookup_customer,
                     description=f"customer_id == {params.lookup_customer}")
            )
            self.logger.info("First transaction found", transaction=str(values["first_match"]))
        except NotFoundError as e:
            self.logger.warning("No transaction for customer", customer=params.lookup_customer,
                                searched=e.searched_count)

        values["missing_match"] = pipe(
            transactions, try_find(lambda t: t.customer_id == params.missing_customer)
        )
        self.logger.info("Optional lookup", customer=params.missing_customer,
                         found=values["missing_match"] is not None)

        values["total"] = pipe(transactions, sum_by(lambda t: t.amount, start=Decimal("0")))
        self.logger.info("Total amount", total=str(values["total"]))

        try:
            values["average"] = pipe(transactions, average_by(lambda t: t.amount))
            self.logger.info("Average amount", average=str(values["average"]))
        except EmptyAggregateError as e:
            values["empty_average_error"] = str(e)
            self.logger.warning("Average skipped", reason=str(e))

        values["large"] = pipe(
            transactions, where(lambda t: t.amount > Decimal(str(params.min_amount)))
        )
        values["newest_first"] = Pipeline.of(
            sort_by_descending(lambda t: t.date), name="newest_first"
        )(transactions)

        values["large_newest_first"] = large_transactions(params.min_amount)(transactions)
        self.logger.info("Large transactions", count=len(values["large"]),
                         newest=str(values["large_newest_first"][0]) if values["large_newest_first"] else None)

        values["totals_by_customer"] = customer_totals(transactions)
        self.logger.info("Totals by customer",
                         totals={k: str(v) for k, v in values["totals_by_customer"].items()})
        return values

    def run_document(self, html_source: str) -> dict[str, Any]:
        """Resolve a document and list its link targets."""
        source = create_source(html_source, self.config.source)
        result = source.resolve(html_source)

        if not result.ok:
            return {"document_source": html_source, "document_error": str(result.error)}

        document = result.to_optional()
        link_targets = hrefs(links(document))
        self.logger.info("Document loaded", source=html_source, title=document.title,
                         links=len(link_targets))
        for target in link_targets:
            self.logger.info("Link", href=target)

        return {
            "document_source": html_source,
            "document_title": document.title,
            "link_targets": link_targets,
        }

    def run_contacts(self, message: str = "Your invoice is ready") -> tuple[str, ...]:
        """Send one message through every contact method."""
        methods = (
            PostalMail(Address(house_number=221, street_name="Baker Street")),
            Email("billing@acme.example"),
            VoiceMail(PhoneNumber(code=44, number="20 7946 0958")),
            SMS(PhoneNumber(code=44, number="7700 900123")),
        )
        return tuple(send_message(message, method) for method in methods)


def run_tour(
    config: Optional[DefaultConfig] = None,
    html_source: Optional[str] = None
) -> TourReport:
    """Run the full tour with a configuration (defaults when omitted)."""
    return TourRunner(config).run(html_source=html_source)
