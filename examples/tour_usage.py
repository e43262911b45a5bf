#!/usr/bin/env python3
"""
Tour Usage Example - FP Tour App

This script runs the functional idioms tour end to end. It shows how to:
- Configure structured logging
- Run pipelines over the sample transactions
- Resolve an HTML document from a URL or file and list its links
- Dispatch a message over each contact method

Run: python examples/tour_usage.py [URL-or-path]
"""

import sys

from fptour_app.config.loader import ConfigLoader
from fptour_app.logging.config import configure_from_params
from fptour_app.tour import TourRunner


def main() -> None:
    """Run the tour against an optional document source."""
    html_source = sys.argv[1] if len(sys.argv) > 1 else None

    config = ConfigLoader.create().load()
    configure_from_params(config.logging)

    report = TourRunner(config).run(html_source=html_source)

    print(f"First Acme transaction: {report.first_match}")
    print(f"NoSuchCo lookup: {report.missing_match}")
    print(f"Total: {report.total}")
    print(f"Average: {report.average}")
    for transaction in report.large_newest_first:
        print(f"Large: {transaction.date} {transaction.customer_id} {transaction.amount}")
    for customer, total in report.totals_by_customer.items():
        print(f"{customer}: {total}")

    if report.document_error:
        print(f"Document error: {report.document_error}")
    elif report.document_source:
        print(f"{report.document_title or report.document_source}: {len(report.link_targets)} links")
        for target in report.link_targets:
            print(f"  {target}")

    for line in report.messages:
        print(line)


if __name__ == "__main__":
    main()
