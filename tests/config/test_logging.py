"""Tests for structured logging processors."""

import structlog

from aqualedger.config.logging import add_app_context, configure_logging, round_money


class TestLoggingProcessors:
    def test_app_context(self):
        event = add_app_context(None, "info", {"event": "sale_recorded"})

        assert event["app"] == "AquaLedger"
        assert event["currency"] == "PKR"
        assert "environment" in event

    def test_round_money(self):
        event = round_money(None, "info", {
            "event": "payment_recorded",
            "amount": 0.1 + 0.2,
            "total_balance": 259.99999999,
            "ratio": 0.3333333,
            "customer_id": 1,
        })

        assert event["amount"] == 0.3
        assert event["total_balance"] == 260.0
        assert event["ratio"] == 0.3333333
        assert event["customer_id"] == 1

    def test_configure_json(self):
        configure_logging(json_logs=True)
        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert round_money in processors
