"""
Tests del script scripts/sendy_cli.py (sin red: transporte fake).

python -m pytest tests/test_cli.py
"""

import pytest

from scripts.sendy_cli import run, parse_pairs


class TestParsePairs:
    """Tests de parse_pairs."""

    def test_pairs_in_order(self):
        assert list(parse_pairs(["b=2", "a=1", "url=x=y"]).items()) == [("b", "2"), ("a", "1"), ("url", "x=y")]

    def test_invalid_pair(self):
        with pytest.raises(ValueError):
            parse_pairs(["nope"])


class TestRun:
    """Tests de run."""

    def test_subscribe_with_list_and_fields(self, make_client):
        client, transport = make_client("1")

        outcome = run(["subscribe", "joe@example.com", "L9", "name=Joe", "country=CO"], client)

        assert outcome.ok
        assert transport.last_fields["list"] == "L9"
        assert transport.last_fields["name"] == "Joe"
        assert transport.last_fields["country"] == "CO"

    def test_subscribe_default_list(self, make_client):
        client, transport = make_client("1")

        run(["subscribe", "joe@example.com", "name=Joe"], client)

        assert transport.last_fields["list"] == "L1"
        assert transport.last_fields["name"] == "Joe"

    def test_status(self, make_client):
        client, transport = make_client("Bounced")

        outcome = run(["subscription_status", "joe@example.com"], client)

        assert outcome.value == "Bounced"
        assert transport.last_url.endswith("/api/subscribers/subscription-status.php")

    def test_count_with_list(self, make_client):
        client, transport = make_client("8")

        assert run(["active_subscriber_count", "L5"], client).count == 8
        assert transport.last_fields["list_id"] == "L5"

    def test_create_campaign(self, make_client):
        client, transport = make_client("Campaign created")

        run(["create_campaign", "subject=Hi", "brand_id=1"], client)

        assert transport.last_fields["subject"] == "Hi"
        assert transport.last_fields["brand_id"] == "1"

    def test_delete_and_unsubscribe(self, make_client):
        client, transport = make_client("true")

        assert run(["DELETE", "joe@example.com"], client).ok
        assert transport.last_url.endswith("/api/subscribers/delete.php")
        run(["unsubscribe", "joe@example.com", "L2"], client)
        assert transport.last_fields["list"] == "L2"

    def test_email_required(self, make_client):
        client, _ = make_client()

        with pytest.raises(ValueError):
            run(["delete"], client)

    def test_unknown_operation(self, make_client):
        client, _ = make_client()

        with pytest.raises(ValueError):
            run(["export"], client)
