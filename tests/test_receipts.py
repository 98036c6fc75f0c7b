"""Tests for receipt operations."""

from datetime import date, datetime, time

import pytest

from finwise.domain.entities import PaymentMethod, Receipt
from finwise.domain.errors import NotFoundError, ValidationError


class TestCreateReceipt:
    """Tests for create_receipt and get_receipt."""

    def test_create_and_get(self, repository, alice):
        receipt = repository.create_receipt(
            PaymentMethod.DEBIT_CARD,
            alice.id,
            date(2024, 5, 1),
            time(18, 45, 10),
            ["bread", "milk", "bread"],
        )

        stored = repository.get_receipt(receipt.id)

        assert isinstance(stored, Receipt)
        assert stored == receipt
        assert stored.payment_method is PaymentMethod.DEBIT_CARD
        assert stored.items == ("bread", "milk", "bread")
        assert stored.date == date(2024, 5, 1)
        assert stored.time == time(18, 45, 10)

    def test_empty_items(self, repository, alice):
        receipt = repository.create_receipt("cash", alice.id, date(2024, 5, 1), time(9, 0))

        assert repository.get_receipt(receipt.id).items == ()

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("cash", PaymentMethod.CASH),
            ("credit card", PaymentMethod.CREDIT_CARD),
            ("Debit-Card", PaymentMethod.DEBIT_CARD),
            ("check", PaymentMethod.CHECK),
            ("wire_transfer", PaymentMethod.WIRE_TRANSFER),
        ],
    )
    def test_payment_method_strings(self, repository, alice, method, expected):
        receipt = repository.create_receipt(method, alice.id, date(2024, 5, 1), time(9, 0), [])
        assert receipt.payment_method is expected

    def test_unknown_payment_method_rejected(self, repository, alice):
        with pytest.raises(ValidationError, match="payment method"):
            repository.create_receipt("bitcoin", alice.id, date(2024, 5, 1), time(9, 0), [])
        assert repository.list_receipts() == []

    def test_missing_party(self, repository):
        with pytest.raises(NotFoundError):
            repository.create_receipt("cash", 999, date(2024, 5, 1), time(9, 0), [])

    def test_datetime_is_not_a_date(self, repository, alice):
        with pytest.raises(ValidationError):
            repository.create_receipt("cash", alice.id, datetime(2024, 5, 1, 9), time(9, 0), [])

    def test_items_must_be_strings(self, repository, alice):
        with pytest.raises(ValidationError):
            repository.create_receipt("cash", alice.id, date(2024, 5, 1), time(9, 0), ["ok", 3])

    def test_list_and_delete(self, repository, alice, bob):
        r1 = repository.create_receipt("cash", alice.id, date(2024, 5, 2), time(9, 0), ["a"])
        r2 = repository.create_receipt("check", alice.id, date(2024, 5, 1), time(9, 0), ["b"])
        repository.create_receipt("cash", bob.id, date(2024, 5, 1), time(9, 0), [])

        assert repository.list_receipts(party_id=alice.id) == [r2, r1]
        assert repository.delete_receipt(r1.id) == 1
        assert repository.get_receipt(r1.id) is None
        assert repository.delete_receipt(r1.id) == 0
