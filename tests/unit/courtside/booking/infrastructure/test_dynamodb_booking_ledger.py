from datetime import date
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from courtside.booking.domain import BookingId, BookingStatus, PublicReference
from courtside.booking.infrastructure import DynamoDBBookingLedger
from courtside.catalog.domain import CourtId
from courtside.shared.domain.exception import (
    InvalidTransitionException,
    SlotConflictException,
    StorageException,
    ValidationException,
)


def _transaction_cancelled(*codes: str) -> ClientError:
    return ClientError(
        {
            "Error": {
                "Code": "TransactionCanceledException",
                "Message": "Transaction cancelled",
            },
            "CancellationReasons": [{"Code": code} for code in codes],
        },
        "TransactWriteItems",
    )


def _booking_item(status: str = "booked", booking_id: str = "booking-1") -> dict:
    return {
        "PK": f"BOOKING#{booking_id}",
        "SK": "BOOKING",
        "booking_id": booking_id,
        "public_reference": "3F9A0C1B",
        "customer_name": "Ahmed Khan",
        "customer_phone": "+92 300 1234567",
        "sport_id": "cricket",
        "court_id": "court-a",
        "booking_date": "2024-01-10",
        "start_time": "09:00",
        "hours": 2,
        "amount": "4000",
        "currency": "PKR",
        "status": status,
    }


class TestDynamoDBBookingLedger:
    @pytest.fixture
    def mock_boto3(self):
        with patch(
            "courtside.booking.infrastructure.dynamodb_booking_ledger.boto3"
        ) as mock_boto3:
            yield mock_boto3

    @pytest.fixture
    def ledger(self, mock_boto3, opening_hours):
        return DynamoDBBookingLedger(opening_hours=opening_hours, table_name="bookings")

    @pytest.fixture
    def table(self, mock_boto3):
        return mock_boto3.resource.return_value.Table.return_value

    @pytest.fixture
    def client(self, mock_boto3):
        return mock_boto3.resource.return_value.meta.client

    def test_create_writes_booking_reference_and_hour_locks(
        self, ledger, client, create_candidate
    ):
        # Act
        booking = ledger.create(create_candidate(start_hour=9, hours=2))

        # Assert
        client.transact_write_items.assert_called_once()
        items = client.transact_write_items.call_args.kwargs["TransactItems"]
        assert len(items) == 4
        assert all(
            item["Put"]["ConditionExpression"] == "attribute_not_exists(PK)"
            for item in items
        )
        assert items[0]["Put"]["Item"]["PK"] == {"S": f"BOOKING#{booking.id}"}
        assert items[0]["Put"]["Item"]["status"] == {"S": "booked"}
        assert items[1]["Put"]["Item"]["PK"] == {
            "S": f"REF#{booking.public_reference}"
        }
        assert [item["Put"]["Item"]["SK"] for item in items[2:]] == [
            {"S": "HOUR#09"},
            {"S": "HOUR#10"},
        ]
        assert items[2]["Put"]["Item"]["PK"] == {
            "S": "COURT#court-a#DATE#2024-01-10"
        }

    def test_create_conflict_on_hour_lock(self, ledger, client, create_candidate):
        client.transact_write_items.side_effect = _transaction_cancelled(
            "None", "None", "None", "ConditionalCheckFailed"
        )

        with pytest.raises(SlotConflictException):
            ledger.create(create_candidate(start_hour=9, hours=2))

    def test_create_retries_on_reference_collision(
        self, ledger, client, create_candidate
    ):
        client.transact_write_items.side_effect = [
            _transaction_cancelled("None", "ConditionalCheckFailed", "None"),
            None,
        ]

        booking = ledger.create(create_candidate(start_hour=9, hours=1))

        assert booking.status == BookingStatus.BOOKED
        assert client.transact_write_items.call_count == 2

    def test_create_transaction_conflict_then_slot_taken(
        self, ledger, client, create_candidate
    ):
        # Arrange: 競合で取り消された後、再試行時には枠が埋まっている
        client.transact_write_items.side_effect = [
            _transaction_cancelled("None", "None", "TransactionConflict", "None"),
            _transaction_cancelled("None", "None", "ConditionalCheckFailed", "None"),
        ]

        # Act & Assert
        with pytest.raises(SlotConflictException):
            ledger.create(create_candidate(start_hour=9, hours=2))
        assert client.transact_write_items.call_count == 2

    def test_create_transaction_conflict_then_success(
        self, ledger, client, create_candidate
    ):
        client.transact_write_items.side_effect = [
            _transaction_cancelled("None", "None", "TransactionConflict", "None"),
            None,
        ]

        booking = ledger.create(create_candidate(start_hour=9, hours=2))

        assert booking.status == BookingStatus.BOOKED
        assert client.transact_write_items.call_count == 2

    def test_create_persistent_transaction_conflict(
        self, ledger, client, create_candidate
    ):
        client.transact_write_items.side_effect = _transaction_cancelled(
            "None", "None", "TransactionConflict"
        )

        with pytest.raises(StorageException):
            ledger.create(create_candidate(start_hour=9, hours=1))
        assert client.transact_write_items.call_count == 3

    def test_create_storage_failure(self, ledger, client, create_candidate):
        client.transact_write_items.side_effect = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException"}},
            "TransactWriteItems",
        )

        with pytest.raises(StorageException):
            ledger.create(create_candidate())

    def test_create_outside_opening_hours(self, ledger, client, create_candidate):
        with pytest.raises(ValidationException):
            ledger.create(create_candidate(start_hour=22, hours=2))
        client.transact_write_items.assert_not_called()

    def test_find_by_id(self, ledger, table):
        table.get_item.return_value = {"Item": _booking_item()}

        booking = ledger.find_by_id(BookingId(value="booking-1"))

        assert booking.public_reference == PublicReference("3F9A0C1B")
        assert booking.court_id == CourtId("court-a")
        assert booking.booking_date == date(2024, 1, 10)
        assert booking.hour_range.start_time == "09:00"
        assert str(booking.amount) == "4000 PKR"
        table.get_item.assert_called_once_with(
            Key={"PK": "BOOKING#booking-1", "SK": "BOOKING"}, ConsistentRead=True
        )

    def test_find_by_id_not_found(self, ledger, table):
        table.get_item.return_value = {}
        assert ledger.find_by_id(BookingId(value="missing")) is None

    def test_find_by_public_reference(self, ledger, table):
        table.get_item.side_effect = [
            {"Item": {"PK": "REF#3F9A0C1B", "SK": "REF", "booking_id": "booking-1"}},
            {"Item": _booking_item()},
        ]

        booking = ledger.find_by_public_reference(PublicReference("3F9A0C1B"))

        assert booking.id == BookingId(value="booking-1")

    def test_find_booked_reads_hour_locks(self, ledger, table):
        table.query.return_value = {
            "Items": [
                {"SK": "HOUR#09", "booking_id": "booking-1"},
                {"SK": "HOUR#10", "booking_id": "booking-1"},
            ]
        }
        table.get_item.return_value = {"Item": _booking_item()}

        booked = ledger.find_booked(CourtId("court-a"), date(2024, 1, 10))

        assert [str(b.id) for b in booked] == ["booking-1"]
        table.get_item.assert_called_once()

    def test_list_all_follows_pagination(self, ledger, table):
        table.query.side_effect = [
            {
                "Items": [_booking_item(booking_id="booking-1")],
                "LastEvaluatedKey": {"PK": "BOOKING#booking-1"},
            },
            {"Items": [_booking_item(booking_id="booking-2")]},
        ]

        bookings = ledger.list_all()

        assert {str(b.id) for b in bookings} == {"booking-1", "booking-2"}
        assert table.query.call_count == 2
        assert table.query.call_args.kwargs["ExclusiveStartKey"] == {
            "PK": "BOOKING#booking-1"
        }

    def test_set_status_releases_hour_locks(self, ledger, table, client):
        table.get_item.return_value = {"Item": _booking_item()}

        booking = ledger.set_status(
            BookingId(value="booking-1"), BookingStatus.CANCELLED
        )

        assert booking.status == BookingStatus.CANCELLED
        items = client.transact_write_items.call_args.kwargs["TransactItems"]
        update = items[0]["Update"]
        assert update["ExpressionAttributeValues"] == {
            ":status": {"S": "cancelled"},
            ":expected": {"S": "booked"},
        }
        assert [item["Delete"]["Key"]["SK"] for item in items[1:]] == [
            {"S": "HOUR#09"},
            {"S": "HOUR#10"},
        ]

    def test_set_status_from_terminal_state(self, ledger, table, client):
        table.get_item.return_value = {"Item": _booking_item(status="cancelled")}

        with pytest.raises(InvalidTransitionException):
            ledger.set_status(BookingId(value="booking-1"), BookingStatus.COMPLETED)

        client.transact_write_items.assert_not_called()

    def test_set_status_concurrent_change(self, ledger, table, client):
        table.get_item.return_value = {"Item": _booking_item()}
        client.transact_write_items.side_effect = _transaction_cancelled(
            "ConditionalCheckFailed", "None", "None"
        )

        with pytest.raises(InvalidTransitionException):
            ledger.set_status(BookingId(value="booking-1"), BookingStatus.COMPLETED)

    def test_set_status_retries_after_transaction_conflict(
        self, ledger, table, client
    ):
        table.get_item.return_value = {"Item": _booking_item()}
        client.transact_write_items.side_effect = [
            _transaction_cancelled("TransactionConflict", "None", "None"),
            None,
        ]

        booking = ledger.set_status(
            BookingId(value="booking-1"), BookingStatus.CANCELLED
        )

        assert booking.status == BookingStatus.CANCELLED
        assert client.transact_write_items.call_count == 2
        assert table.get_item.call_count == 2

    def test_set_status_conflict_with_completed_booking(self, ledger, table, client):
        # Arrange: 競合相手が先に completed にしていた
        table.get_item.side_effect = [
            {"Item": _booking_item()},
            {"Item": _booking_item(status="completed")},
        ]
        client.transact_write_items.side_effect = _transaction_cancelled(
            "TransactionConflict", "None", "None"
        )

        # Act & Assert
        with pytest.raises(InvalidTransitionException):
            ledger.set_status(BookingId(value="booking-1"), BookingStatus.CANCELLED)
        client.transact_write_items.assert_called_once()
