import os
from datetime import date
from decimal import Decimal

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from courtside.booking.domain import (
    Booking,
    BookingCandidate,
    BookingId,
    BookingLedger,
    BookingStatus,
    Customer,
    HourRange,
    OpeningHours,
    PublicReference,
)
from courtside.booking.domain.repository import ledger_order
from courtside.catalog.domain import CourtId, SportId
from courtside.shared.domain import Currency, Money
from courtside.shared.domain.exception import (
    InvalidTransitionException,
    ResourceNotFoundException,
    SlotConflictException,
    StorageException,
)

logger = Logger(child=True)

# 予約番号の衝突・トランザクション競合時の再試行を含む試行回数
MAX_TRANSACTION_ATTEMPTS = 3

CONDITION_FAILED = "ConditionalCheckFailed"
TRANSACTION_CONFLICT = "TransactionConflict"

# TransactItems 内の位置（CancellationReasons と対応する）
_BOOKING_INDEX = 0
_REFERENCE_INDEX = 1
_FIRST_HOUR_INDEX = 2


class DynamoDBBookingLedger(BookingLedger):
    """DynamoDBを使用した BookingLedger の具象実装

    アイテム構成（単一テーブル）:
        BOOKING#{id} / BOOKING                      予約本体
        REF#{reference} / REF                       予約番号 -> 内部ID の索引
        COURT#{court}#DATE#{date} / HOUR#{hh}       booked の予約が占有する1時間ごとの枠

    枠アイテムの存在しない条件付き書き込みを予約本体と同じトランザクションで行うため、
    重複予約・書きかけの予約は発生しない。
    """

    def __init__(
        self, opening_hours: OpeningHours, table_name: str | None = None
    ) -> None:
        self._opening_hours = opening_hours
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client
        self._serializer = TypeSerializer()

    def create(self, candidate: BookingCandidate) -> Booking:
        """予約と占有枠を1トランザクションで登録する"""
        self._opening_hours.ensure_contains(candidate.hour_range)

        for _ in range(MAX_TRANSACTION_ATTEMPTS):
            booking = Booking.from_candidate(
                id=BookingId.generate(),
                public_reference=PublicReference.generate(),
                candidate=candidate,
            )
            try:
                self.client.transact_write_items(
                    TransactItems=self._create_items(booking)
                )
                return booking
            except ClientError as e:
                reasons = _cancellation_reasons(e)
                failed = _indexes_with(reasons, CONDITION_FAILED)
                if any(index >= _FIRST_HOUR_INDEX for index in failed):
                    raise SlotConflictException(
                        f"{booking.court_id} is already booked between "
                        f"{booking.hour_range.start_time} and "
                        f"{booking.hour_range.end_hour:02d}:00 on "
                        f"{booking.booking_date.isoformat()}"
                    ) from e
                if failed == {_REFERENCE_INDEX}:
                    logger.warning(
                        "Public reference collision, retrying",
                        extra={"public_reference": str(booking.public_reference)},
                    )
                    continue
                if _indexes_with(reasons, TRANSACTION_CONFLICT):
                    # 競合相手が確定した後の再試行では条件チェックで判定される
                    logger.warning(
                        "Transaction conflict on booking create, retrying",
                        extra={
                            "court_id": str(booking.court_id),
                            "booking_date": booking.booking_date.isoformat(),
                        },
                    )
                    continue
                logger.exception("Failed to create booking")
                raise StorageException("Failed to create booking") from e

        raise StorageException(
            f"Failed to create booking after {MAX_TRANSACTION_ATTEMPTS} attempts"
        )

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """内部IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_public_reference(self, reference: PublicReference) -> Booking | None:
        """予約番号で検索"""
        response = self.table.get_item(
            Key={"PK": f"REF#{reference}", "SK": "REF"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(BookingId(value=item["booking_id"]))

    def find_booked(self, court_id: CourtId, booking_date: date) -> list[Booking]:
        """占有枠アイテムから booked の予約を取得する"""
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq(_day_pk(court_id, booking_date))
            & Key("SK").begins_with("HOUR#"),
            ConsistentRead=True,
        )
        booking_ids = dict.fromkeys(
            item["booking_id"] for item in response.get("Items", [])
        )
        bookings = [self.find_by_id(BookingId(value=bid)) for bid in booking_ids]
        booked = [b for b in bookings if b is not None and b.occupies_slot]
        return sorted(booked, key=lambda b: b.hour_range.start_hour)

    def list_all(self) -> list[Booking]:
        """GSI1 から全予約を取得する"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("BOOKINGS"),
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return sorted((self._to_entity(item) for item in items), key=ledger_order)

    def set_status(self, booking_id: BookingId, status: BookingStatus) -> Booking:
        """ステータス更新と占有枠の解放を1トランザクションで行う

        他のトランザクションと競合した場合は、予約を読み直して遷移を再判定する。
        """
        for _ in range(MAX_TRANSACTION_ATTEMPTS):
            booking = self.find_by_id(booking_id)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")

            expected = booking.status
            booking.change_status(status)

            transact_items = [self._status_update_item(booking, expected)]
            if expected == BookingStatus.BOOKED and not booking.occupies_slot:
                transact_items.extend(self._release_items(booking))

            try:
                self.client.transact_write_items(TransactItems=transact_items)
                return booking
            except ClientError as e:
                reasons = _cancellation_reasons(e)
                if _BOOKING_INDEX in _indexes_with(reasons, CONDITION_FAILED):
                    raise InvalidTransitionException(
                        f"Booking status changed concurrently: "
                        f"expected {expected.value}, booking_id={booking_id}"
                    ) from e
                if _indexes_with(reasons, TRANSACTION_CONFLICT):
                    logger.warning(
                        "Transaction conflict on status change, retrying",
                        extra={"booking_id": str(booking_id)},
                    )
                    continue
                logger.exception(
                    "Failed to update booking status",
                    extra={"booking_id": str(booking_id)},
                )
                raise StorageException("Failed to update booking status") from e

        raise StorageException(
            f"Failed to update booking status after "
            f"{MAX_TRANSACTION_ATTEMPTS} attempts: {booking_id}"
        )

    def _create_items(self, booking: Booking) -> list[dict]:
        booking_item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "public_reference": str(booking.public_reference),
            "customer_name": booking.customer.name,
            "customer_phone": booking.customer.phone,
            "sport_id": str(booking.sport_id),
            "court_id": str(booking.court_id),
            "booking_date": booking.booking_date.isoformat(),
            "start_time": booking.hour_range.start_time,
            "hours": booking.hour_range.hours,
            "amount": str(booking.amount.amount),
            "currency": str(booking.amount.currency),
            "status": booking.status.value,
            "GSI1PK": "BOOKINGS",
            "GSI1SK": (
                f"{booking.booking_date.isoformat()}#{booking.hour_range.start_time}"
            ),
        }
        reference_item = {
            "PK": f"REF#{booking.public_reference}",
            "SK": "REF",
            "entity_type": "REF",
            "booking_id": str(booking.id),
        }
        items = [self._put(booking_item), self._put(reference_item)]
        day_pk = _day_pk(booking.court_id, booking.booking_date)
        for hour in booking.hour_range.covered_hours():
            hour_item = {
                "PK": day_pk,
                "SK": f"HOUR#{hour:02d}",
                "entity_type": "SLOT",
                "booking_id": str(booking.id),
            }
            items.append(self._put(hour_item))
        return items

    def _put(self, item: dict) -> dict:
        return {
            "Put": {
                "TableName": self.table_name,
                "Item": self._serialize(item),
                "ConditionExpression": "attribute_not_exists(PK)",
            }
        }

    def _status_update_item(self, booking: Booking, expected: BookingStatus) -> dict:
        return {
            "Update": {
                "TableName": self.table_name,
                "Key": self._serialize(
                    {"PK": f"BOOKING#{booking.id}", "SK": "BOOKING"}
                ),
                "UpdateExpression": "SET #status = :status",
                "ConditionExpression": "#status = :expected",
                "ExpressionAttributeNames": {"#status": "status"},
                "ExpressionAttributeValues": self._serialize(
                    {":status": booking.status.value, ":expected": expected.value}
                ),
            }
        }

    def _release_items(self, booking: Booking) -> list[dict]:
        day_pk = _day_pk(booking.court_id, booking.booking_date)
        return [
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": self._serialize({"PK": day_pk, "SK": f"HOUR#{hour:02d}"}),
                    "ConditionExpression": "booking_id = :booking_id",
                    "ExpressionAttributeValues": self._serialize(
                        {":booking_id": str(booking.id)}
                    ),
                }
            }
            for hour in booking.hour_range.covered_hours()
        ]

    def _serialize(self, item: dict) -> dict:
        return {key: self._serializer.serialize(value) for key, value in item.items()}

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            public_reference=PublicReference(value=item["public_reference"]),
            customer=Customer(name=item["customer_name"], phone=item["customer_phone"]),
            sport_id=SportId(item["sport_id"]),
            court_id=CourtId(item["court_id"]),
            booking_date=date.fromisoformat(item["booking_date"]),
            hour_range=HourRange.from_start_time(
                item["start_time"], int(item["hours"])
            ),
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            status=BookingStatus(item["status"]),
        )


def _day_pk(court_id: CourtId, booking_date: date) -> str:
    return f"COURT#{court_id}#DATE#{booking_date.isoformat()}"


def _cancellation_reasons(error: ClientError) -> dict[int, str]:
    """キャンセルされたトランザクションの、アイテム位置ごとの理由コード"""
    if error.response.get("Error", {}).get("Code") != "TransactionCanceledException":
        return {}
    reasons = error.response.get("CancellationReasons", [])
    return {
        index: reason.get("Code", "None")
        for index, reason in enumerate(reasons)
        if reason.get("Code", "None") != "None"
    }


def _indexes_with(reasons: dict[int, str], code: str) -> set[int]:
    return {index for index, reason in reasons.items() if reason == code}
