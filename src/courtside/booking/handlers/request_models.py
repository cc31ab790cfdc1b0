import datetime

from pydantic import BaseModel, ConfigDict, Field

from courtside.booking.domain import BookingDetails
from courtside.booking.domain.value_object import MAX_HOURS, MIN_HOURS


class CreateBookingRequest(BaseModel):
    """コート予約リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Ahmed Khan",
                    "phone": "+92 300 1234567",
                    "sportId": "cricket",
                    "courtId": "court-a",
                    "date": "2024-01-01",
                    "startTime": "09:00",
                    "hours": 2,
                }
            ]
        },
    )

    name: str = Field(
        ...,
        min_length=2,
        max_length=100,
        description="予約者氏名",
        examples=["Ahmed Khan"],
    )

    phone: str = Field(
        ...,
        pattern=r"^[0-9\-\+ ]{7,20}$",
        description="電話番号",
        examples=["+92 300 1234567"],
    )

    sport_id: str = Field(..., min_length=1, alias="sportId", description="競技ID")

    court_id: str = Field(..., min_length=1, alias="courtId", description="コートID")

    booking_date: datetime.date = Field(..., alias="date", description="利用日")

    start_time: str = Field(
        ...,
        alias="startTime",
        pattern=r"^\d{2}:\d{2}$",
        description="開始時刻（HH:MM、正時のみ）",
        examples=["09:00"],
    )

    hours: int = Field(..., ge=MIN_HOURS, le=MAX_HOURS, description="利用時間数")

    def to_details(self) -> BookingDetails:
        """リクエストボディから BookingDetails を構築する"""
        return {
            "customer_name": self.name,
            "customer_phone": self.phone,
            "sport_id": self.sport_id,
            "court_id": self.court_id,
            "booking_date": self.booking_date.isoformat(),
            "start_time": self.start_time,
            "hours": self.hours,
        }


class AvailabilityQuery(BaseModel):
    """空き状況照会のクエリパラメータ"""

    model_config = ConfigDict(populate_by_name=True)

    booking_date: datetime.date = Field(..., alias="date")
    court_id: str | None = Field(default=None, min_length=1)
