from datetime import date

from courtside.booking.domain.value_object import OpeningHours, TimeSlot


def slot_grid(day: date, opening_hours: OpeningHours) -> tuple[TimeSlot, ...]:
    """営業時間内の予約枠を時刻順に返す

    同じ入力には常に同じ結果を返す（副作用なし）。
    """
    return tuple(
        TimeSlot(day=day, hour=hour)
        for hour in range(opening_hours.opening_hour, opening_hours.closing_hour)
    )
