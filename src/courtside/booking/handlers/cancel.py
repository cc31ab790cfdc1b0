from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from courtside.booking.applications.change_booking_status import CancelBookingService
from courtside.booking.domain import BookingId
from courtside.booking.handlers.response_models import to_response
from courtside.bootstrap import get_ledger
from courtside.shared.domain.exception import DomainException
from courtside.shared.utils import api_response, error_response

logger = Logger()

service = CancelBookingService(ledger=get_ledger())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    try:
        booking = service.cancel(BookingId(value=booking_id))
    except DomainException as e:
        logger.info("Cancel request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to cancel booking")
        return api_response(500, {"message": "Failed to cancel booking"})

    return api_response(200, to_response(booking))
