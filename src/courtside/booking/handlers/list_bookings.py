from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from courtside.booking.applications.get_booking import GetBookingService
from courtside.booking.handlers.response_models import to_list_response
from courtside.bootstrap import get_catalog, get_ledger
from courtside.shared.utils import api_response

logger = Logger()

catalog = get_catalog()
service = GetBookingService(ledger=get_ledger())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler"""
    logger.info("Listing all bookings")

    try:
        bookings = service.list_all()
        body = to_list_response(bookings, catalog.list_courts(), catalog.list_sports())
        return api_response(200, body)
    except Exception:
        logger.exception("Failed to list bookings")
        return api_response(500, {"message": "Internal server error"})
