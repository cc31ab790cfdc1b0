from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from courtside.booking.applications.create_booking import CreateBookingService
from courtside.booking.handlers.request_models import CreateBookingRequest
from courtside.booking.handlers.response_models import to_response
from courtside.bootstrap import get_booking_factory, get_catalog, get_ledger
from courtside.shared.domain.exception import DomainException
from courtside.shared.utils import api_response, error_response

logger = Logger()

service = CreateBookingService(
    ledger=get_ledger(),
    catalog=get_catalog(),
    factory=get_booking_factory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """コート予約 Lambda Handler

    入力の形式チェックは pydantic で行い、営業時間・重複のチェックは
    ドメイン層（台帳）で改めて行う。
    """
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
        booking = service.create(request.to_details())
    except (ValidationError, DomainException) as e:
        logger.info("Booking request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return api_response(500, {"message": "Failed to create booking"})

    return api_response(201, to_response(booking))
