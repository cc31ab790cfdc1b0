from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from courtside.booking.applications.get_booking import GetBookingService
from courtside.booking.domain import PublicReference
from courtside.booking.handlers.response_models import to_response
from courtside.bootstrap import get_ledger
from courtside.shared.domain.exception import DomainException
from courtside.shared.utils import api_response, error_response

logger = Logger()

service = GetBookingService(ledger=get_ledger())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約番号による予約確認 Lambda Handler（顧客向け）"""
    reference = (event.path_parameters or {}).get("reference")
    if not reference:
        return api_response(400, {"message": "reference is required"})

    logger.info("Looking up booking by reference", extra={"reference": reference})

    try:
        booking = service.get_by_reference(PublicReference(value=reference))
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to look up booking")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_response(booking))
