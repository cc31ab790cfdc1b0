from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from courtside.booking.applications.get_availability import GetAvailabilityService
from courtside.booking.handlers.request_models import AvailabilityQuery
from courtside.booking.handlers.response_models import (
    to_availability_response,
)
from courtside.bootstrap import get_availability_checker, get_catalog
from courtside.shared.utils import api_response, error_response

logger = Logger()

service = GetAvailabilityService(
    checker=get_availability_checker(), catalog=get_catalog()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空き状況照会 Lambda Handler

    court_id を指定した場合はそのコートの枠のみ返す。
    """
    try:
        query = AvailabilityQuery.model_validate(event.query_string_parameters or {})
    except ValidationError as e:
        return error_response(e)

    logger.info(
        "Fetching availability",
        extra={"date": query.booking_date.isoformat(), "court_id": query.court_id},
    )

    try:
        body = to_availability_response(service.get(query.booking_date))
    except Exception:
        logger.exception("Failed to fetch availability")
        return api_response(500, {"message": "Failed to fetch availability"})

    if query.court_id is not None:
        court_slots = body["slots"].get(query.court_id)
        if court_slots is None:
            return api_response(404, {"message": f"Court not found: {query.court_id}"})
        return api_response(200, {"date": body["date"], "slots": court_slots})

    return api_response(200, body)
