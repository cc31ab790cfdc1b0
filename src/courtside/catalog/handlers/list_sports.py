from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from courtside.bootstrap import get_catalog
from courtside.catalog.handlers.response_models import to_sport_data
from courtside.shared.utils import api_response

logger = Logger()

catalog = get_catalog()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """競技一覧 Lambda Handler"""
    logger.info("Listing sports")
    sports = [to_sport_data(s).model_dump() for s in catalog.list_sports()]
    return api_response(200, {"sports": sports})
