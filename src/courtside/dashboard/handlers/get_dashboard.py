from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from courtside.bootstrap import get_catalog, get_ledger, get_opening_hours
from courtside.dashboard.applications import MetricsAggregator
from courtside.dashboard.handlers.response_models import to_response
from courtside.shared.config import get_settings
from courtside.shared.domain import Currency
from courtside.shared.utils import api_response

logger = Logger()

settings = get_settings()
aggregator = MetricsAggregator(
    ledger=get_ledger(),
    catalog=get_catalog(),
    opening_hours=get_opening_hours(),
    currency=Currency(settings.currency),
    week_start=settings.week_start,
    clock=settings.today,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ダッシュボード集計 Lambda Handler"""
    logger.info("Aggregating dashboard metrics")

    try:
        metrics = aggregator.aggregate()
    except Exception:
        logger.exception("Failed to aggregate dashboard metrics")
        return api_response(500, {"message": "Failed to fetch dashboard data"})

    return api_response(200, to_response(metrics))
