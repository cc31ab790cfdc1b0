import datetime

from aws_cdk import Aws
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# Powertools for AWS Lambda (Python) の公開レイヤー（pydantic を同梱）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
    ) -> None:
        super().__init__(scope, id)

        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Aws.REGION),
        )

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "courtside.booking.handlers.create.lambda_handler",
            "booking-service",
            table,
        )

        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "courtside.booking.handlers.cancel.lambda_handler",
            "booking-service",
            table,
        )

        self.complete_booking = self._create_function(
            "CompleteBookingLambda",
            "courtside.booking.handlers.complete.lambda_handler",
            "booking-service",
            table,
        )

        for fn in [self.create_booking, self.cancel_booking, self.complete_booking]:
            table.grant_read_write_data(fn)

        self.get_booking = self._create_function(
            "GetBookingLambda",
            "courtside.booking.handlers.get_booking.lambda_handler",
            "booking-service",
            table,
        )

        self.lookup_booking = self._create_function(
            "LookupBookingLambda",
            "courtside.booking.handlers.lookup.lambda_handler",
            "booking-service",
            table,
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "courtside.booking.handlers.list_bookings.lambda_handler",
            "booking-service",
            table,
        )

        self.availability = self._create_function(
            "AvailabilityLambda",
            "courtside.booking.handlers.availability.lambda_handler",
            "booking-service",
            table,
        )

        self.list_courts = self._create_function(
            "ListCourtsLambda",
            "courtside.catalog.handlers.list_courts.lambda_handler",
            "catalog-service",
            table,
        )

        self.list_sports = self._create_function(
            "ListSportsLambda",
            "courtside.catalog.handlers.list_sports.lambda_handler",
            "catalog-service",
            table,
        )

        self.dashboard = self._create_function(
            "DashboardLambda",
            "courtside.dashboard.handlers.get_dashboard.lambda_handler",
            "dashboard-service",
            table,
        )

        for fn in [
            self.get_booking,
            self.lookup_booking,
            self.list_bookings,
            self.availability,
            self.dashboard,
        ]:
            table.grant_read_data(fn)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        table: dynamodb.Table,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "LEDGER_BACKEND": "dynamodb",
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
