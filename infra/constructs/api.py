from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct"""

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "CourtsideRestApi",
            rest_api_name="Courtside Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
        )

        root = self.rest_api.root

        # GET /availability?date=YYYY-MM-DD[&court_id=...]
        root.add_resource("availability").add_method(
            "GET", apigw.LambdaIntegration(functions.availability)
        )

        # GET /courts, GET /sports
        root.add_resource("courts").add_method(
            "GET", apigw.LambdaIntegration(functions.list_courts)
        )
        root.add_resource("sports").add_method(
            "GET", apigw.LambdaIntegration(functions.list_sports)
        )

        # POST /bookings, GET /bookings
        bookings = root.add_resource("bookings")
        bookings.add_method("POST", apigw.LambdaIntegration(functions.create_booking))
        bookings.add_method("GET", apigw.LambdaIntegration(functions.list_bookings))

        # GET /bookings/reference/{reference}
        bookings.add_resource("reference").add_resource("{reference}").add_method(
            "GET", apigw.LambdaIntegration(functions.lookup_booking)
        )

        # GET /bookings/{booking_id}
        booking = bookings.add_resource("{booking_id}")
        booking.add_method("GET", apigw.LambdaIntegration(functions.get_booking))

        # POST /bookings/{booking_id}/cancel, /complete
        booking.add_resource("cancel").add_method(
            "POST", apigw.LambdaIntegration(functions.cancel_booking)
        )
        booking.add_resource("complete").add_method(
            "POST", apigw.LambdaIntegration(functions.complete_booking)
        )

        # GET /dashboard
        root.add_resource("dashboard").add_method(
            "GET", apigw.LambdaIntegration(functions.dashboard)
        )
