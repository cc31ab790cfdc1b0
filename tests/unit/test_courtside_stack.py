import aws_cdk as core
import aws_cdk.assertions as assertions

from courtside_stack import CourtsideStack


def _template() -> assertions.Template:
    app = core.App()
    stack = CourtsideStack(app, "CourtsideStack")
    return assertions.Template.from_stack(stack)


def test_stack_created():
    template = _template()

    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.resource_count_is("AWS::Lambda::Function", 10)
    template.resource_count_is("AWS::ApiGateway::RestApi", 1)


def test_booking_table_has_listing_index():
    template = _template()

    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "KeySchema": [
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            "GlobalSecondaryIndexes": [
                assertions.Match.object_like({"IndexName": "GSI1"})
            ],
        },
    )


def test_functions_use_dynamodb_ledger():
    template = _template()

    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "courtside.booking.handlers.create.lambda_handler",
            "Runtime": "python3.13",
            "Environment": {
                "Variables": assertions.Match.object_like(
                    {"LEDGER_BACKEND": "dynamodb"}
                )
            },
        },
    )
