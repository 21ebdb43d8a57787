"""AWS Lambda handler for the Workshop Data API.

Wraps the FastAPI application with the Mangum adapter so it can run on
AWS Lambda behind API Gateway.
"""

from mangum import Mangum

from src.main import app

# lifespan="auto" runs the app's shutdown at the end of every invocation,
# which drains CSV exports accepted during that invocation.
# api_gateway_base_path strips the stage name from paths
handler = Mangum(app, lifespan="auto", api_gateway_base_path="/v1")


def lambda_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda function handler.

    Args:
        event: API Gateway event containing request details
        context: Lambda context object with runtime information

    Returns:
        API Gateway response dict with statusCode, headers, and body

    Notes:
        The response is returned only after the exports started by this
        request have finished, since Lambda freezes the process between
        invocations.
    """
    return handler(event, context)
