"""
AWS Lambda handler for the Contact Manager API
This module adapts the FastAPI application to work with AWS Lambda + API Gateway
"""

import json
import logging
import os

from mangum import Mangum

from main import app

# Configure logging for Lambda
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Tables are created by create_tables.py, not on each cold start
handler = Mangum(
    app,
    lifespan="off",
    api_gateway_base_path=None,
    text_mime_types=[
        "application/json",
        "application/xml",
        "text/plain",
        "text/html",
        "text/vcard"
    ],
    exclude_headers=["x-amzn-trace-id"]
)


def describe_event(event) -> str:
    """Method and path of an API Gateway v1 or v2 event, for logging"""
    if event.get('version') == '2.0':
        http = event.get('requestContext', {}).get('http', {})
        return f"API Gateway v2 event: {http.get('method', 'UNKNOWN')} {http.get('path', 'UNKNOWN')}"
    if 'httpMethod' in event:
        return f"API Gateway v1 event: {event.get('httpMethod', 'UNKNOWN')} {event.get('path', 'UNKNOWN')}"
    return f"Unknown event format. Event keys: {list(event.keys())}"


def lambda_handler(event, context):
    """
    AWS Lambda entry point

    Args:
        event: API Gateway event data
        context: Lambda runtime context

    Returns:
        API Gateway response format
    """
    logger.info(f"Lambda function: {context.function_name} ({context.function_version})")
    logger.info(f"Environment: {os.getenv('ENVIRONMENT', 'not-set')}")
    logger.info(describe_event(event))

    try:
        response = handler(event, context)
        logger.info(f"Mangum response status: {response.get('statusCode', 'UNKNOWN')}")
        return response

    except Exception as e:
        logger.error(f"Lambda handler error: {str(e)}", exc_info=True)

        return {
            "statusCode": 500,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*"
            },
            "body": json.dumps({
                "error": "InternalServerError",
                "message": "An unexpected error occurred",
                "requestId": context.aws_request_id
            })
        }
