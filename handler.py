# handler.py
"""AWS Lambda handler using Mangum adapter for FastAPI.

This module provides the entry point for AWS Lambda to invoke
the submission API. Mangum translates API Gateway events
to ASGI format that FastAPI understands.
"""

import logging

from mangum import Mangum
from submissions.config import get_settings
from submissions.main import app

logging.getLogger().setLevel(get_settings().log_level)

# Create the Lambda handler
# lifespan="off" disables ASGI lifespan events which aren't needed in Lambda
handler = Mangum(app, lifespan="off")
