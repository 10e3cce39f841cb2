"""
AWS Lambda handler for Travel Bot

This module provides the Lambda handler for FastAPI requests.
It routes all requests through the FastAPI application.
"""

from mangum import Mangum
from travelbot.main import app

# Create Mangum adapter for FastAPI
handler = Mangum(app, lifespan="off")
