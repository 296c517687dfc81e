"""
Search Service Dependencies

FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from services.search_service.engine import AggregationEngine


def get_engine(request: Request) -> AggregationEngine:
    """
    Get the aggregation engine created at start-up.

    Args:
        request: Current request

    Returns:
        AggregationEngine: Engine stored on application state
    """
    return request.app.state.engine
