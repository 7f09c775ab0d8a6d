"""Services layer - Application orchestration.

Available services:
- RouteService: Answers route queries end to end
"""

from .route_service import RouteService

__all__ = ["RouteService"]
