"""
Request dependencies.
"""

from fastapi import Request

from ..services.coordinator import ClinicCoordinator


async def get_coordinator(request: Request) -> ClinicCoordinator:
    """The coordinator owned by the running application."""
    return request.app.state.coordinator
