# backend/economy/api/dependencies.py
from fastapi import Request

from ..reference_data import ReferenceData


def get_reference_data(request: Request) -> ReferenceData:
    reference = getattr(request.app.state, "reference_data", None)
    if reference is None:
        raise RuntimeError("Reference data has not been loaded. The application lifespan manager may have failed.")
    return reference
