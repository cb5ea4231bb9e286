"""Web boundary layer.

- contracts/: pydantic request and response models (camelCase on the wire)
- services/: quote and wallet services
- controllers/: FastAPI routers mounted under /api
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
