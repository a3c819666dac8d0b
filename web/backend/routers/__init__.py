"""API route handlers."""

from .matches import router as matches_router
from .personality import router as personality_router
