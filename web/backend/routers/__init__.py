"""API route handlers."""

from .matches import router as matches_router
from .candidates import router as candidates_router
from .jobs import router as jobs_router
