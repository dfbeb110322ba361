"""
Speedboat API router modules for handling requests to various endpoints

This module exports the ``router`` object which includes all known
endpoints and path operations of the REST API.
"""

from fastapi import APIRouter

from . import speedboats


router = APIRouter()
router.include_router(speedboats.router)
