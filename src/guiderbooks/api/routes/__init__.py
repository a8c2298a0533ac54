"""Application routers mounted under /api."""

from fastapi import APIRouter

from . import ask, ask_chapter, assessment, health, questions

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(ask_chapter.router)
api_router.include_router(ask.router)
api_router.include_router(assessment.router)
api_router.include_router(questions.router)
