from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campushub.api.http.errors import register_exception_handlers
from campushub.api.router import api_router
from campushub.core.db import init_models
from campushub.core.log import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_models()
    yield


app = FastAPI(
    title="CampusHub",
    description="Лайки, комментарии и заявки в команды проектов",
    version="1.0.0",
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Подключаем роутеры
app.include_router(api_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "CampusHub API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
