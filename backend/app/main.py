from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import health, worksheet, curriculum
from app.core.config import get_settings

settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Curriculum-aligned arithmetic worksheet generator",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        "http://localhost:3000",  # Next.js dev server
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Worksheet-Seed"],
)

# Include routers
app.include_router(health.router)
app.include_router(worksheet.router)
app.include_router(curriculum.router)


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "docs": "/docs",
        "health": "/health",
        "worksheet": "/api/worksheet",
    }
