from dotenv import load_dotenv
from fastapi import FastAPI

from cropgpt.api.rest_routes.chat import router as chat_router
from cropgpt.api.rest_routes.dashboard import router as dashboard_router
from cropgpt.api.rest_routes.scanner import router as scanner_router

load_dotenv()

app = FastAPI(title="CropGPT")

app.include_router(dashboard_router)
app.include_router(scanner_router)
app.include_router(chat_router)


@app.get("/")
async def root():
    return {"message": "Welcome to CropGPT, your agricultural assistant!"}
