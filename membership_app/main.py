import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from membership_app.routes import organization, registration, season, user

load_dotenv()

# Create FastAPI app
app = FastAPI(title="Membership API")

origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(season.router)
app.include_router(registration.router)
app.include_router(user.router)
app.include_router(organization.router)

@app.get("/ping")
def ping():
    return {"message": "pong"}
