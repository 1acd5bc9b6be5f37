"""
Description:
Module for adding CORS middleware to FastAPI application.

Arguments:
- app: FastAPI application instance to which CORS middleware will be added.

Returns:
- None, but modifies the app to allow cross-origin requests from the origins
  listed in CORS_ORIGINS (comma separated).

Dependencies:
- fastapi: For creating the FastAPI application and adding middleware.
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging information about the middleware setup.

Author: @kcaparas1630
"""

import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from loguru import logger

load_dotenv()

origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]

def add_cors_middleware(app: FastAPI):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added for {len(origins)} origins")
