"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Event
    APP_TITLE: str = os.getenv("APP_TITLE", "Lucho & Caro")
    EVENT_DATE: str = os.getenv("EVENT_DATE", "18 de octubre de 2025")
    EVENT_VENUE: str = os.getenv("EVENT_VENUE", "Casino de Pimentel, Perú")
    
    # Search
    MAX_DISPLAY_RESULTS: int = 25
    
    # Guest list text format
    NAME_HEADER_SYNONYMS: List[str] = ["nombre", "invitado", "guest"]
    TABLE_HEADER_SYNONYMS: List[str] = ["mesa", "table"]
    EXPORT_NAME_HEADER: str = "nombre"
    EXPORT_TABLE_HEADER: str = "mesa"
    EXPORT_FILENAME: str = "invitados_mesas"
    
    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]
    
    # File limits
    MAX_UPLOAD_SIZE: int = 2 * 1024 * 1024  # 2MB
    
    class Config:
        env_file = ".env"

settings = Settings()
