"""
Configuration module.

Exports:
    settings: Application settings instance
    get_settings: Function to get settings
    get_supabase_client: Cached Supabase client (supabase backend only)
    catalogs: FABRICS, PROCESSES, STAGES and wizard constants
"""

from config.settings import settings, get_settings, Settings
from config.catalogs import (
    FABRICS,
    PROCESSES,
    STAGES,
    NO_MAJOR_FABRIC,
    TOTAL_STEPS,
    STEP_TITLES,
    STEP_DESCRIPTIONS,
)
from config.database import (
    get_supabase_client,
    reset_connection,
    ConnectionError
)

__all__ = [
    # Settings
    "settings",
    "get_settings",
    "Settings",

    # Catalogs
    "FABRICS",
    "PROCESSES",
    "STAGES",
    "NO_MAJOR_FABRIC",
    "TOTAL_STEPS",
    "STEP_TITLES",
    "STEP_DESCRIPTIONS",
    
    # Database
    "get_supabase_client",
    "reset_connection",
    "ConnectionError",
]
