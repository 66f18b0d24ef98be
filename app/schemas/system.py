"""Schemas for the system settings endpoint (non-sensitive values only)."""

from typing import Optional

from pydantic import BaseModel


class AppGroup(BaseModel):
    name: str
    environment: str
    log_level: str
    port: int


class DatabaseGroup(BaseModel):
    database_host: Optional[str] = None
    database_driver: Optional[str] = None
    pool_size: int
    max_overflow: int


class GeneralGroup(BaseModel):
    is_production: bool


class RespondersGroup(BaseModel):
    timeout_seconds: float
    default_model: str


class SystemSettingsGrouped(BaseModel):
    app: AppGroup
    database: DatabaseGroup
    general: GeneralGroup
    responders: RespondersGroup
