"""Pydantic response models for the card service JSON API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    success: bool = True
    profile: dict[str, Any]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
