# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Addison Kline

from datetime import timedelta

from pydantic import BaseModel


class StatusResponse(BaseModel):
    name: str
    version: str
    status: str
    uptime: timedelta


class ErrorResponse(BaseModel):
    detail: str


class LoadErrorResponse(BaseModel):
    error: str
