"""Service Schemas — response shapes for the /api route group."""

from pydantic import BaseModel


class ApiHealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str
    version: str


class ApiInfoResponse(BaseModel):
    name: str
    description: str
    version: str
    environment: str


class HelloResponse(BaseModel):
    message: str
    timestamp: str
